import numpy as np
import pytest
from lwecrypt import (
    mod, mod_vector, sum_vectors, dot_product, is_prime, find_prime_in_range,
    LengthMismatchError, InvalidRangeError,
)

def reference_primes(limit: int) -> set:
    sieve = [True] * (limit + 1)
    sieve[0] = sieve[1] = False
    for i in range(2, int(limit ** 0.5) + 1):
        if sieve[i]:
            for j in range(i * i, limit + 1, i):
                sieve[j] = False
    return {i for i, p in enumerate(sieve) if p}

def test_mod_negative():
    assert mod(-1, 5) == 4
    assert mod(-10, 5) == 0
    assert mod(7, 5) == 2

def test_mod_always_in_range():
    for q in range(1, 13):
        for a in range(-50, 50):
            r = mod(a, q)
            assert 0 <= r < q
            assert (r - a) % q == 0

def test_mod_vector_returns_new_vector():
    v = np.array([-1, 5, 12, 0], dtype=object)
    out = mod_vector(v, 5)
    assert out.tolist() == [4, 0, 2, 0]
    assert out is not v
    assert v.tolist() == [-1, 5, 12, 0]

def test_sum_vectors():
    assert sum_vectors([1, 2, 3], [4, 5, 6]).tolist() == [5, 7, 9]

def test_sum_vectors_length_mismatch():
    with pytest.raises(LengthMismatchError):
        sum_vectors([1, 2, 3], [1, 2])

def test_dot_product():
    assert dot_product([1, 2, 3], [4, 5, 6]) == 32
    assert dot_product([], []) == 0

def test_dot_product_is_exact_for_large_values():
    a = [2 ** 70, 3]
    b = [2 ** 70, 5]
    assert dot_product(a, b) == 2 ** 140 + 15

def test_dot_product_length_mismatch():
    with pytest.raises(LengthMismatchError):
        dot_product([1], [1, 2])

def test_length_mismatch_is_value_error():
    with pytest.raises(ValueError):
        dot_product([1, 2], [1])

def test_is_prime_matches_sieve():
    primes = reference_primes(10000)
    for k in range(0, 10001):
        assert is_prime(k) == (k in primes), k

def test_is_prime_examples():
    assert is_prime(97)
    assert not is_prime(100)
    assert not is_prime(1)
    assert not is_prime(-7)
    assert is_prime(2)

def test_find_prime_in_range():
    assert find_prime_in_range(10, 20) == 11
    assert find_prime_in_range(2, 2) == 2
    assert find_prime_in_range(25, 50) == 29
    assert find_prime_in_range(-5, 3) == 2

def test_find_prime_in_range_not_found():
    assert find_prime_in_range(8, 10) is None
    assert find_prime_in_range(0, 1) is None

def test_find_prime_in_range_invalid():
    with pytest.raises(InvalidRangeError):
        find_prime_in_range(20, 10)
    with pytest.raises(InvalidRangeError):
        find_prime_in_range(1.5, 10)
    with pytest.raises(InvalidRangeError):
        find_prime_in_range(1, "10")
