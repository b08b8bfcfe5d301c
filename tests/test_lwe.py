import math
import numpy as np
import pytest
from lwecrypt import (
    keygen, encrypt, decrypt, find_prime_in_range, LWEParams, Ciphertext,
    InvalidDimensionError, ModulusTooSmallError, ModulusNotPrimeError,
    InvalidMessageError, LengthMismatchError,
)

def test_keygen_shapes_and_ranges():
    secret, public = keygen(5, 29, rng=np.random.default_rng(0))
    assert secret.n == 5 and secret.q == 29
    assert len(secret.vector) == 5
    assert all(0 <= x < 29 for x in secret.vector)
    assert public.n == 5 and public.q == 29
    assert public.m == math.floor(5 * math.log(29)) == 16
    for el in public.elements:
        assert len(el.vector) == 5
        assert all(0 <= x < 29 for x in el.vector)
        assert 0 <= el.scalar < 29

def test_keygen_larger_parameters():
    params = LWEParams.for_dimension(20)
    secret, public = keygen(params.n, params.q, rng=1)
    assert len(secret.vector) == 20
    assert public.m == params.m
    assert all(0 <= el.scalar < params.q for el in public.elements)

def test_keygen_is_reproducible_with_seed():
    s1, p1 = keygen(5, 29, rng=7)
    s2, p2 = keygen(5, 29, rng=7)
    assert s1.vector.tolist() == s2.vector.tolist()
    assert [el.scalar for el in p1.elements] == [el.scalar for el in p2.elements]

def test_keygen_invalid_dimension():
    with pytest.raises(InvalidDimensionError):
        keygen(1, 29)
    with pytest.raises(InvalidDimensionError):
        keygen(0, 4)

def test_keygen_modulus_too_small():
    with pytest.raises(ModulusTooSmallError):
        keygen(5, 23)

def test_keygen_modulus_not_prime():
    with pytest.raises(ModulusNotPrimeError):
        keygen(5, 27)

def test_keygen_rejects_non_integer_parameters():
    with pytest.raises(ModulusNotPrimeError):
        keygen(5, 29.0)
    with pytest.raises(InvalidDimensionError):
        keygen(5.0, 29)

def test_keygen_errors_are_value_errors():
    with pytest.raises(ValueError):
        keygen(5, 26)

def test_key_material_is_read_only():
    secret, public = keygen(5, 29)
    with pytest.raises(ValueError):
        secret.vector[0] = 1
    with pytest.raises(ValueError):
        public.elements[0].vector[0] = 1

@pytest.mark.parametrize("message", [2, -1, "1", True, 0.5, None])
def test_encrypt_invalid_message(message):
    _, public = keygen(5, 29)
    with pytest.raises(InvalidMessageError):
        encrypt(public, message)

def test_ciphertext_shape():
    _, public = keygen(5, 29, rng=2)
    rng = np.random.default_rng(3)
    for bit in (0, 1):
        ct = encrypt(public, bit, rng)
        assert isinstance(ct, Ciphertext)
        assert len(ct.vector) == 5
        assert all(0 <= x < 29 for x in ct.vector)
        assert 0 <= ct.scalar < 29

def test_end_to_end_small_parameters(noiseless):
    q = find_prime_in_range(25, 50)
    assert q == 29
    secret, public = keygen(5, q, rng=11)
    assert decrypt(secret, encrypt(public, 1, rng=12)) == 1
    assert decrypt(secret, encrypt(public, 0, rng=13)) == 0

def test_noiseless_round_trip_is_exact(noiseless):
    secret, public = keygen(8, 67, rng=21)
    rng = np.random.default_rng(22)
    for bit in [0, 1] * 25:
        assert decrypt(secret, encrypt(public, bit, rng)) == bit

def test_round_trip_success_rate():
    params = LWEParams.for_dimension(200)
    rng = np.random.default_rng(2024)
    secret, public = keygen(params.n, params.q, rng)
    bits = [int(b) for b in rng.integers(0, 2, size=100)]
    correct = sum(decrypt(secret, encrypt(public, bit, rng)) == bit for bit in bits)
    assert correct >= 99

def test_decrypt_is_idempotent():
    secret, public = keygen(10, 101, rng=5)
    ct = encrypt(public, 1, rng=6)
    assert decrypt(secret, ct) == decrypt(secret, ct)

def test_decrypt_codewords():
    secret, _ = keygen(5, 29, rng=8)
    zero = np.zeros(5, dtype=object)
    assert decrypt(secret, Ciphertext(vector=zero, scalar=0)) == 0
    assert decrypt(secret, Ciphertext(vector=zero, scalar=14)) == 1
    assert decrypt(secret, Ciphertext(vector=zero, scalar=15)) == 1
    # distance 7 to both 0 and 14: tie goes to 0
    assert decrypt(secret, Ciphertext(vector=zero, scalar=7)) == 0
    assert decrypt(secret, Ciphertext(vector=zero, scalar=8)) == 1
    assert decrypt(secret, Ciphertext(vector=zero, scalar=22)) == 0

def test_decrypt_with_wrong_key_still_returns_bit():
    _, public = keygen(5, 29, rng=9)
    other_secret, _ = keygen(5, 29, rng=10)
    assert decrypt(other_secret, encrypt(public, 1)) in (0, 1)

def test_decrypt_length_mismatch():
    secret, _ = keygen(5, 29)
    with pytest.raises(LengthMismatchError):
        decrypt(secret, Ciphertext(vector=[1, 2, 3], scalar=4))
