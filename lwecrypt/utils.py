# lwecrypt/utils.py
import math
from numbers import Integral
from typing import Optional
import numpy as np
from .errors import LengthMismatchError, InvalidRangeError
from .params import DTYPE

def as_vector(values) -> np.ndarray:
    """Copy values into a 1-D object array of python ints."""
    return np.array([int(x) for x in values], dtype=DTYPE)

def is_integer(x) -> bool:
    return isinstance(x, Integral) and not isinstance(x, bool)

def _coerce(v) -> np.ndarray:
    if isinstance(v, np.ndarray) and v.dtype == DTYPE:
        return v
    return as_vector(v)

def mod(a: int, q: int) -> int:
    return ((a % q) + q) % q

def mod_vector(v: np.ndarray, q: int) -> np.ndarray:
    return as_vector(mod(int(x), q) for x in v)

def _check_lengths(a, b):
    if len(a) != len(b):
        raise LengthMismatchError(f"Vectors must have the same length ({len(a)} != {len(b)})")

def sum_vectors(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    _check_lengths(a, b)
    return _coerce(a) + _coerce(b)

def dot_product(a: np.ndarray, b: np.ndarray) -> int:
    _check_lengths(a, b)
    # object dtype keeps the sum exact; no reduction here
    return int(np.dot(_coerce(a), _coerce(b))) if len(a) else 0

def is_prime(k: int) -> bool:
    if k < 2:
        return False
    if k == 2:
        return True
    if k % 2 == 0:
        return False
    limit = math.isqrt(k)
    for d in range(3, limit + 1, 2):
        if k % d == 0:
            return False
    return True

def find_prime_in_range(a: int, b: int) -> Optional[int]:
    """Smallest prime in [a, b], or None if the range holds none."""
    if not is_integer(a) or not is_integer(b):
        raise InvalidRangeError("a and b must be integers")
    if a > b:
        raise InvalidRangeError("a must be less than or equal to b")
    for k in range(max(a, 2), b + 1):
        if is_prime(k):
            return k
    return None
