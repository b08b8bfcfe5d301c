# lwecrypt/sampling.py
"""Random sampling for key generation and encryption.

Every sampler takes ``rng``: a ``numpy.random.Generator``, an integer seed, or
None for fresh OS entropy. Passing the same Generator through a whole keygen or
encryption makes it reproducible. The generator is a general purpose PRNG,
not a CSPRNG.
"""
import math
from typing import Sequence, TypeVar
import numpy as np
from .errors import InvalidSampleParameterError, SamplingError
from .params import MAX_NORMAL_ATTEMPTS
from .utils import as_vector, is_integer

T = TypeVar("T")

def make_rng(rng=None) -> np.random.Generator:
    # default_rng passes an existing Generator through unchanged
    return np.random.default_rng(rng)

def sample_uniform(q: int, rng=None) -> int:
    """Uniform integer in {0, ..., q-1}."""
    if not is_integer(q) or q <= 0:
        raise InvalidSampleParameterError("q must be a positive integer")
    return int(make_rng(rng).integers(0, q))

def sample_uniform_vector(q: int, n: int, rng=None) -> np.ndarray:
    """n independent uniform samples from {0, ..., q-1}."""
    if not is_integer(n) or n <= 0:
        raise InvalidSampleParameterError("n must be a positive integer")
    if not is_integer(q) or q <= 0:
        raise InvalidSampleParameterError("q must be a positive integer")
    return as_vector(make_rng(rng).integers(0, q, size=n))

def sample_normal(s: float, rng=None, max_attempts: int = MAX_NORMAL_ATTEMPTS) -> int:
    """Integer draw from N(0, s^2) via the Marsaglia polar method.

    Pairs (u, v) outside the open unit disc (or at the origin) are rejected,
    about 21% of the time. After ``max_attempts`` rejections a SamplingError
    is raised instead of looping forever.
    """
    if s <= 0:
        raise InvalidSampleParameterError("Standard deviation must be positive")
    rng = make_rng(rng)
    for _ in range(max_attempts):
        u = 2 * rng.random() - 1
        v = 2 * rng.random() - 1
        w = u * u + v * v
        if 0 < w < 1:
            z0 = u * math.sqrt(-2 * math.log(w) / w)
            # round half up
            return math.floor(z0 * s + 0.5)
    raise SamplingError(f"No normal sample accepted after {max_attempts} attempts")

def choose_random_subset(items: Sequence[T], rng=None) -> list[T]:
    """Keep each item with probability 1/2, in order.

    An empty draw falls back to a single uniformly chosen item, so the result
    is never empty for non-empty input. This is not uniform over non-empty
    subsets: singletons are slightly favoured.
    """
    if len(items) == 0:
        return []
    rng = make_rng(rng)
    coins = rng.random(len(items)) < 0.5
    res = [item for item, keep in zip(items, coins) if keep]
    if not res:
        res.append(items[int(rng.integers(0, len(items)))])
    return res
