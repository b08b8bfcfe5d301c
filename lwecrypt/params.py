import math
from dataclasses import dataclass
from .errors import (
    InvalidDimensionError, ModulusTooSmallError, ModulusNotPrimeError, LWEError,
)

# -----------------------------
# CLI Colors
# -----------------------------
class bcolors:
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    GREY = '\033[90m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'

DTYPE = object  # exact python ints, sums never overflow
MAX_NORMAL_ATTEMPTS = 1000  # rejected (u, v) pairs before sample_normal gives up

@dataclass(frozen=True)
class LWEParams:
    n: int = 10  # secret dimension
    q: int = 101  # prime modulus, q >= n^2

    @property
    def m(self) -> int:
        """Number of public key samples, floor(n ln q)."""
        return math.floor(self.n * math.log(self.q))

    @property
    def alpha(self) -> float:
        return 1 / (math.sqrt(self.n) * math.log(self.n) ** 2)

    @property
    def noise_scale(self) -> int:
        return math.floor(self.alpha * self.q)

    def validate(self) -> "LWEParams":
        from .utils import is_prime, is_integer
        if not is_integer(self.n):
            raise InvalidDimensionError("n must be an integer")
        if not is_integer(self.q):
            raise ModulusNotPrimeError("q must be an integer")
        if self.n <= 1:
            raise InvalidDimensionError("n must be greater than 1")
        if self.q < self.n * self.n:
            raise ModulusTooSmallError("q must be greater than n^2")
        if not is_prime(self.q):
            raise ModulusNotPrimeError("q must be a prime number")
        return self

    @classmethod
    def for_dimension(cls, n: int) -> "LWEParams":
        """Pick q as the smallest prime in [n^2, 2n^2]."""
        from .utils import find_prime_in_range
        if n <= 1:
            raise InvalidDimensionError("n must be greater than 1")
        lower, upper = n * n, 2 * n * n
        q = find_prime_in_range(lower, upper)
        if q is None:
            raise LWEError(f"No prime found in range [{lower}, {upper}]")
        return cls(n=n, q=q)
