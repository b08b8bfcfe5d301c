import numpy as np
from dataclasses import dataclass
from .utils import as_vector

def _frozen_vector(values) -> np.ndarray:
    vec = as_vector(values)
    vec.flags.writeable = False
    return vec

@dataclass(eq=False)
class SecretKey:
    vector: np.ndarray   # length n, entries in [0, q)
    n: int
    q: int

    def __post_init__(self):
        self.vector = _frozen_vector(self.vector)

@dataclass(eq=False)
class PublicKeyElement:
    vector: np.ndarray   # length n, entries in [0, q)
    scalar: int          # <vector, s> + e mod q

    def __post_init__(self):
        self.vector = _frozen_vector(self.vector)
        self.scalar = int(self.scalar)

@dataclass(eq=False)
class Ciphertext(PublicKeyElement):
    """Same shape as a public key sample; scalar carries the bit at offset 0 or q/2."""

@dataclass(eq=False)
class PublicKey:
    elements: tuple[PublicKeyElement, ...]   # m = floor(n ln q) samples
    n: int
    q: int

    def __post_init__(self):
        self.elements = tuple(self.elements)

    @property
    def m(self) -> int:
        return len(self.elements)
