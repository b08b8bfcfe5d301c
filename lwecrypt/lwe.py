# lwecrypt/lwe.py
from .errors import InvalidMessageError
from .keys import SecretKey, PublicKey, PublicKeyElement, Ciphertext
from .params import LWEParams
from .sampling import make_rng, sample_normal, sample_uniform_vector, choose_random_subset
from .utils import mod, mod_vector, sum_vectors, dot_product, is_integer

def keygen(n: int, q: int, rng=None) -> tuple[SecretKey, PublicKey]:
    """Generate an LWE key pair for dimension n and prime modulus q >= n^2."""
    params = LWEParams(n=n, q=q).validate()
    rng = make_rng(rng)
    secret = SecretKey(vector=sample_uniform_vector(q, n, rng), n=n, q=q)
    sigma = params.noise_scale
    elements = []
    for _ in range(params.m):
        vector = sample_uniform_vector(q, n, rng)
        error = sample_normal(sigma, rng)
        scalar = mod(dot_product(vector, secret.vector) + error, q)
        elements.append(PublicKeyElement(vector=vector, scalar=scalar))
    return secret, PublicKey(elements=elements, n=n, q=q)

def encrypt(public_key: PublicKey, message: int, rng=None) -> Ciphertext:
    """Encrypt a single bit under public_key."""
    if not is_integer(message) or message not in (0, 1):
        raise InvalidMessageError("Message must be 0 or 1")
    q = public_key.q
    subset = choose_random_subset(public_key.elements, rng)
    vector = subset[0].vector
    scalar = subset[0].scalar
    for element in subset[1:]:
        vector = sum_vectors(vector, element.vector)
        scalar += element.scalar
    if message == 1:
        scalar += q // 2
    return Ciphertext(vector=mod_vector(vector, q), scalar=mod(scalar, q))

def decrypt(secret_key: SecretKey, ciphertext: Ciphertext) -> int:
    """Recover the bit by nearest-codeword decoding on Z/qZ (codewords 0 and q/2).

    Always returns a bit; a wrong key or corrupted ciphertext gives a wrong bit,
    not an error. Ties go to 0.
    """
    q = secret_key.q
    noisy = mod(ciphertext.scalar - dot_product(ciphertext.vector, secret_key.vector), q)
    half = q // 2
    dist_to_zero = min(noisy, q - noisy)
    dist_to_half = min(mod(noisy - half, q), mod(half - noisy, q))
    return 1 if dist_to_half < dist_to_zero else 0
