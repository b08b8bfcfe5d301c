# lwecrypt/__init__.py
from .params import DTYPE, LWEParams, MAX_NORMAL_ATTEMPTS
from .errors import (
    LWEError, InvalidDimensionError, ModulusTooSmallError, ModulusNotPrimeError,
    InvalidMessageError, LengthMismatchError, InvalidSampleParameterError,
    InvalidRangeError, SamplingError, SerializationError, KeystoreError,
)
from .utils import mod, mod_vector, sum_vectors, dot_product, is_prime, find_prime_in_range
from .sampling import (
    make_rng, sample_uniform, sample_uniform_vector, sample_normal, choose_random_subset,
)
from .keys import SecretKey, PublicKeyElement, PublicKey, Ciphertext
from .lwe import keygen, encrypt, decrypt
from .serialization import (
    secret_key_to_dict, secret_key_from_dict,
    public_key_to_dict, public_key_from_dict,
    ciphertext_to_dict, ciphertext_from_dict, ciphertexts_from_list,
    write_key_json, read_secret_key, read_public_key,
    write_ciphertexts_json, read_ciphertexts,
)
from .keystore import create_keystore, load_keystore, store_key_in_keystore, retrieve_key_from_keystore
from .public_api import (
    generate_modulus, generate_keys,
    encrypt_bits, decrypt_bits,
    generate_keys_to_files, encrypt_bits_to_file, decrypt_file,
)
