# lwecrypt/public_api.py
from typing import Optional, Sequence
from .errors import InvalidMessageError, KeystoreError, LWEError
from .keys import SecretKey, PublicKey, Ciphertext
from .keystore import store_key_in_keystore, retrieve_key_from_keystore
from .lwe import keygen, encrypt, decrypt
from .params import LWEParams
from .sampling import make_rng
from .serialization import (
    write_key_json, read_public_key, read_secret_key,
    write_ciphertexts_json, read_ciphertexts,
)

def generate_modulus(n: int) -> int:
    """Smallest prime q in [n^2, 2n^2]."""
    return LWEParams.for_dimension(n).q

def generate_keys(n: int, q: Optional[int] = None, rng=None) -> tuple[SecretKey, PublicKey]:
    if q is None:
        q = generate_modulus(n)
    return keygen(n, q, rng)

def encrypt_bits(public_key: PublicKey, bits: str, rng=None) -> list[Ciphertext]:
    """Encrypt a string of '0'/'1' characters, one ciphertext per bit."""
    bits = bits.strip()
    if not bits or any(c not in "01" for c in bits):
        raise InvalidMessageError("Message must be a non-empty binary string")
    rng = make_rng(rng)
    return [encrypt(public_key, int(c), rng) for c in bits]

def decrypt_bits(secret_key: SecretKey, ciphertexts: Sequence[Ciphertext]) -> str:
    return "".join(str(decrypt(secret_key, ct)) for ct in ciphertexts)

# -----------------------------
# File Flows
# -----------------------------
def _use_keystore(keystore: Optional[str], passphrase: Optional[str], key_name: Optional[str]) -> bool:
    if not keystore:
        return False
    if not passphrase or not key_name:
        raise KeystoreError("Keystore needs both a passphrase and a key name")
    return True

def generate_keys_to_files(n: int, q: Optional[int] = None, pubfile: str = "lwe_pub.json",
                           secfile: Optional[str] = "lwe_sec.json", keystore: Optional[str] = None,
                           passphrase: Optional[str] = None, key_name: Optional[str] = None, rng=None) -> tuple[SecretKey, PublicKey]:
    use_keystore = _use_keystore(keystore, passphrase, key_name)
    if not use_keystore and not secfile:
        raise LWEError("Secret key filename required when no keystore is given")
    secret, public = generate_keys(n, q, rng)
    write_key_json(pubfile, public)
    if use_keystore:
        store_key_in_keystore(passphrase, key_name, secret, keystore)
        print(f"LWE keys generated (n={public.n}, q={public.q}, m={public.m}): {pubfile} (public), secret stored in keystore")
    else:
        write_key_json(secfile, secret)
        print(f"LWE keys generated (n={public.n}, q={public.q}, m={public.m}): {pubfile} (public), {secfile} (secret)")
    return secret, public

def encrypt_bits_to_file(pubfile: str, bits: str, out_file: str = "lwe_enc.json", rng=None) -> str:
    public = read_public_key(pubfile)
    ciphertexts = encrypt_bits(public, bits, rng)
    write_ciphertexts_json(out_file, ciphertexts)
    print(f"Encrypted {len(ciphertexts)} bit(s) to {out_file}")
    return out_file

def decrypt_file(encfile: str, secfile: Optional[str] = None, keystore: Optional[str] = None,
                 passphrase: Optional[str] = None, key_name: Optional[str] = None) -> str:
    if _use_keystore(keystore, passphrase, key_name):
        secret = retrieve_key_from_keystore(passphrase, key_name, keystore)
    elif secfile:
        secret = read_secret_key(secfile)
    else:
        raise LWEError("Secret key filename required when no keystore is given")
    bits = decrypt_bits(secret, read_ciphertexts(encfile))
    print("Decrypted bits:", bits)
    return bits
