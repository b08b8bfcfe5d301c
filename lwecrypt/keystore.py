import json
import secrets
from base64 import b64encode, b64decode
from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.primitives import hashes
from .errors import KeystoreError
from .keys import SecretKey
from .serialization import secret_key_to_dict, secret_key_from_dict

KDF_ITERATIONS = 100000

# -----------------------------
# Key Management
# -----------------------------
def _fernet_from_passphrase(passphrase: str, salt: bytes) -> Fernet:
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=salt,
        iterations=KDF_ITERATIONS,
    )
    return Fernet(b64encode(kdf.derive(passphrase.encode())))

def _write_keystore(keystore: dict, keystore_file: str):
    with open(keystore_file, "w") as kf:
        json.dump(keystore, kf)

def create_keystore(passphrase: str, keystore_file: str):
    salt = secrets.token_bytes(16)
    _write_keystore({"salt": b64encode(salt).decode(), "keys": {}}, keystore_file)

def load_keystore(passphrase: str, keystore_file: str):
    with open(keystore_file, "r") as kf:
        keystore = json.load(kf)
    salt = b64decode(keystore["salt"])
    return keystore, _fernet_from_passphrase(passphrase, salt)

def store_key_in_keystore(passphrase: str, key_name: str, secret_key: SecretKey, keystore_file: str):
    keystore, fernet = load_keystore(passphrase, keystore_file)
    payload = json.dumps(secret_key_to_dict(secret_key)).encode()
    keystore["keys"][key_name] = fernet.encrypt(payload).decode()
    _write_keystore(keystore, keystore_file)

def retrieve_key_from_keystore(passphrase: str, key_name: str, keystore_file: str) -> SecretKey:
    keystore, fernet = load_keystore(passphrase, keystore_file)
    if key_name not in keystore["keys"]:
        raise KeystoreError(f"Key {key_name} not found in keystore")
    try:
        decrypted_key = fernet.decrypt(keystore["keys"][key_name].encode())
    except InvalidToken as e:
        raise KeystoreError("Failed to decrypt key. Wrong passphrase?") from e
    return secret_key_from_dict(json.loads(decrypted_key.decode()))
