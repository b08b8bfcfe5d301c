import json
from typing import Union
from .errors import LWEError, SerializationError
from .keys import SecretKey, PublicKey, PublicKeyElement, Ciphertext
from .params import LWEParams
from .utils import is_integer

# -----------------------------
# Dict Helpers
# -----------------------------
def _int_list(vec) -> list:
    return [int(x) for x in vec.tolist()]

def _require_vector(obj: dict, what: str) -> list:
    vec = obj.get("vector") if isinstance(obj, dict) else None
    if not isinstance(vec, list) or not all(is_integer(x) for x in vec):
        raise SerializationError(f"Invalid {what}: 'vector' must be a list of integers")
    return vec

def _require_int(obj: dict, field: str, what: str) -> int:
    value = obj.get(field)
    if not is_integer(value):
        raise SerializationError(f"Invalid {what}: '{field}' must be an integer")
    return value

def _require_params(n: int, q: int, what: str):
    try:
        LWEParams(n=n, q=q).validate()
    except LWEError as e:
        raise SerializationError(f"Invalid {what}: {e}") from e

def _require_reduced(values, q: int, what: str):
    if any(not 0 <= x < q for x in values):
        raise SerializationError(f"Invalid {what}: values must lie in [0, {q})")

def secret_key_to_dict(sk: SecretKey) -> dict:
    return {"vector": _int_list(sk.vector), "n": sk.n, "q": sk.q}

def secret_key_from_dict(obj: dict) -> SecretKey:
    vector = _require_vector(obj, "secret key")
    n = _require_int(obj, "n", "secret key")
    q = _require_int(obj, "q", "secret key")
    if len(vector) != n:
        raise SerializationError(f"Invalid secret key: vector has {len(vector)} entries, expected n={n}")
    _require_params(n, q, "secret key")
    _require_reduced(vector, q, "secret key")
    return SecretKey(vector=vector, n=n, q=q)

def ciphertext_to_dict(ct: Union[Ciphertext, PublicKeyElement]) -> dict:
    return {"vector": _int_list(ct.vector), "scalar": int(ct.scalar)}

def ciphertext_from_dict(obj: dict) -> Ciphertext:
    vector = _require_vector(obj, "ciphertext")
    scalar = _require_int(obj, "scalar", "ciphertext")
    return Ciphertext(vector=vector, scalar=scalar)

def public_key_to_dict(pk: PublicKey) -> dict:
    return {
        "elements": [ciphertext_to_dict(el) for el in pk.elements],
        "n": pk.n,
        "q": pk.q,
    }

def public_key_from_dict(obj: dict) -> PublicKey:
    if not isinstance(obj, dict) or not isinstance(obj.get("elements"), list):
        raise SerializationError("Invalid public key: 'elements' must be a list")
    n = _require_int(obj, "n", "public key")
    q = _require_int(obj, "q", "public key")
    _require_params(n, q, "public key")
    elements = []
    for raw in obj["elements"]:
        vector = _require_vector(raw, "public key element")
        if len(vector) != n:
            raise SerializationError(f"Invalid public key element: vector has {len(vector)} entries, expected n={n}")
        scalar = _require_int(raw, "scalar", "public key element")
        _require_reduced(vector + [scalar], q, "public key element")
        elements.append(PublicKeyElement(vector=vector, scalar=scalar))
    if not elements:
        raise SerializationError("Invalid public key: no elements")
    return PublicKey(elements=elements, n=n, q=q)

def ciphertexts_from_list(items: list) -> list[Ciphertext]:
    if not isinstance(items, list):
        raise SerializationError("Ciphertexts must be a JSON array of objects with 'vector' and 'scalar' fields")
    return [ciphertext_from_dict(item) for item in items]

# -----------------------------
# File Helpers
# -----------------------------
def _load_json(path: str):
    with open(path, "r") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise SerializationError(f"{path} is not valid JSON: {e}") from e

def write_key_json(path: str, key: Union[SecretKey, PublicKey]):
    payload = secret_key_to_dict(key) if isinstance(key, SecretKey) else public_key_to_dict(key)
    with open(path, "w") as f:
        json.dump(payload, f, indent=2)

def read_secret_key(path: str) -> SecretKey:
    return secret_key_from_dict(_load_json(path))

def read_public_key(path: str) -> PublicKey:
    return public_key_from_dict(_load_json(path))

def write_ciphertexts_json(path: str, ciphertexts: list):
    with open(path, "w") as f:
        json.dump([ciphertext_to_dict(ct) for ct in ciphertexts], f, indent=2)

def read_ciphertexts(path: str) -> list[Ciphertext]:
    return ciphertexts_from_list(_load_json(path))
