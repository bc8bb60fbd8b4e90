"""Deterministic hash functions that return signed 64-bit integers."""

import hashlib

_INT64_MASK = (1 << 64) - 1
_INT64_SIGN = 1 << 63


def to_int64(value: int) -> int:
    """Wrap ``value`` into the signed 64-bit range."""
    value &= _INT64_MASK
    return value - (1 << 64) if value & _INT64_SIGN else value


def _digest_hash(algorithm: str, key) -> int:
    digest = hashlib.new(algorithm, str(key).encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big", signed=True)


def sha1_hash(key) -> int:
    return _digest_hash("sha1", key)


def md5_hash(key) -> int:
    return _digest_hash("md5", key)


def blake2b_hash(key) -> int:
    return _digest_hash("blake2b", key)


def identity_hash(key) -> int:
    """Use an integer key as its own hash."""
    return to_int64(int(key))


HASH_FUNCTIONS = {
    "sha1": sha1_hash,
    "md5": md5_hash,
    "blake2b": blake2b_hash,
    "identity": identity_hash,
}


def get_hash_func(name: str):
    """Return the hash function registered under ``name``."""
    try:
        return HASH_FUNCTIONS[name]
    except KeyError:
        raise ValueError(f"unknown hash function: {name}") from None
