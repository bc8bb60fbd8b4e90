from .hashing import (
    HASH_FUNCTIONS,
    blake2b_hash,
    get_hash_func,
    identity_hash,
    md5_hash,
    sha1_hash,
    to_int64,
)
