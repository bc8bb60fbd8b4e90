"""Hash-ordered red-black tree map."""

from .hash_map import HashTreeMap
from .utils.hashing import get_hash_func, sha1_hash

__all__ = ["HashTreeMap", "get_hash_func", "sha1_hash"]
