import os
import sys
import unittest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from hashtree import HashTreeMap
from hashtree.utils.hashing import (
    HASH_FUNCTIONS,
    get_hash_func,
    identity_hash,
    sha1_hash,
    to_int64,
)


class HashingTest(unittest.TestCase):
    def test_digest_hashes_are_signed_64_bit(self):
        for name, func in HASH_FUNCTIONS.items():
            if name == "identity":
                continue
            for key in ("a", "b", 12345, ("t", 1)):
                h = func(key)
                self.assertIsInstance(h, int)
                self.assertGreaterEqual(h, -(1 << 63))
                self.assertLess(h, 1 << 63)
                self.assertEqual(h, func(key))

    def test_sha1_known_value(self):
        # sha1("abc") starts with a9993e364706816a
        self.assertEqual(sha1_hash("abc"), to_int64(0xA9993E364706816A))
        self.assertLess(sha1_hash("abc"), 0)

    def test_to_int64_wraps(self):
        self.assertEqual(to_int64(1 << 63), -(1 << 63))
        self.assertEqual(to_int64((1 << 64) + 5), 5)
        self.assertEqual(to_int64(-1), -1)
        self.assertEqual(identity_hash(7), 7)

    def test_get_hash_func(self):
        self.assertIs(get_hash_func("sha1"), sha1_hash)
        with self.assertRaises(ValueError):
            get_hash_func("crc32")

    def test_map_with_registered_hash(self):
        m = HashTreeMap(get_hash_func("md5"))
        for i in range(100):
            m.insert(f"key-{i}", i)
        for i in range(100):
            self.assertEqual(m.get(f"key-{i}"), (i, True))
        self.assertEqual(len(m), 100)


if __name__ == "__main__":
    unittest.main()
