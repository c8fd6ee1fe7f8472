import hashlib
import unittest

from hashpp.jit import md5_compress, numba_available
from hashpp.md5 import MD5, MD5_IV, compress_block
from hashpp.core import bytes_to_words_le


@unittest.skipUnless(numba_available(), "numba not installed")
class TestJitMD5(unittest.TestCase):
    def test_compress_matches_python(self) -> None:
        for seed in range(4):
            block = bytes((seed * 31 + i * 17) & 0xFF for i in range(64))
            self.assertEqual(md5_compress(MD5_IV, block), compress_block(MD5_IV, bytes_to_words_le(block)))

    def test_engine_uses_kernel(self) -> None:
        e = MD5(use_jit=True)
        self.assertTrue(e.jit_enabled)
        data = bytes(range(256)) * 9
        e.update(data)
        self.assertEqual(e.digest(), hashlib.md5(data).digest())

    def test_rejects_short_block(self) -> None:
        with self.assertRaises(ValueError):
            md5_compress(MD5_IV, b"\x00" * 63)


class TestJitOff(unittest.TestCase):
    def test_disabled_by_default(self) -> None:
        self.assertFalse(MD5(use_jit=False).jit_enabled)


if __name__ == "__main__":
    unittest.main()
