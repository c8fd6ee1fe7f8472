import os
import unittest
from unittest import mock

from hashpp.config import Settings, jit_requested
from hashpp.digests import hexdigest
from hashpp.engine import DEFAULT_CHUNK_SIZE


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        s = Settings.from_env({})
        self.assertEqual(s.chunk_size, DEFAULT_CHUNK_SIZE)
        self.assertEqual(DEFAULT_CHUNK_SIZE, 1024 * 1024)
        self.assertFalse(s.use_jit)

    def test_chunk_size(self) -> None:
        self.assertEqual(Settings.from_env({"HASHPP_CHUNK_SIZE": "4096"}).chunk_size, 4096)
        self.assertEqual(Settings.from_env({"HASHPP_CHUNK_SIZE": "0x100"}).chunk_size, 256)
        for bad in ("0", "-5", "big"):
            with self.assertRaises(ValueError):
                Settings.from_env({"HASHPP_CHUNK_SIZE": bad})

    def test_jit_flag(self) -> None:
        for raw in ("1", "true", "YES", "on"):
            self.assertTrue(Settings.from_env({"HASHPP_JIT": raw}).use_jit)
        for raw in ("", "0", "no"):
            self.assertFalse(Settings.from_env({"HASHPP_JIT": raw}).use_jit)

    def test_jit_requested_ignores_chunk_size(self) -> None:
        self.assertTrue(jit_requested({"HASHPP_JIT": "1", "HASHPP_CHUNK_SIZE": "big"}))
        self.assertFalse(jit_requested({"HASHPP_CHUNK_SIZE": "big"}))

    def test_bad_chunk_size_does_not_break_hashing(self) -> None:
        with mock.patch.dict(os.environ, {"HASHPP_CHUNK_SIZE": "big"}):
            self.assertEqual(hexdigest("md5", b"abc"), "900150983cd24fb0d6963f7d28e17f72")
            with self.assertRaises(ValueError):
                Settings.from_env()


if __name__ == "__main__":
    unittest.main()
