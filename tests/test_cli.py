import contextlib
import hashlib
import io
import tempfile
import unittest
from pathlib import Path

from hashpp.cli import main


def run(*argv):
    out = io.StringIO()
    err = io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        rc = main(list(argv))
    return rc, out.getvalue(), err.getvalue()


class TestCLI(unittest.TestCase):
    def test_hash(self) -> None:
        rc, out, _ = run("hash", "-a", "md5", "abc")
        self.assertEqual(rc, 0)
        self.assertEqual(out.strip(), "900150983cd24fb0d6963f7d28e17f72  abc")

    def test_hash_default_and_many_algorithms(self) -> None:
        rc, out, _ = run("hash", "abc")
        self.assertEqual(out.split()[0], hashlib.sha256(b"abc").hexdigest())
        rc, out, _ = run("hash", "-a", "md5", "-a", "sha1", "abc", "x")
        lines = out.splitlines()
        self.assertEqual(len(lines), 4)
        self.assertTrue(lines[0].startswith("MD5 "))
        self.assertTrue(lines[2].startswith("SHA1 "))

    def test_unknown_algorithm(self) -> None:
        rc, out, err = run("hash", "-a", "whirlpool", "abc")
        self.assertEqual(rc, 1)
        self.assertEqual(out, "")
        self.assertIn("whirlpool", err)

    def test_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            p = Path(tmp) / "f.bin"
            p.write_bytes(b"hello")
            rc, out, _ = run("file", "-a", "sha1", tmp)
            self.assertEqual(rc, 0)
            self.assertEqual(out.strip(), f"{hashlib.sha1(b'hello').hexdigest()}  {p}")
            rc, _, err = run("file", str(Path(tmp) / "missing"))
            self.assertEqual(rc, 1)
            self.assertIn("missing", err)

    def test_hmac(self) -> None:
        rc, out, _ = run("hmac", "-a", "sha256", "-k", "Jefe", "what do ya want for nothing?")
        self.assertEqual(rc, 0)
        self.assertTrue(out.startswith("5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843  "))

    def test_verify_core(self) -> None:
        rc, out, _ = run("verify-core")
        self.assertEqual(rc, 0)
        self.assertIn("verify-core: PASS", out)

    def test_list(self) -> None:
        rc, out, _ = run("list")
        self.assertEqual(rc, 0)
        self.assertEqual(len(out.splitlines()), 10)
        self.assertIn("SHA2-512-224", out)


if __name__ == "__main__":
    unittest.main()
