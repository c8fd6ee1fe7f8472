import hashlib
import os
import tempfile
import unittest
from pathlib import Path

from hashpp import api
from hashpp.algorithms import Algorithm, UnsupportedAlgorithmError
from hashpp.containers import (
    Container,
    DataContainer,
    FilePathsContainer,
    Hash,
    HashCollection,
    HMACDataContainer,
)
from hashpp.files import hash_file, iter_files


class TestAlgorithmNames(unittest.TestCase):
    def test_parse_spellings(self) -> None:
        self.assertIs(Algorithm.parse("SHA2-512-224"), Algorithm.SHA2_512_224)
        self.assertIs(Algorithm.parse("sha512/224"), Algorithm.SHA2_512_224)
        self.assertIs(Algorithm.parse("sha256"), Algorithm.SHA2_256)
        self.assertIs(Algorithm.parse("SHA2_384"), Algorithm.SHA2_384)
        self.assertIs(Algorithm.parse(" md5 "), Algorithm.MD5)
        self.assertIs(Algorithm.parse(Algorithm.MD2), Algorithm.MD2)

    def test_unknown_name(self) -> None:
        with self.assertRaises(UnsupportedAlgorithmError):
            Algorithm.parse("whirlpool")
        with self.assertRaises(UnsupportedAlgorithmError):
            Algorithm.parse(5)

    def test_sizes(self) -> None:
        self.assertEqual(str(Algorithm.SHA2_512_256), "SHA2-512-256")
        self.assertEqual(Algorithm.MD2.block_size, 16)
        self.assertEqual(Algorithm.SHA2_384.digest_size, 48)


class TestContainers(unittest.TestCase):
    def test_hash_value(self) -> None:
        self.assertFalse(Hash().valid())
        h = Hash("abcd")
        self.assertTrue(h.valid())
        self.assertEqual(str(h), "abcd")
        self.assertEqual(h, "abcd")
        self.assertEqual(h, Hash("abcd"))

    def test_collection_has_every_algorithm(self) -> None:
        hc = HashCollection()
        self.assertEqual([name for name, _ in hc], [a.display_name for a in Algorithm])
        self.assertEqual(len(hc), 0)
        hc.add(Algorithm.SHA1, "00")
        self.assertEqual(hc["SHA1"], ["00"])
        self.assertEqual(hc[Algorithm.SHA1], ["00"])
        self.assertTrue(hc.valid("SHA1"))
        self.assertFalse(hc.valid("MD5"))
        self.assertEqual(hc["nope"], [])
        self.assertEqual(len(hc), 1)
        self.assertEqual(hc.to_dict()["SHA1"], ["00"])

    def test_collection_returns_copies(self) -> None:
        hc = HashCollection({Algorithm.MD5: ["aa"]})
        hc["MD5"].append("bb")
        self.assertEqual(hc["MD5"], ["aa"])

    def test_container_setters(self) -> None:
        c = Container.of("md5", "a")
        self.assertIs(c.algorithm, Algorithm.MD5)
        c.set_algorithm("sha1")
        self.assertIs(c.algorithm, Algorithm.SHA1)
        c.set_data(["x", "y"])
        self.assertEqual(c.data, ["x", "y"])
        c.set_data("p", "q")
        c.append_data("r", ["s", "t"])
        self.assertEqual(c.data, ["p", "q", "r", "s", "t"])
        c.set_key(b"k")
        self.assertEqual(c.key, b"k")
        self.assertIs(DataContainer, Container)
        self.assertIs(FilePathsContainer, Container)
        self.assertIs(HMACDataContainer, Container)

    def test_container_rejects_unknown_algorithm(self) -> None:
        with self.assertRaises(UnsupportedAlgorithmError):
            Container("nope", ["a"])


class TestHighLevel(unittest.TestCase):
    def test_get_hash(self) -> None:
        self.assertEqual(api.get_hash(Algorithm.MD5, "abc"), "900150983cd24fb0d6963f7d28e17f72")
        self.assertEqual(api.get_hash("sha1", b"abc"), hashlib.sha1(b"abc").hexdigest())
        self.assertEqual(api.get_hash("sha256", "é"), hashlib.sha256("é".encode("utf-8")).hexdigest())

    def test_get_hash_from_bytes(self) -> None:
        raw = hashlib.sha256(b"x").digest()
        self.assertEqual(api.get_hash_from_bytes(Algorithm.SHA2_256, raw), raw.hex())
        with self.assertRaises(ValueError):
            api.get_hash_from_bytes(Algorithm.MD5, raw)

    def test_get_hashes(self) -> None:
        hc = api.get_hashes(
            [
                DataContainer.of("MD5", "a", "b"),
                ("SHA2-256", ["a"]),
                DataContainer.of("MD5", "c"),
            ]
        )
        self.assertEqual(hc["MD5"], [hashlib.md5(x).hexdigest() for x in (b"a", b"b", b"c")])
        self.assertEqual(hc["SHA2-256"], [hashlib.sha256(b"a").hexdigest()])
        self.assertEqual(hc["SHA1"], [])

    def test_get_hashes_single_container(self) -> None:
        hc = api.get_hashes(DataContainer.of("sha1", "abc"))
        self.assertEqual(hc["SHA1"], ["a9993e364706816aba3e25717850c26c9cd0d89d"])

    def test_single_pair(self) -> None:
        hc = api.get_hashes(("MD5", ["abc"]))
        self.assertEqual(hc["MD5"], ["900150983cd24fb0d6963f7d28e17f72"])
        hc = api.get_hashes((Algorithm.SHA1, ("abc", "")))
        self.assertEqual(hc["SHA1"], [hashlib.sha1(b"abc").hexdigest(), hashlib.sha1(b"").hexdigest()])

    def test_get_hmac(self) -> None:
        self.assertEqual(
            api.get_hmac("SHA2-256", "Jefe", "what do ya want for nothing?"),
            "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843",
        )
        hc = api.get_hmacs([HMACDataContainer.of("MD5", "what do ya want for nothing?", "", key="Jefe")])
        self.assertEqual(hc["MD5"][0], "750c783e6ab0b503eaa86e310a5db738")
        self.assertEqual(len(hc["MD5"]), 2)


class TestFiles(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        (self.root / "b").mkdir()
        (self.root / "b" / "z.txt").write_bytes(b"zz")
        (self.root / "b" / "a.txt").write_bytes(b"aa")
        (self.root / "a.bin").write_bytes(bytes(range(256)) * 10)
        (self.root / "empty").write_bytes(b"")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_get_file_hash(self) -> None:
        p = self.root / "a.bin"
        self.assertEqual(api.get_file_hash("sha1", p), hashlib.sha1(p.read_bytes()).hexdigest())
        self.assertEqual(api.get_file_hash("md5", str(self.root / "empty")), hashlib.md5(b"").hexdigest())

    def test_missing_or_directory_gives_empty_hash(self) -> None:
        self.assertFalse(api.get_file_hash("md5", self.root / "missing").valid())
        self.assertFalse(api.get_file_hash("md5", self.root).valid())

    def test_chunk_size_does_not_matter(self) -> None:
        p = self.root / "a.bin"
        ref = hashlib.sha256(p.read_bytes()).digest()
        for cs in (1, 100, 1 << 20):
            self.assertEqual(hash_file(Algorithm.SHA2_256, p, chunk_size=cs), ref)

    def test_iter_files_sorted_and_recursive(self) -> None:
        files = list(iter_files([self.root]))
        rel = [f.relative_to(self.root).as_posix() for f in files]
        self.assertEqual(rel, ["a.bin", "b/a.txt", "b/z.txt", "empty"])

    def test_iter_files_skips_missing(self) -> None:
        files = list(iter_files([self.root / "missing", self.root / "empty"]))
        self.assertEqual(files, [self.root / "empty"])

    def test_get_files_hashes(self) -> None:
        hc = api.get_files_hashes([FilePathsContainer.of("MD5", str(self.root / "b"), str(self.root / "empty"))])
        self.assertEqual(
            hc["MD5"],
            [hashlib.md5(b"aa").hexdigest(), hashlib.md5(b"zz").hexdigest(), hashlib.md5(b"").hexdigest()],
        )

    @unittest.skipIf(os.name == "nt", "posix permissions")
    def test_unreadable_file_raises(self) -> None:
        if hasattr(os, "geteuid") and os.geteuid() == 0:
            self.skipTest("root ignores file permissions")
        p = self.root / "locked"
        p.write_bytes(b"x")
        p.chmod(0)
        try:
            with self.assertRaises(PermissionError):
                api.get_file_hash("md5", p)
        finally:
            p.chmod(0o600)


if __name__ == "__main__":
    unittest.main()
