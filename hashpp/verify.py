from __future__ import annotations

import hashlib
from typing import Dict, Iterable, List, Optional, Tuple

from .algorithms import Algorithm
from .digests import hexdigest

# Inputs of the RFC 1319/1320/1321 test suites.
SUITE: List[bytes] = [
    b"",
    b"a",
    b"abc",
    b"message digest",
    b"abcdefghijklmnopqrstuvwxyz",
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
    b"1234567890" * 8,
]

# Published answers. MD2 has no hashlib counterpart and MD4 is often
# missing from OpenSSL 3 builds, so those two are pinned in full.
KNOWN_ANSWERS: Dict[Algorithm, Dict[bytes, str]] = {
    Algorithm.MD2: {
        b"": "8350e5a3e24c153df2275c9f80692773",
        b"a": "32ec01ec4a6dac72c0ab96fb34c0b5d1",
        b"abc": "da853b0d3f88d99b30283a69e6ded6bb",
        b"message digest": "ab4f496bfb2a530b219ff33031fe06b0",
        b"abcdefghijklmnopqrstuvwxyz": "4e8ddff3650292ab5a4108c3aa47940b",
        SUITE[5]: "da33def2a42df13975352846c30338cd",
        SUITE[6]: "d5976f79d83d3a0dc9806c3c66f3efd8",
    },
    Algorithm.MD4: {
        b"": "31d6cfe0d16ae931b73c59d7e0c089c0",
        b"a": "bde52cb31de33e46245e05fbdbd6fb24",
        b"abc": "a448017aaf21d8525fc10ae87aa6729d",
        b"message digest": "d9130a8164549fe818874806e1c7014b",
        b"abcdefghijklmnopqrstuvwxyz": "d79e1c308aa5bbcdeea8ed63df412da9",
        SUITE[5]: "043f8582f241db351ce627e153e7f0e4",
        SUITE[6]: "e33b4ddc9c38f2199c3e7b164fcc0536",
    },
    Algorithm.MD5: {
        b"": "d41d8cd98f00b204e9800998ecf8427e",
        b"a": "0cc175b9c0f1b6a831c399e269772661",
        b"abc": "900150983cd24fb0d6963f7d28e17f72",
        b"message digest": "f96b697d7cb7938d525a2f31aaf161d0",
    },
    Algorithm.SHA1: {
        b"": "da39a3ee5e6b4b0d3255bfef95601890afd80709",
        b"abc": "a9993e364706816aba3e25717850c26c9cd0d89d",
    },
    Algorithm.SHA2_224: {
        b"abc": "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7",
    },
    Algorithm.SHA2_256: {
        b"": "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
        b"abc": "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
    },
    Algorithm.SHA2_384: {
        b"abc": (
            "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded1631a8b605a43ff5bed"
            "8086072ba1e7cc2358baeca134c825a7"
        ),
    },
    Algorithm.SHA2_512: {
        b"abc": (
            "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
            "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
        ),
    },
    Algorithm.SHA2_512_224: {
        b"abc": "4634270f707b6a54daae7530460842e20e37ed265ceee9a43e8924aa",
    },
    Algorithm.SHA2_512_256: {
        b"abc": "53048e2681941ef99b2e29b76b4c7dabe4c2d0c634fc6d46e0e2f13107e7af23",
    },
}

HASHLIB_NAMES: Dict[Algorithm, str] = {
    Algorithm.MD5: "md5",
    Algorithm.MD4: "md4",
    Algorithm.SHA1: "sha1",
    Algorithm.SHA2_224: "sha224",
    Algorithm.SHA2_256: "sha256",
    Algorithm.SHA2_384: "sha384",
    Algorithm.SHA2_512: "sha512",
    Algorithm.SHA2_512_224: "sha512_224",
    Algorithm.SHA2_512_256: "sha512_256",
}


def reference_hexdigest(algorithm: Algorithm, data: bytes) -> Optional[str]:
    """hashlib's answer for `algorithm`, or None where this interpreter lacks it."""
    name = HASHLIB_NAMES.get(algorithm)
    if name is None:
        return None
    try:
        return hashlib.new(name, data).hexdigest()
    except ValueError:
        return None


def check_known_answers(
    algorithms: Optional[Iterable[Algorithm]] = None,
) -> Tuple[bool, Dict[str, Tuple[str, str]]]:
    """
    Compare every engine with the pinned answers and with hashlib.

    Returns (ok, bad) where bad maps "ALGO(msg)" to (ours, expected).
    """
    bad: Dict[str, Tuple[str, str]] = {}
    for alg in algorithms or list(Algorithm):
        expected: Dict[bytes, str] = dict(KNOWN_ANSWERS.get(alg, {}))
        for msg in SUITE:
            ref = reference_hexdigest(alg, msg)
            if ref is not None:
                expected.setdefault(msg, ref)
        for msg, want in expected.items():
            ours = hexdigest(alg, msg)
            if ours != want:
                label = msg[:20] + (b"..." if len(msg) > 20 else b"")
                bad[f"{alg}({label!r})"] = (ours, want)
    return (len(bad) == 0), bad
