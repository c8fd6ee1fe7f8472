"""
HMAC (RFC 2104) over any engine in `hashpp.digests`.

    HMAC(K, m) = H((K' ^ opad) || H((K' ^ ipad) || m))

K' is the key zero-padded to the engine's block size, or the digest of
the key (then zero-padded) when the key is longer than one block.
"""

from __future__ import annotations

from typing import Iterable, List

from .digests import AlgorithmLike, new
from .engine import DigestEngine

IPAD = 0x36
OPAD = 0x5C


def _translate(key: bytes, pad: int) -> bytes:
    return bytes(k ^ pad for k in key)


class HMAC:
    def __init__(self, algorithm: AlgorithmLike, key: bytes, msg: bytes = b"") -> None:
        if isinstance(key, str):
            raise TypeError("key must be bytes")
        self._outer = new(algorithm)
        self._inner = new(algorithm)
        block_size = self._inner.block_size
        key = bytes(key)
        if len(key) > block_size:
            key = new(algorithm).hash_bytes(key)
        key = key.ljust(block_size, b"\x00")
        self._outer.update(_translate(key, OPAD))
        self._inner.update(_translate(key, IPAD))
        if msg:
            self.update(msg)

    @property
    def name(self) -> str:
        return f"HMAC-{self._inner.name}"

    @property
    def digest_size(self) -> int:
        return self._inner.digest_size

    @property
    def block_size(self) -> int:
        return self._inner.block_size

    def update(self, msg: bytes) -> None:
        self._inner.update(msg)

    def copy(self) -> "HMAC":
        clone = self.__class__.__new__(self.__class__)
        clone._outer = self._outer.copy()
        clone._inner = self._inner.copy()
        return clone

    def digest(self) -> bytes:
        """MAC of everything absorbed so far; the object stays usable."""
        outer: DigestEngine = self._outer.copy()
        outer.update(self._inner.copy().finalize())
        return outer.finalize()

    def hexdigest(self) -> str:
        return self.digest().hex()


def hmac_digest(algorithm: AlgorithmLike, key: bytes, msg: bytes) -> bytes:
    return HMAC(algorithm, key, msg).digest()


def hmac_many(algorithm: AlgorithmLike, key: bytes, messages: Iterable[bytes]) -> List[bytes]:
    """One MAC per message under a shared key, in input order."""
    keyed = HMAC(algorithm, key)
    return [_with(keyed, msg) for msg in messages]


def _with(keyed: HMAC, msg: bytes) -> bytes:
    h = keyed.copy()
    h.update(msg)
    return h.digest()
