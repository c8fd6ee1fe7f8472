"""
Streaming digest engine shared by every algorithm.

An engine owns three pieces of state: the algorithm's working registers,
a pending buffer holding less than one block, and the count of bytes
absorbed. `update` compresses each block as soon as it is complete;
`finalize` pads, compresses the last block(s) and serializes the digest.

    Ready --update--> Ready --finalize--> Finalized --init--> Ready

A finalized engine rejects `update` and `finalize` until `init` is called.
"""

from __future__ import annotations

from functools import partial
from typing import BinaryIO, ClassVar, Optional, Tuple

from .algorithms import Algorithm
from .core import md_padding

DEFAULT_CHUNK_SIZE = 1024 * 1024


class EngineFinalizedError(RuntimeError):
    """Raised on update/finalize of an engine that has already produced its digest."""


class DigestEngine:
    algorithm: ClassVar[Algorithm]
    iv: ClassVar[Tuple[int, ...]] = ()

    # Length field appended by Merkle-Damgard padding.
    length_size: ClassVar[int] = 8
    length_byteorder: ClassVar[str] = "big"

    # Largest message, in bytes, the length field can describe. None means
    # the field wraps (MD4/MD5 define the length modulo 2**64).
    max_message_bytes: ClassVar[Optional[int]] = None

    def __init__(self, data: bytes = b"") -> None:
        self.init()
        if data:
            self.update(data)

    @property
    def name(self) -> str:
        return self.algorithm.display_name

    @property
    def block_size(self) -> int:
        return self.algorithm.block_size

    @property
    def digest_size(self) -> int:
        return self.algorithm.digest_size

    @property
    def finalized(self) -> bool:
        return self._digest is not None

    @property
    def length(self) -> int:
        """Bytes absorbed since the last `init`."""
        return self._length

    def init(self) -> None:
        self._state = self._initial_state()
        self._buffer = bytearray()
        self._length = 0
        self._digest: Optional[bytes] = None

    def update(self, data: bytes) -> None:
        if self._digest is not None:
            raise EngineFinalizedError(f"{self.name} engine already finalized; call init() to reuse it")
        if isinstance(data, str):
            raise TypeError("strings must be encoded before hashing")
        if not isinstance(data, bytes):
            if not isinstance(data, (bytearray, memoryview)):
                raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
            data = memoryview(data).tobytes()
        n = len(data)
        if not n:
            return
        total = self._length + n
        if self.max_message_bytes is not None and total > self.max_message_bytes:
            raise OverflowError(f"{self.name} input exceeds {self.max_message_bytes} bytes")
        self._length = total

        bs = self.block_size
        buf = self._buffer
        off = 0
        if buf:
            off = min(bs - len(buf), n)
            buf += data[:off]
            if len(buf) < bs:
                return
            self._compress(bytes(buf))
            buf.clear()
        while off + bs <= n:
            self._compress(data[off : off + bs])
            off += bs
        if off < n:
            buf += data[off:]

    def finalize(self) -> bytes:
        if self._digest is not None:
            raise EngineFinalizedError(f"{self.name} engine already finalized; call init() to reuse it")
        self._finish()
        self._digest = self._serialize()[: self.digest_size]
        self._buffer.clear()
        return self._digest

    def digest(self) -> bytes:
        """The digest, finalizing on first use. Repeated calls return the same bytes."""
        if self._digest is None:
            return self.finalize()
        return self._digest

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> "DigestEngine":
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._buffer = bytearray(self._buffer)
        return clone

    def hash_bytes(self, data: bytes) -> bytes:
        self.init()
        self.update(data)
        return self.finalize()

    def hash_stream(self, source: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
        """Digest everything readable from `source`, `chunk_size` bytes at a time.

        Read errors propagate; the engine is left mid-stream in that case.
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.init()
        for chunk in iter(partial(source.read, chunk_size), b""):
            self.update(chunk)
        return self.finalize()

    # Per-algorithm hooks.

    def _initial_state(self):
        return tuple(self.iv)

    def _compress(self, block: bytes) -> None:
        raise NotImplementedError

    def _serialize(self) -> bytes:
        raise NotImplementedError

    def _finish(self) -> None:
        tail = bytes(self._buffer) + md_padding(
            self._length, self.block_size, self.length_size, self.length_byteorder
        )
        bs = self.block_size
        for off in range(0, len(tail), bs):
            self._compress(tail[off : off + bs])

    def __repr__(self) -> str:
        state = "finalized" if self.finalized else "ready"
        return f"<{type(self).__name__} {self.name} {state} length={self._length}>"
