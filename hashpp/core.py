from __future__ import annotations

from typing import List, Sequence

import numpy as np

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


def u32(x: int) -> int:
    return x & MASK32


def rl32(x: int, s: int) -> int:
    x &= MASK32
    return ((x << s) | (x >> (32 - s))) & MASK32


def rr32(x: int, s: int) -> int:
    x &= MASK32
    return ((x >> s) | (x << (32 - s))) & MASK32


def rr64(x: int, s: int) -> int:
    x &= MASK64
    return ((x >> s) | (x << (64 - s))) & MASK64


# Block unpacking. The dtype carries the byte order, so these work the
# same on little- and big-endian hosts.

def bytes_to_words_le(block: bytes) -> List[int]:
    return np.frombuffer(block, dtype="<u4").tolist()


def bytes_to_words_be(block: bytes) -> List[int]:
    return np.frombuffer(block, dtype=">u4").tolist()


def bytes_to_dwords_be(block: bytes) -> List[int]:
    return np.frombuffer(block, dtype=">u8").tolist()


def words_to_bytes_le(words: Sequence[int]) -> bytes:
    return np.asarray(words, dtype="<u4").tobytes()


def words_to_bytes_be(words: Sequence[int]) -> bytes:
    return np.asarray(words, dtype=">u4").tobytes()


def dwords_to_bytes_be(words: Sequence[int]) -> bytes:
    return np.asarray(words, dtype=">u8").tobytes()


def md_padding(msg_len_bytes: int, block_size: int, length_size: int, byteorder: str) -> bytes:
    """
    Merkle-Damgard strengthening for a message of `msg_len_bytes` bytes.

    Returns 0x80, then zeros, then the bit length as a `length_size`-byte
    integer in `byteorder`, such that message + padding is a whole number
    of blocks. The bit length is reduced modulo 2**(8 * length_size).
    """
    bit_len = (msg_len_bytes * 8) & ((1 << (8 * length_size)) - 1)
    # k such that (msg_len + 1 + k) % block_size == block_size - length_size
    k = (block_size - length_size - (msg_len_bytes + 1) % block_size) % block_size
    return b"\x80" + b"\x00" * k + bit_len.to_bytes(length_size, byteorder)
