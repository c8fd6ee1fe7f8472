from __future__ import annotations

from typing import List, Tuple

from .algorithms import Algorithm
from .core import MASK32, bytes_to_words_be, rl32, words_to_bytes_be
from .engine import DigestEngine

# FIPS 180-4, 5.3.1
SHA1_IV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

# One constant per 20-round stage
STAGE_K = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)


def expand_schedule(m: List[int]) -> List[int]:
    w = list(m)
    for i in range(16, 80):
        w.append(rl32(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))
    return w


def compress_block(h: Tuple[int, ...], m: List[int]) -> Tuple[int, ...]:
    if len(m) != 16:
        raise ValueError("m must have 16 words")
    w = expand_schedule(m)

    a, b, c, d, e = h
    for t in range(80):
        if t < 20:
            f = d ^ (b & (c ^ d))  # Ch
        elif t < 40:
            f = b ^ c ^ d  # Parity
        elif t < 60:
            f = (b & c) | (b & d) | (c & d)  # Maj
        else:
            f = b ^ c ^ d
        tmp = (rl32(a, 5) + f + e + STAGE_K[t // 20] + w[t]) & MASK32
        e, d, c, b, a = d, c, rl32(b, 30), a, tmp

    return tuple((x + y) & MASK32 for x, y in zip(h, (a, b, c, d, e)))


class SHA1(DigestEngine):
    algorithm = Algorithm.SHA1
    iv = SHA1_IV
    max_message_bytes = ((1 << 64) - 1) // 8

    def _compress(self, block: bytes) -> None:
        self._state = compress_block(self._state, bytes_to_words_be(block))

    def _serialize(self) -> bytes:
        return words_to_bytes_be(self._state)
