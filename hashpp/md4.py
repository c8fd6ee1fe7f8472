from __future__ import annotations

from typing import List, Tuple

from .algorithms import Algorithm
from .core import MASK32, bytes_to_words_le, rl32, u32, words_to_bytes_le
from .engine import DigestEngine

# RFC 1320 uses the same initial words as MD5
MD4_IV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# Additive constant per round
ROUND_K = (0x00000000, 0x5A827999, 0x6ED9EBA1)

# Message word consumed at each of the 48 steps
WORD_ORDER = (
    tuple(range(16))
    + (0, 4, 8, 12, 1, 5, 9, 13, 2, 6, 10, 14, 3, 7, 11, 15)
    + (0, 8, 4, 12, 2, 10, 6, 14, 1, 9, 5, 13, 3, 11, 7, 15)
)

SHIFTS = (3, 7, 11, 19) * 4 + (3, 5, 9, 13) * 4 + (3, 9, 11, 15) * 4


def compress_block(ihv: Tuple[int, int, int, int], m: List[int]) -> Tuple[int, int, int, int]:
    if len(m) != 16:
        raise ValueError("m must have 16 words")

    a, b, c, d = ihv
    for t in range(48):
        r = t >> 4
        if r == 0:
            f = d ^ (b & (c ^ d))
        elif r == 1:
            f = (b & c) | (b & d) | (c & d)
        else:
            f = b ^ c ^ d
        tmp = (a + f + m[WORD_ORDER[t]] + ROUND_K[r]) & MASK32
        # rotate roles: the register just written becomes b
        a, d, c, b = d, c, b, rl32(tmp, SHIFTS[t])

    return (u32(ihv[0] + a), u32(ihv[1] + b), u32(ihv[2] + c), u32(ihv[3] + d))


class MD4(DigestEngine):
    algorithm = Algorithm.MD4
    iv = MD4_IV
    length_byteorder = "little"

    def _compress(self, block: bytes) -> None:
        self._state = compress_block(self._state, bytes_to_words_le(block))

    def _serialize(self) -> bytes:
        return words_to_bytes_le(self._state)
