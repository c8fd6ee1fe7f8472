from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from .algorithms import Algorithm
from .config import jit_requested
from .core import MASK32, bytes_to_words_le, rl32, u32, words_to_bytes_le
from .engine import DigestEngine

# MD5 initial value (A, B, C, D), RFC 1321
MD5_IV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# AC_t = floor(2^32 * abs(sin(t + 1)))
AC = np.array(
    (
        0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
        0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
        0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
        0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
        0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
        0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
        0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
        0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
        0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
        0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
        0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
        0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
        0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
        0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
        0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
        0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
    ),
    dtype=np.uint32,
)

# RC_t rotation counts per step
RC = np.array(
    [7, 12, 17, 22] * 4
    + [5, 9, 14, 20] * 4
    + [4, 11, 16, 23] * 4
    + [6, 10, 15, 21] * 4,
    dtype=np.int64,
)


def wt_index(t: int) -> int:
    if 0 <= t < 16:
        return t
    if 16 <= t < 32:
        return (5 * t + 1) % 16
    if 32 <= t < 48:
        return (3 * t + 5) % 16
    if 48 <= t < 64:
        return (7 * t) % 16
    raise ValueError("t out of range")


WORD_INDEX = np.array([wt_index(t) for t in range(64)], dtype=np.int64)

# Plain-int copies for the Python loop; numpy scalars would drag uint32
# overflow semantics into int arithmetic.
_AC_T = tuple(int(x) for x in AC.tolist())
_RC_T = tuple(int(x) for x in RC.tolist())
_G_T = tuple(int(x) for x in WORD_INDEX.tolist())


def compress_block(ihv: Tuple[int, int, int, int], m: List[int]) -> Tuple[int, int, int, int]:
    """
    One MD5 compression.
    Inputs:
      - ihv: (A, B, C, D) chaining value
      - m: 16 little-endian 32-bit words
    Returns the new chaining value.
    """
    if len(m) != 16:
        raise ValueError("m must have 16 words")

    a, b, c, d = ihv
    for t in range(64):
        if t < 16:
            f = d ^ (b & (c ^ d))
        elif t < 32:
            f = c ^ (d & (b ^ c))
        elif t < 48:
            f = b ^ c ^ d
        else:
            f = c ^ (b | (~d & MASK32))
        tmp = (a + f + _AC_T[t] + m[_G_T[t]]) & MASK32
        a, d, c, b = d, c, b, (b + rl32(tmp, _RC_T[t])) & MASK32

    return (u32(ihv[0] + a), u32(ihv[1] + b), u32(ihv[2] + c), u32(ihv[3] + d))


class MD5(DigestEngine):
    algorithm = Algorithm.MD5
    iv = MD5_IV
    length_byteorder = "little"

    def __init__(self, data: bytes = b"", use_jit: Optional[bool] = None) -> None:
        if use_jit is None:
            use_jit = jit_requested()
        self._jit_compress = None
        if use_jit:
            from .jit import md5_compress, numba_available

            if numba_available():
                self._jit_compress = md5_compress
        super().__init__(data)

    @property
    def jit_enabled(self) -> bool:
        return self._jit_compress is not None

    def _compress(self, block: bytes) -> None:
        if self._jit_compress is not None:
            self._state = self._jit_compress(self._state, block)
        else:
            self._state = compress_block(self._state, bytes_to_words_le(block))

    def _serialize(self) -> bytes:
        # digest is the little-endian encoding of (A, B, C, D)
        return words_to_bytes_le(self._state)
