"""SHA-224 and SHA-256 (FIPS 180-4, 6.2 and 6.3).

Both variants share the round function and the 64 round constants; SHA-224
only changes the initial hash value and drops the last state word from the
digest.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from .algorithms import Algorithm
from .core import MASK32, bytes_to_words_be, rr32, words_to_bytes_be
from .engine import DigestEngine

# First 32 bits of the fractional parts of the cube roots of the first 64 primes.
K_VALUES = np.array(
    (
        0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
        0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
        0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
        0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
        0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
        0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
        0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
        0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
        0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
        0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
        0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
        0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
        0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
        0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
        0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
        0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
    ),
    dtype=np.uint32,
)
_K_T = tuple(int(x) for x in K_VALUES.tolist())

# Initial hash values, FIPS 180-4 5.3.2 and 5.3.3
SHA224_IV = (
    0xC1059ED8, 0x367CD507, 0x3070DD17, 0xF70E5939,
    0xFFC00B31, 0x68581511, 0x64F98FA7, 0xBEFA4FA4,
)
SHA256_IV = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _small_sigma0(x: int) -> int:
    return rr32(x, 7) ^ rr32(x, 18) ^ (x >> 3)


def _small_sigma1(x: int) -> int:
    return rr32(x, 17) ^ rr32(x, 19) ^ (x >> 10)


def build_message_schedule(m: Sequence[int]) -> List[int]:
    """Expand 16 block words into the 64-word schedule w[0..63]."""
    if len(m) != 16:
        raise ValueError(f"Expected 16 block words, got {len(m)}")
    w = list(m)
    for i in range(16, 64):
        w.append((w[i - 16] + _small_sigma0(w[i - 15]) + w[i - 7] + _small_sigma1(w[i - 2])) & MASK32)
    return w


def compress_block(h: Tuple[int, ...], m: Sequence[int]) -> Tuple[int, ...]:
    w = build_message_schedule(m)

    a, b, c, d, e, f, g, hh = h
    for i in range(64):
        s1 = rr32(e, 6) ^ rr32(e, 11) ^ rr32(e, 25)
        ch = (e & f) ^ (~e & g)
        temp1 = (hh + s1 + ch + _K_T[i] + w[i]) & MASK32
        s0 = rr32(a, 2) ^ rr32(a, 13) ^ rr32(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        temp2 = s0 + maj
        hh, g, f, e, d, c, b, a = g, f, e, (d + temp1) & MASK32, c, b, a, (temp1 + temp2) & MASK32

    return tuple((x + y) & MASK32 for x, y in zip(h, (a, b, c, d, e, f, g, hh)))


class _SHA256Family(DigestEngine):
    max_message_bytes = ((1 << 64) - 1) // 8

    def _compress(self, block: bytes) -> None:
        self._state = compress_block(self._state, bytes_to_words_be(block))

    def _serialize(self) -> bytes:
        return words_to_bytes_be(self._state)


class SHA2_224(_SHA256Family):
    algorithm = Algorithm.SHA2_224
    iv = SHA224_IV


class SHA2_256(_SHA256Family):
    algorithm = Algorithm.SHA2_256
    iv = SHA256_IV
