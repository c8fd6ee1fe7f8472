"""SHA-384, SHA-512, SHA-512/224 and SHA-512/256 (FIPS 180-4, 6.4 - 6.7).

All four share one 80-round compression over 64-bit words and a 128-bit
length field. They differ only in the initial hash value and in how many
leading bytes of the big-endian state serialization form the digest
(48, 64, 28 and 32).
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from .algorithms import Algorithm
from .core import MASK64, bytes_to_dwords_be, dwords_to_bytes_be, rr64
from .engine import DigestEngine

# First 64 bits of the fractional parts of the cube roots of the first 80 primes.
K_VALUES = np.array(
    (
        0x428A2F98D728AE22, 0x7137449123EF65CD, 0xB5C0FBCFEC4D3B2F, 0xE9B5DBA58189DBBC,
        0x3956C25BF348B538, 0x59F111F1B605D019, 0x923F82A4AF194F9B, 0xAB1C5ED5DA6D8118,
        0xD807AA98A3030242, 0x12835B0145706FBE, 0x243185BE4EE4B28C, 0x550C7DC3D5FFB4E2,
        0x72BE5D74F27B896F, 0x80DEB1FE3B1696B1, 0x9BDC06A725C71235, 0xC19BF174CF692694,
        0xE49B69C19EF14AD2, 0xEFBE4786384F25E3, 0x0FC19DC68B8CD5B5, 0x240CA1CC77AC9C65,
        0x2DE92C6F592B0275, 0x4A7484AA6EA6E483, 0x5CB0A9DCBD41FBD4, 0x76F988DA831153B5,
        0x983E5152EE66DFAB, 0xA831C66D2DB43210, 0xB00327C898FB213F, 0xBF597FC7BEEF0EE4,
        0xC6E00BF33DA88FC2, 0xD5A79147930AA725, 0x06CA6351E003826F, 0x142929670A0E6E70,
        0x27B70A8546D22FFC, 0x2E1B21385C26C926, 0x4D2C6DFC5AC42AED, 0x53380D139D95B3DF,
        0x650A73548BAF63DE, 0x766A0ABB3C77B2A8, 0x81C2C92E47EDAEE6, 0x92722C851482353B,
        0xA2BFE8A14CF10364, 0xA81A664BBC423001, 0xC24B8B70D0F89791, 0xC76C51A30654BE30,
        0xD192E819D6EF5218, 0xD69906245565A910, 0xF40E35855771202A, 0x106AA07032BBD1B8,
        0x19A4C116B8D2D0C8, 0x1E376C085141AB53, 0x2748774CDF8EEB99, 0x34B0BCB5E19B48A8,
        0x391C0CB3C5C95A63, 0x4ED8AA4AE3418ACB, 0x5B9CCA4F7763E373, 0x682E6FF3D6B2B8A3,
        0x748F82EE5DEFB2FC, 0x78A5636F43172F60, 0x84C87814A1F0AB72, 0x8CC702081A6439EC,
        0x90BEFFFA23631E28, 0xA4506CEBDE82BDE9, 0xBEF9A3F7B2C67915, 0xC67178F2E372532B,
        0xCA273ECEEA26619C, 0xD186B8C721C0C207, 0xEADA7DD6CDE0EB1E, 0xF57D4F7FEE6ED178,
        0x06F067AA72176FBA, 0x0A637DC5A2C898A6, 0x113F9804BEF90DAE, 0x1B710B35131C471B,
        0x28DB77F523047D84, 0x32CAAB7B40C72493, 0x3C9EBE0A15C9BEBC, 0x431D67C49C100D4C,
        0x4CC5D4BECB3E42B6, 0x597F299CFC657E2A, 0x5FCB6FAB3AD6FAEC, 0x6C44198C4A475817,
    ),
    dtype=np.uint64,
)
_K_T = tuple(int(x) for x in K_VALUES.tolist())

# Initial hash values, FIPS 180-4 5.3.4 - 5.3.6. The truncated variants
# use their own published IVs, not a prefix of SHA-512's.
SHA384_IV = (
    0xCBBB9D5DC1059ED8, 0x629A292A367CD507, 0x9159015A3070DD17, 0x152FECD8F70E5939,
    0x67332667FFC00B31, 0x8EB44A8768581511, 0xDB0C2E0D64F98FA7, 0x47B5481DBEFA4FA4,
)
SHA512_IV = (
    0x6A09E667F3BCC908, 0xBB67AE8584CAA73B, 0x3C6EF372FE94F82B, 0xA54FF53A5F1D36F1,
    0x510E527FADE682D1, 0x9B05688C2B3E6C1F, 0x1F83D9ABFB41BD6B, 0x5BE0CD19137E2179,
)
SHA512_224_IV = (
    0x8C3D37C819544DA2, 0x73E1996689DCD4D6, 0x1DFAB7AE32FF9C82, 0x679DD514582F9FCF,
    0x0F6D2B697BD44DA8, 0x77E36F7304C48942, 0x3F9D85A86A1D36C8, 0x1112E6AD91D692A1,
)
SHA512_256_IV = (
    0x22312194FC2BF72C, 0x9F555FA3C84C64C2, 0x2393B86B6F53B151, 0x963877195940EABD,
    0x96283EE2A88EFFE3, 0xBE5E1E2553863992, 0x2B0199FC2C85B8AA, 0x0EB72DDC81C52CA2,
)


def build_message_schedule(m: Sequence[int]) -> List[int]:
    if len(m) != 16:
        raise ValueError(f"Expected 16 block words, got {len(m)}")
    w = list(m)
    for i in range(16, 80):
        x, y = w[i - 15], w[i - 2]
        s0 = rr64(x, 1) ^ rr64(x, 8) ^ (x >> 7)
        s1 = rr64(y, 19) ^ rr64(y, 61) ^ (y >> 6)
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & MASK64)
    return w


def compress_block(h: Tuple[int, ...], m: Sequence[int]) -> Tuple[int, ...]:
    w = build_message_schedule(m)

    a, b, c, d, e, f, g, hh = h
    for i in range(80):
        s1 = rr64(e, 14) ^ rr64(e, 18) ^ rr64(e, 41)
        ch = (e & f) ^ (~e & g)
        temp1 = (hh + s1 + ch + _K_T[i] + w[i]) & MASK64
        s0 = rr64(a, 28) ^ rr64(a, 34) ^ rr64(a, 39)
        maj = (a & b) ^ (a & c) ^ (b & c)
        hh, g, f, e, d, c, b, a = g, f, e, (d + temp1) & MASK64, c, b, a, (temp1 + s0 + maj) & MASK64

    return tuple((x + y) & MASK64 for x, y in zip(h, (a, b, c, d, e, f, g, hh)))


class _SHA512Family(DigestEngine):
    length_size = 16
    max_message_bytes = ((1 << 128) - 1) // 8

    def _compress(self, block: bytes) -> None:
        self._state = compress_block(self._state, bytes_to_dwords_be(block))

    def _serialize(self) -> bytes:
        return dwords_to_bytes_be(self._state)


class SHA2_384(_SHA512Family):
    algorithm = Algorithm.SHA2_384
    iv = SHA384_IV


class SHA2_512(_SHA512Family):
    algorithm = Algorithm.SHA2_512
    iv = SHA512_IV


class SHA2_512_224(_SHA512Family):
    algorithm = Algorithm.SHA2_512_224
    iv = SHA512_224_IV


class SHA2_512_256(_SHA512Family):
    algorithm = Algorithm.SHA2_512_256
    iv = SHA512_256_IV
