"""
Numba-compiled MD5 block compression.

Opt-in through `HASHPP_JIT=1` (see `hashpp.config`). Set
`HASHPP_NO_NUMBA=1` to keep numba from being imported at all; the pure
Python compressor in `hashpp.md5` is then the only path.
"""

from __future__ import annotations

import os
from typing import Tuple

import numpy as np

from .md5 import _AC_T, _G_T, _RC_T

try:
    if os.getenv("HASHPP_NO_NUMBA") == "1":
        raise ImportError("HASHPP_NO_NUMBA=1")
    from numba import njit
except Exception:  # pragma: no cover
    njit = None


def numba_available() -> bool:
    return njit is not None


if njit is not None:

    @njit(cache=True, inline="always")
    def _rotl(x: np.uint32, n: int) -> np.uint32:
        v = np.uint32(x)
        return np.uint32((v << n) | (v >> (32 - n)))

    @njit(cache=True)
    def _compress_inplace(state: np.ndarray, words: np.ndarray) -> None:
        # state is a uint32[4] chaining value, updated in place
        a, b, c, d = state[0], state[1], state[2], state[3]
        for t in range(64):
            r = t >> 4
            if r == 0:
                f = d ^ (b & (c ^ d))
            elif r == 1:
                f = c ^ (d & (b ^ c))
            elif r == 2:
                f = b ^ c ^ d
            else:
                f = c ^ (b | np.uint32(~d))
            s = np.uint32(a + f + np.uint32(_AC_T[t]) + words[_G_T[t]])
            a, d, c, b = d, c, b, np.uint32(b + _rotl(s, _RC_T[t]))
        state[0] = np.uint32(state[0] + a)
        state[1] = np.uint32(state[1] + b)
        state[2] = np.uint32(state[2] + c)
        state[3] = np.uint32(state[3] + d)


def md5_compress(ihv: Tuple[int, int, int, int], block: bytes) -> Tuple[int, int, int, int]:
    """Compress one 64-byte block; same contract as `hashpp.md5.compress_block` on raw bytes."""
    if njit is None:
        raise RuntimeError("numba is not available")
    if len(block) != 64:
        raise ValueError("block must be 64 bytes")
    state = np.array(ihv, dtype=np.uint32)
    _compress_inplace(state, np.frombuffer(block, dtype="<u4").astype(np.uint32))
    a, b, c, d = state.tolist()
    return (a, b, c, d)
