from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .engine import DEFAULT_CHUNK_SIZE

ENV_CHUNK_SIZE = "HASHPP_CHUNK_SIZE"
ENV_JIT = "HASHPP_JIT"

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """
    Runtime knobs, read from the environment.

    - `HASHPP_CHUNK_SIZE`: bytes per read when hashing streams and files
    - `HASHPP_JIT=1`: use the numba MD5 kernel when numba is importable
      (`HASHPP_NO_NUMBA=1` keeps numba from being imported at all)
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    use_jit: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        chunk_size = DEFAULT_CHUNK_SIZE
        raw = env.get(ENV_CHUNK_SIZE)
        if raw:
            try:
                chunk_size = int(raw, 0)
            except ValueError:
                raise ValueError(f"{ENV_CHUNK_SIZE} must be an integer, got {raw!r}") from None
            if chunk_size <= 0:
                raise ValueError(f"{ENV_CHUNK_SIZE} must be positive, got {chunk_size}")
        return cls(chunk_size=chunk_size, use_jit=jit_requested(env))


def jit_requested(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when `HASHPP_JIT` asks for the numba kernel. Reads nothing else."""
    env = os.environ if environ is None else environ
    return env.get(ENV_JIT, "").strip().lower() in _TRUE
