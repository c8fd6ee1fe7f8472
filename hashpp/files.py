from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .config import Settings
from .digests import AlgorithmLike, new

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def iter_files(paths: Iterable[PathLike]) -> Iterator[Path]:
    """
    Expand `paths` into regular files.

    Files are yielded as given. Directories are walked recursively and
    their files yielded in sorted path order. Anything else (missing
    paths, sockets, ...) is skipped with a debug record.
    """
    for raw in paths:
        p = Path(raw)
        if p.is_file():
            yield p
        elif p.is_dir():
            found = [Path(root) / name for root, _, names in os.walk(p) for name in names]
            for f in sorted(found, key=lambda x: x.as_posix()):
                if f.is_file():
                    yield f
        else:
            logger.debug("skipping %s: not a regular file or directory", p)


def hash_file(algorithm: AlgorithmLike, path: PathLike, chunk_size: Optional[int] = None) -> bytes:
    """Digest of the file at `path`, read in `chunk_size` pieces. I/O errors propagate."""
    if chunk_size is None:
        chunk_size = Settings.from_env().chunk_size
    engine = new(algorithm)
    with open(path, "rb") as fh:
        out = engine.hash_stream(fh, chunk_size)
    logger.debug("%s %s -> %s", engine.name, path, out.hex())
    return out
