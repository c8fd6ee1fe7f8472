"""
High-level entry points: hash strings, byte strings, files and HMACs by
algorithm, one at a time or in batches.

    >>> get_hash(Algorithm.MD5, "abc").value
    '900150983cd24fb0d6963f7d28e17f72'

Batch functions take `Container`s (or `(algorithm, [items])` pairs) and
return a `HashCollection` keyed by algorithm display name, preserving the
order of items within each algorithm.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple, Union

from .algorithms import Algorithm
from .containers import Container, Data, Hash, HashCollection
from .digests import AlgorithmLike, digest
from .files import PathLike, hash_file, iter_files
from .hmac import hmac_digest, hmac_many

logger = logging.getLogger(__name__)

Batch = Union[Container, Tuple[AlgorithmLike, Sequence[Data]]]


def _as_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _containers(batches: Union[Batch, Iterable[Batch]]) -> List[Container]:
    if isinstance(batches, Container):
        return [batches]
    if isinstance(batches, tuple) and len(batches) == 2 and isinstance(batches[0], (Algorithm, str)):
        # a lone (algorithm, items) pair
        batches = [batches]
    out: List[Container] = []
    for item in batches:
        if isinstance(item, Container):
            out.append(item)
        else:
            algorithm, data = item
            out.append(Container(algorithm, list(data)))
    return out


def get_hash(algorithm: AlgorithmLike, data: Data) -> Hash:
    return Hash(digest(algorithm, _as_bytes(data)).hex())


def get_hash_from_bytes(algorithm: AlgorithmLike, raw_digest: bytes) -> Hash:
    """Render digest bytes computed elsewhere as a `Hash`."""
    alg = Algorithm.parse(algorithm)
    if len(raw_digest) != alg.digest_size:
        raise ValueError(f"{alg} digests are {alg.digest_size} bytes, got {len(raw_digest)}")
    return Hash(bytes(raw_digest).hex())


def get_hashes(batches: Union[Batch, Iterable[Batch]]) -> HashCollection:
    out = HashCollection()
    for cont in _containers(batches):
        for item in cont.data:
            out.add(cont.algorithm, digest(cont.algorithm, _as_bytes(item)).hex())
    return out


def get_file_hash(algorithm: AlgorithmLike, path: PathLike) -> Hash:
    """Hash of one file; an empty `Hash` when `path` is not a regular file."""
    alg = Algorithm.parse(algorithm)
    if not Path(path).is_file():
        logger.debug("%s: not a regular file", path)
        return Hash()
    return Hash(hash_file(alg, path).hex())


def get_files_hashes(batches: Union[Batch, Iterable[Batch]]) -> HashCollection:
    """Hash every file named by the containers, recursing into directories."""
    out = HashCollection()
    for cont in _containers(batches):
        for f in iter_files(cont.data):
            out.add(cont.algorithm, hash_file(cont.algorithm, f).hex())
    return out


def get_hmac(algorithm: AlgorithmLike, key: Data, data: Data) -> Hash:
    return Hash(hmac_digest(algorithm, _as_bytes(key), _as_bytes(data)).hex())


def get_hmacs(batches: Union[Container, Iterable[Container]]) -> HashCollection:
    out = HashCollection()
    for cont in _containers(batches):
        macs = hmac_many(cont.algorithm, _as_bytes(cont.key), (_as_bytes(d) for d in cont.data))
        for mac in macs:
            out.add(cont.algorithm, mac.hex())
    return out
