from __future__ import annotations

from typing import Dict, Type, Union

from .algorithms import Algorithm
from .engine import DigestEngine
from .md2 import MD2
from .md4 import MD4
from .md5 import MD5
from .sha1 import SHA1
from .sha256 import SHA2_224, SHA2_256
from .sha512 import SHA2_384, SHA2_512, SHA2_512_224, SHA2_512_256

AlgorithmLike = Union[Algorithm, str]

# One engine per Algorithm member, nothing else.
ENGINES: Dict[Algorithm, Type[DigestEngine]] = {
    Algorithm.MD5: MD5,
    Algorithm.MD4: MD4,
    Algorithm.MD2: MD2,
    Algorithm.SHA1: SHA1,
    Algorithm.SHA2_224: SHA2_224,
    Algorithm.SHA2_256: SHA2_256,
    Algorithm.SHA2_384: SHA2_384,
    Algorithm.SHA2_512: SHA2_512,
    Algorithm.SHA2_512_224: SHA2_512_224,
    Algorithm.SHA2_512_256: SHA2_512_256,
}


def engine_class(algorithm: AlgorithmLike) -> Type[DigestEngine]:
    return ENGINES[Algorithm.parse(algorithm)]


def new(algorithm: AlgorithmLike, data: bytes = b"") -> DigestEngine:
    """Fresh engine for `algorithm`, optionally primed with `data`."""
    return engine_class(algorithm)(data)


def digest(algorithm: AlgorithmLike, data: bytes) -> bytes:
    return new(algorithm).hash_bytes(data)


def hexdigest(algorithm: AlgorithmLike, data: bytes) -> str:
    return digest(algorithm, data).hex()
