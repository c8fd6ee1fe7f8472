"""
Result and input holders for the high-level API.

`Hash` wraps one hex digest; `HashCollection` groups hex digests by
algorithm display name. `Container` carries an algorithm, a list of data
items (strings, bytes or paths) and an optional HMAC key.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .algorithms import Algorithm, UnsupportedAlgorithmError

Data = Union[str, bytes]


@dataclass(frozen=True)
class Hash:
    """A hex digest. The default (empty) value marks a failed lookup, e.g. a missing file."""

    value: str = ""

    def valid(self) -> bool:
        return bool(self.value)

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Hash):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)


class HashCollection:
    """
    Hex digests grouped by algorithm.

    Every algorithm has an entry (possibly empty), in `Algorithm` order.
    Indexing accepts a display name (`"SHA2-256"`), any spelling
    `Algorithm.parse` understands, or an `Algorithm`; unknown names give
    an empty list rather than raising.
    """

    def __init__(self, groups: Optional[Dict[Algorithm, List[str]]] = None) -> None:
        self._groups: Dict[Algorithm, List[str]] = {alg: [] for alg in Algorithm}
        for alg, hashes in (groups or {}).items():
            self._groups[Algorithm.parse(alg)].extend(hashes)

    def add(self, algorithm: Union[Algorithm, str], hex_digest: str) -> None:
        self._groups[Algorithm.parse(algorithm)].append(hex_digest)

    def __getitem__(self, algorithm: Union[Algorithm, str]) -> List[str]:
        try:
            alg = Algorithm.parse(algorithm)
        except UnsupportedAlgorithmError:
            return []
        return list(self._groups[alg])

    def valid(self, algorithm: Union[Algorithm, str]) -> bool:
        return bool(self[algorithm])

    def __iter__(self) -> Iterator[Tuple[str, List[str]]]:
        for alg, hashes in self._groups.items():
            yield alg.display_name, list(hashes)

    def __len__(self) -> int:
        """Total number of digests across all algorithms."""
        return sum(len(v) for v in self._groups.values())

    def to_dict(self) -> Dict[str, List[str]]:
        return {name: hashes for name, hashes in self}

    def __repr__(self) -> str:
        filled = {name: len(h) for name, h in self if h}
        return f"HashCollection({filled})"


@dataclass
class Container:
    algorithm: Algorithm = Algorithm.SHA2_256
    data: List[Data] = field(default_factory=list)
    key: Data = b""

    def __post_init__(self) -> None:
        self.algorithm = Algorithm.parse(self.algorithm)
        self.data = list(self.data)

    @classmethod
    def of(cls, algorithm: Union[Algorithm, str], *data: Data, key: Data = b"") -> "Container":
        return cls(algorithm, list(data), key)

    def set_algorithm(self, algorithm: Union[Algorithm, str]) -> None:
        self.algorithm = Algorithm.parse(algorithm)

    def set_key(self, key: Data) -> None:
        self.key = key

    def set_data(self, *data: Data) -> None:
        self.data = _flatten(data)

    def append_data(self, *data: Data) -> None:
        self.data.extend(_flatten(data))


def _flatten(items: Iterable) -> List[Data]:
    # set_data(["a", "b"]) and set_data("a", "b") mean the same thing
    out: List[Data] = []
    for item in items:
        if isinstance(item, (list, tuple)):
            out.extend(item)
        else:
            out.append(item)
    return out


# Names the API uses for the three roles a container plays.
DataContainer = Container
FilePathsContainer = Container
HMACDataContainer = Container
