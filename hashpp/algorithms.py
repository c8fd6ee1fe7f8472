from __future__ import annotations

import enum
from typing import Dict, Union


class UnsupportedAlgorithmError(ValueError):
    """Raised when an algorithm selector names nothing in `Algorithm`."""


class Algorithm(enum.Enum):
    """The closed set of digest algorithms.

    Each member's value is `(display name, block size, digest size)`, sizes
    in bytes. Display names follow the `"SHA2-512-224"` spelling used as
    keys in `HashCollection`.
    """

    MD5 = ("MD5", 64, 16)
    MD4 = ("MD4", 64, 16)
    MD2 = ("MD2", 16, 16)
    SHA1 = ("SHA1", 64, 20)
    SHA2_224 = ("SHA2-224", 64, 28)
    SHA2_256 = ("SHA2-256", 64, 32)
    SHA2_384 = ("SHA2-384", 128, 48)
    SHA2_512 = ("SHA2-512", 128, 64)
    SHA2_512_224 = ("SHA2-512-224", 128, 28)
    SHA2_512_256 = ("SHA2-512-256", 128, 32)

    @property
    def display_name(self) -> str:
        return self.value[0]

    @property
    def block_size(self) -> int:
        return self.value[1]

    @property
    def digest_size(self) -> int:
        return self.value[2]

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def parse(cls, selector: Union["Algorithm", str]) -> "Algorithm":
        """Resolve an `Algorithm` from a member or a name.

        Accepts member names (`SHA2_256`), display names (`SHA2-256`) and
        the common short spellings (`sha256`, `sha512/224`), case-insensitively.
        """
        if isinstance(selector, cls):
            return selector
        if not isinstance(selector, str):
            raise UnsupportedAlgorithmError(f"unsupported algorithm selector: {selector!r}")
        key = _normalize(selector)
        hit = _LOOKUP.get(key)
        if hit is None:
            raise UnsupportedAlgorithmError(f"unsupported algorithm: {selector!r}")
        return hit


def _normalize(name: str) -> str:
    return name.strip().upper().replace("-", "_").replace("/", "_")


_ALIASES = {
    "SHA_1": "SHA1",
    "SHA224": "SHA2_224",
    "SHA256": "SHA2_256",
    "SHA384": "SHA2_384",
    "SHA512": "SHA2_512",
    "SHA512_224": "SHA2_512_224",
    "SHA512_256": "SHA2_512_256",
}

_LOOKUP: Dict[str, Algorithm] = {}
for _member in Algorithm:
    _LOOKUP[_member.name] = _member
    _LOOKUP[_normalize(_member.display_name)] = _member
for _alias, _target in _ALIASES.items():
    _LOOKUP[_alias] = Algorithm[_target]
del _member, _alias, _target
