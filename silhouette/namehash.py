"""Compact 64-bit FNV-1a name hashes with a collision check."""

from __future__ import annotations

from functools import total_ordering

VAL_32 = 0x811C9DC5
PRIME_32 = 0x1000193
VAL_64 = 0xCBF29CE484222325
PRIME_64 = 0x100000001B3

_MASK_32 = 0xFFFFFFFF
_MASK_64 = 0xFFFFFFFFFFFFFFFF

# Hash value -> the name that produced it.
_names: dict[int, str] = {}


class NameHashCollisionError(ValueError):
    """Two different names produced the same hash."""


def _terminated(text: str) -> str:
    return text.split("\0", 1)[0]


def _signed_chars(text: str):
    # Characters are treated as signed bytes, as the hash is defined on them.
    for byte in _terminated(text).encode("utf-8"):
        yield byte - 256 if byte >= 128 else byte


def fnv1a_32(text: str) -> int:
    value = VAL_32
    for char in _signed_chars(text):
        value = ((value ^ (char & _MASK_32)) * PRIME_32) & _MASK_32
    return value


def fnv1a_64(text: str) -> int:
    value = VAL_64
    for char in _signed_chars(text):
        value = ((value ^ (char & _MASK_64)) * PRIME_64) & _MASK_64
    return value


@total_ordering
class NameHash:
    """A name identified by its 64-bit hash.

    Compares equal to other NameHashes, to the raw hash integer and to the
    string it was made from.
    """

    __slots__ = ("_hash",)

    def __init__(self, name: str | NameHash):
        if isinstance(name, NameHash):
            self._hash = name._hash
            return
        name = _terminated(name)
        value = fnv1a_64(name)
        known = _names.setdefault(value, name)
        if known != name:
            raise NameHashCollisionError(
                f"names {known!r} and {name!r} share hash {value:#018x}"
            )
        self._hash = value

    @classmethod
    def from_hash(cls, value: int) -> NameHash:
        obj = cls.__new__(cls)
        obj._hash = int(value) & _MASK_64
        return obj

    @staticmethod
    def static_hash(name: str) -> int:
        return fnv1a_64(name)

    @classmethod
    def none(cls) -> NameHash:
        return cls("")

    def is_valid(self) -> bool:
        return self._hash != fnv1a_64("")

    def name_string(self) -> str:
        try:
            return _names[self._hash]
        except KeyError:
            raise LookupError(f"no name known for hash {self._hash:#018x}") from None

    def __int__(self) -> int:
        return self._hash

    __index__ = __int__

    def __hash__(self) -> int:
        return hash(self._hash)

    def __eq__(self, other) -> bool:
        if isinstance(other, NameHash):
            return self._hash == other._hash
        if isinstance(other, str):
            return self._hash == fnv1a_64(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self._hash == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, NameHash):
            return self._hash < other._hash
        if isinstance(other, int) and not isinstance(other, bool):
            return self._hash < other
        return NotImplemented

    def __repr__(self) -> str:
        name = _names.get(self._hash)
        if name is None:
            return f"NameHash({self._hash:#018x})"
        return f"NameHash({name!r})"