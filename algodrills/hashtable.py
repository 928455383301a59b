"""A string-keyed hash table with separate chaining, and an attendance log built on it."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

DEFAULT_MODULUS = 1_000_003
DEFAULT_BASE = 1000

_MISSING = object()


def string_hash(key: str, modulus: int = DEFAULT_MODULUS, base: int = DEFAULT_BASE) -> int:
    """Polynomial rolling hash of ``key`` reduced modulo ``modulus``."""
    if modulus < 1:
        raise ValueError("modulus must be positive")
    value = 0
    for char in key:
        value = (value * base + ord(char)) % modulus
    return value


class ChainedHashTable:
    """Maps strings to values, resolving collisions by chaining entries per slot."""

    def __init__(self, modulus: int = DEFAULT_MODULUS, base: int = DEFAULT_BASE) -> None:
        if modulus < 1:
            raise ValueError("modulus must be positive")
        self._modulus = modulus
        self._base = base
        self._buckets: dict[int, list[list[Any]]] = {}
        self._size = 0

    def _slot(self, key: str) -> int:
        return string_hash(key, self._modulus, self._base)

    def _lookup(self, key: str) -> Any:
        for stored, value in self._buckets.get(self._slot(key), ()):
            if stored == key:
                return value
        return _MISSING

    def insert(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        bucket = self._buckets.setdefault(self._slot(key), [])
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.insert(0, [key, value])
        self._size += 1

    def find(self, key: str) -> Any:
        """The value stored under ``key``, or None when the key is absent."""
        value = self._lookup(key)
        return None if value is _MISSING else value

    def erase(self, key: str) -> None:
        """Remove ``key``; a key that is not present is ignored."""
        slot = self._slot(key)
        bucket = self._buckets.get(slot)
        if not bucket:
            return
        for index, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[index]
                self._size -= 1
                if not bucket:
                    del self._buckets[slot]
                return

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._lookup(key) is not _MISSING

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        for bucket in self._buckets.values():
            for key, _ in bucket:
                yield key


def present_people(records: Iterable[tuple[str, str]]) -> list[str]:
    """Names still inside after a log of (name, "enter" | "leave"), in reverse dictionary order."""
    inside = ChainedHashTable()
    for name, action in records:
        if action.startswith("e"):
            inside.insert(name, True)
        else:
            inside.erase(name)
    return sorted(inside, reverse=True)