"""Integer hash sets using open addressing or separate chaining."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

COLLIDING_KEYS = (14, 21, 28, 35, 42)


class TableFullError(Exception):
    """Raised when a key cannot be placed in the table."""


class OpenAddressingTable(ABC):
    """Integer keys stored in a fixed array; subclasses choose the probe."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._keys: list[int | None] = [None] * size

    def _hash(self, key: int) -> int:
        return key % self.size

    @abstractmethod
    def probe(self, key: int, attempt: int) -> int:
        """Return the slot to try on the given attempt for ``key``."""

    def insert(self, key: int) -> None:
        """Place ``key`` in the first free slot of its probe sequence."""
        if len(self) == self.size:
            raise TableFullError("Hash table is full")
        for attempt in range(self.size):
            index = self.probe(key, attempt)
            if self._keys[index] is None:
                self._keys[index] = key
                return
        raise TableFullError(f"Could not insert key: {key}")

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        for attempt in range(self.size):
            stored = self._keys[self.probe(key, attempt)]
            if stored is None:
                return False
            if stored == key:
                return True
        return False

    def __len__(self) -> int:
        return sum(stored is not None for stored in self._keys)

    def slots(self) -> list[int | None]:
        """Return each slot's key, or None for a free slot."""
        return list(self._keys)

    def format(self) -> str:
        """Describe every slot, one line per index."""
        return "\n".join(
            f"{index} : {'' if stored is None else stored}"
            for index, stored in enumerate(self._keys)
        )


class LinearProbingTable(OpenAddressingTable):
    def probe(self, key: int, attempt: int) -> int:
        return (self._hash(key) + attempt) % self.size


class QuadraticProbingTable(OpenAddressingTable):
    def __init__(self, size: int, c1: int = 1, c2: int = 3) -> None:
        super().__init__(size)
        self.c1 = c1
        self.c2 = c2

    def probe(self, key: int, attempt: int) -> int:
        offset = self.c1 * attempt + self.c2 * attempt * attempt
        return (self._hash(key) + offset) % self.size


class DoubleHashingTable(OpenAddressingTable):
    def _hash2(self, key: int) -> int:
        # Never zero, so every attempt moves.
        return 1 + key % (self.size - 1)

    def probe(self, key: int, attempt: int) -> int:
        return (self._hash(key) + attempt * self._hash2(key)) % self.size


class SeparateChainingTable:
    """Integer keys stored in per-slot chains."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def insert(self, key: int) -> None:
        """Append ``key`` to its chain."""
        self._buckets[key % self.size].append(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and key in self._buckets[key % self.size]

    def buckets(self) -> list[list[int]]:
        """Return a copy of every chain in index order."""
        return [list(bucket) for bucket in self._buckets]

    def format(self) -> str:
        """Describe every chain, one line per index."""
        return "\n".join(
            str(index) + "".join(f" --> {key}" for key in bucket)
            for index, bucket in enumerate(self._buckets)
        )


def _fill(table, keys: Iterable[int], lines: list[str]) -> None:
    for key in keys:
        try:
            table.insert(key)
        except TableFullError as error:
            lines.append(str(error))


def collision_report(keys: Iterable[int] = COLLIDING_KEYS) -> str:
    """Insert ``keys`` into each kind of table and describe the results."""
    keys = list(keys)
    lines: list[str] = []
    sections = [
        ("Testing Separate Chaining Hash Table:", SeparateChainingTable(7)),
        (
            "Testing Open Addressing Hash Table with Linear Probing:",
            LinearProbingTable(7),
        ),
        (
            "Testing Open Addressing Hash Table with Quadratic Probing:",
            QuadraticProbingTable(11),
        ),
        ("Testing Open Addressing with Double Hashing:", DoubleHashingTable(7)),
    ]
    for position, (title, table) in enumerate(sections):
        if position:
            lines.append("")
        lines.append(title)
        _fill(table, keys, lines)
        lines.append(table.format())
    return "\n".join(lines)