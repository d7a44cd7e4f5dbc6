"""An integer hash table with linear probing and tombstone deletion."""

from __future__ import annotations

import enum
from dataclasses import dataclass

DEFAULT_SIZE = 10


class SlotStatus(enum.Enum):
    EMPTY = "EMPTY"
    OCCUPIED = "OCCUPIED"
    DELETED = "DELETED"


class TableFullError(Exception):
    """Raised when no slot is left for a new key."""


@dataclass(frozen=True)
class Slot:
    status: SlotStatus = SlotStatus.EMPTY
    key: int = 0
    value: int = 0


class ProbingHashTable:
    """Maps integer keys to integer values using linear probing."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._size = size
        self._slots: list[Slot] = [Slot() for _ in range(size)]

    def _probe(self, key: int):
        start = key % self._size
        for offset in range(self._size):
            yield (start + offset) % self._size

    def insert(self, key: int, value: int) -> None:
        """Store ``value`` for ``key`` in the first free or matching slot."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot.status is not SlotStatus.OCCUPIED or slot.key == key:
                self._slots[index] = Slot(SlotStatus.OCCUPIED, key, value)
                return
        raise TableFullError(f"Hash table is full, cannot insert key {key}")

    def lookup(self, key: int) -> int:
        """Return the value for ``key``; raise KeyError if it is absent."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot.status is SlotStatus.EMPTY:
                break
            if slot.status is SlotStatus.OCCUPIED and slot.key == key:
                return slot.value
        raise KeyError(key)

    def remove(self, key: int) -> None:
        """Mark ``key``'s slot deleted; raise KeyError if it is absent."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot.status is SlotStatus.EMPTY:
                break
            if slot.status is SlotStatus.OCCUPIED and slot.key == key:
                self._slots[index] = Slot(SlotStatus.DELETED, slot.key, slot.value)
                return
        raise KeyError(f"Key {key} not found")

    def slots(self) -> list[Slot]:
        """Return the table's slots in index order."""
        return list(self._slots)

    def format(self) -> str:
        """Describe every slot, one line per index."""
        lines = []
        for index, slot in enumerate(self._slots):
            if slot.status is SlotStatus.OCCUPIED:
                lines.append(f"{index}: Key = {slot.key}, Value = {slot.value}")
            else:
                lines.append(f"{index}: {slot.status.value}")
        return "\n".join(lines)