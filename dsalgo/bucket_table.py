"""An integer-keyed hash table of strings with chained buckets."""

from __future__ import annotations

TABLE_SIZE = 79


class BucketHashTable:
    """Maps integer keys to strings in a prime-sized chained table."""

    def __init__(self) -> None:
        self._buckets: list[list[list]] = [[] for _ in range(TABLE_SIZE)]

    def _bucket(self, key: int) -> list[list]:
        return self._buckets[key % TABLE_SIZE]

    def insert(self, key: int, value: str) -> bool:
        """Store ``value`` for ``key``; return False if an old value was replaced."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return False
        bucket.append([key, value])
        return True

    def lookup(self, key: int) -> str:
        """Return the value for ``key``; raise KeyError if it is absent."""
        for stored, value in self._bucket(key):
            if stored == key:
                return value
        raise KeyError(f"Key {key} not found.")

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and any(
            stored == key for stored, _ in self._bucket(key)
        )