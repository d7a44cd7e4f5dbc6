"""A string-keyed dictionary built on a hash table with separate chaining."""

from __future__ import annotations

from collections.abc import Iterator

TABLE_SIZE = 128


def hash_key(key: str) -> int:
    """Polynomial string hash (multiplier 31) reduced to a table index."""
    result = 0
    for char in key:
        result = (result * 31 + ord(char)) % TABLE_SIZE
    return result


class ChainedDictionary:
    """Maps strings to integers, resolving collisions by chaining."""

    def __init__(self) -> None:
        self._table: list[list[list]] = [[] for _ in range(TABLE_SIZE)]

    def _find(self, key: str) -> list | None:
        for entry in self._table[hash_key(key)]:
            if entry[0] == key:
                return entry
        return None

    def insert(self, key: str, value: int) -> None:
        """Add ``key`` with ``value``, replacing the value if the key exists."""
        entry = self._find(key)
        if entry is not None:
            entry[1] = value
        else:
            self._table[hash_key(key)].append([key, value])

    def remove(self, key: str) -> None:
        """Delete ``key``; raise KeyError if it is absent."""
        bucket = self._table[hash_key(key)]
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                return
        raise KeyError(f"Key not found: {key}")

    def search(self, key: str) -> int | None:
        """Return the value stored for ``key``, or None if it is absent."""
        entry = self._find(key)
        return None if entry is None else entry[1]

    def update(self, key: str, value: int) -> None:
        """Replace the value of an existing ``key``; raise KeyError if absent."""
        entry = self._find(key)
        if entry is None:
            raise KeyError(f"Key not found: {key}")
        entry[1] = value

    def buckets(self) -> Iterator[tuple[int, list[tuple[str, int]]]]:
        """Yield each non-empty bucket's index and its entries in order."""
        for index, bucket in enumerate(self._table):
            if bucket:
                yield index, [(key, value) for key, value in bucket]

    def format(self) -> str:
        """Describe the non-empty buckets, one line per bucket."""
        lines = []
        for index, entries in self.buckets():
            pairs = "".join(f"({key}, {value}) " for key, value in entries)
            lines.append(f"Index {index}: {pairs}")
        return "\n".join(lines)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._table)