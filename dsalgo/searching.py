"""Binary search reporting either the index or the insertion point."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def lookup(array: Sequence[Any], key: Any) -> int:
    """Find ``key`` in the sorted ``array``.

    Returns its index when found, otherwise ``-(insertion_point) - 1``.
    """
    low, high = 0, len(array) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if array[mid] == key:
            return mid
        if array[mid] < key:
            low = mid + 1
        else:
            high = mid - 1

    if low < len(array) and array[low] == key:
        return low
    return -low - 1