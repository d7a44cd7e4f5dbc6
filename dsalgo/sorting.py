"""Counting sort and least-significant-digit radix sort for non-negative integers."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate


def counting_sort(values: Iterable[int], max_value: int) -> list[int]:
    """Return the values, each in ``0..max_value``, sorted stably."""
    items = list(values)
    for value in items:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value} outside 0..{max_value}")

    counts = [0] * (max_value + 1)
    for value in items:
        counts[value] += 1
    positions = list(accumulate(counts))

    output = [0] * len(items)
    for value in reversed(items):
        positions[value] -= 1
        output[positions[value]] = value
    return output


def digit_at(number: int, position: int, base: int = 10) -> int:
    """Return the digit of ``number`` at ``position`` (0 is least significant)."""
    return (number // base**position) % base


def _sort_by_digit(items: list[int], position: int, base: int) -> list[int]:
    counts = [0] * base
    for value in items:
        counts[digit_at(value, position, base)] += 1
    positions = list(accumulate(counts))

    output = [0] * len(items)
    for value in reversed(items):
        digit = digit_at(value, position, base)
        positions[digit] -= 1
        output[positions[digit]] = value
    return output


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return the non-negative values sorted, one decimal digit at a time."""
    base = 10
    items = list(values)
    if not items:
        return items
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative values")

    largest = max(items)
    digits = 0
    while largest:
        digits += 1
        largest //= base

    for position in range(digits):
        items = _sort_by_digit(items, position, base)
    return items