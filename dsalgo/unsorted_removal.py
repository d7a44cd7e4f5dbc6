"""Removal from an unordered list by moving the last element into the gap."""

from __future__ import annotations


def remove_element(values: list[int], element: int) -> bool:
    """Remove the first ``element`` from ``values``; return False if absent."""
    try:
        index = values.index(element)
    except ValueError:
        return False
    values[index] = values[-1]
    values.pop()
    return True


def remove_all(values: list[int], element: int) -> bool:
    """Remove every ``element`` from ``values``; return False if none was found."""
    removed = False
    index = 0
    while index < len(values):
        if values[index] == element:
            values[index] = values[-1]
            values.pop()
            removed = True
        else:
            index += 1
    return removed