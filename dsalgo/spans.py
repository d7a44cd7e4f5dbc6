"""Stock spans: how many consecutive values up to each one are not larger."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Sequence


def span_quadratic(values: Sequence[float]) -> list[int]:
    """Compute spans by scanning back from every position: O(n^2)."""
    spans = []
    for i, value in enumerate(values):
        span = 1
        j = i - 1
        while j >= 0 and values[j] <= value:
            span += 1
            j -= 1
        spans.append(span)
    return spans


def span_linear(values: Sequence[float]) -> list[int]:
    """Compute spans with a stack of indices of larger values: O(n)."""
    spans = []
    stack: list[int] = []
    for i, value in enumerate(values):
        while stack and values[stack[-1]] <= value:
            stack.pop()
        spans.append(i + 1 if not stack else i - stack[-1])
        stack.append(i)
    return spans


def span_vector(values: Sequence[float]) -> list[int]:
    """Compute spans by trimming a list of indices from its end in one cut: O(n)."""
    spans = []
    kept: list[int] = []
    for i, value in enumerate(values):
        cut = len(kept)
        while cut > 0 and values[kept[cut - 1]] <= value:
            cut -= 1
        del kept[cut:]
        spans.append(i + 1 if not kept else i - kept[-1])
        kept.append(i)
    return spans


_METHODS: list[tuple[str, Callable[[Sequence[float]], list[int]]]] = [
    ("Quadratic", span_quadratic),
    ("Linear", span_linear),
    ("Vector", span_vector),
]

_CASES = [
    [100, 80, 60, 70, 60, 75, 85],
    [10, 20, 30, 40, 50],
    [50, 40, 30, 20, 10],
    [10, 4, 5, 90, 120, 80],
]

_LARGE_SIZE = 10_000


def _joined(items: Sequence[float]) -> str:
    return "".join(f"{item:g} " for item in items)


def main(argv: list[str] | None = None) -> int:
    """Run each span method on sample inputs and report results and timings."""
    out = sys.stdout
    for number, values in enumerate(_CASES, start=1):
        if number > 1:
            out.write("\n")
        out.write(f"Test Case {number}: \n")
        out.write(f"Input X{number}: {_joined(values)}\n")
        for name, method in _METHODS:
            start = time.perf_counter_ns()
            spans = method(values)
            elapsed = time.perf_counter_ns() - start
            out.write(f"Output S{number} ({name}): {_joined(spans)}\n")
            out.write(f"Execution Time ({name}): {elapsed} ns\n")

    large = [i % 100 for i in range(_LARGE_SIZE)]
    out.write("\nTest Case Large Input: \n")
    out.write(f"Input X_large: [Large array with {_LARGE_SIZE} elements]\n")
    for name, method in _METHODS:
        start = time.perf_counter_ns()
        method(large)
        elapsed_ms = (time.perf_counter_ns() - start) // 1_000_000
        out.write(f"Execution Time ({name}): {elapsed_ms} ms\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())