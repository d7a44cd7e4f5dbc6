"""Single-source shortest paths on a graph with non-negative weights."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence


def dijkstra(source: int, graph: Sequence[Sequence[tuple[int, int]]]) -> list[float]:
    """Return the shortest distance from ``source`` to every node.

    ``graph[u]`` lists ``(weight, v)`` edges leaving ``u``; unreachable nodes
    get ``math.inf``.
    """
    dist: list[float] = [math.inf] * len(graph)
    dist[source] = 0
    queue = [(0, source)]

    while queue:
        distance, u = heapq.heappop(queue)
        if distance > dist[u]:
            continue
        for weight, v in graph[u]:
            candidate = dist[u] + weight
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(queue, (candidate, v))
    return dist