"""Undirected graphs as adjacency lists, with breadth-first traversal."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence


def build_adjacency(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build an undirected adjacency list for vertices numbered 1..vertex_count.

    Index 0 of the returned list is unused and always empty.
    """
    if vertex_count < 0:
        raise ValueError("vertex_count must be non-negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count + 1)]
    for x, y in edges:
        for vertex in (x, y):
            if not 1 <= vertex <= vertex_count:
                raise ValueError(f"vertex {vertex} is outside 1..{vertex_count}")
        adjacency[x].append(y)
        adjacency[y].append(x)
    return adjacency


def bfs_traversal(adjacency: Sequence[Sequence[int]], vertex_count: int) -> list[int]:
    """Return the breadth-first order of every vertex, component by component.

    Components are started from the lowest unvisited vertex number.
    """
    if len(adjacency) < vertex_count + 1:
        raise ValueError("adjacency list is shorter than vertex_count + 1")
    visited = [False] * (vertex_count + 1)
    order: list[int] = []
    for start in range(1, vertex_count + 1):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in adjacency[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
    return order