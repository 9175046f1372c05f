"""Traversals, cycle checks and shortest paths over a ``Graph``."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Hashable, Iterable
from itertools import count

from dsakit.graph import Edge, Graph


def _require(graph: Graph, start: Hashable) -> None:
    if start not in graph:
        raise KeyError(f"unknown vertex {start!r}")


def bfs(graph: Graph, start: Hashable) -> list[Hashable]:
    """Return the vertices reachable from ``start`` in breadth-first order."""
    _require(graph, start)
    order: list[Hashable] = []
    visited = {start}
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        order.append(vertex)
        for neighbour in graph.neighbours(vertex):
            if neighbour not in visited:
                visited.add(neighbour)
                pending.append(neighbour)
    return order


def dfs(graph: Graph, start: Hashable) -> list[Hashable]:
    """Return the vertices reachable from ``start`` in recursive depth-first order."""
    _require(graph, start)
    order: list[Hashable] = []
    visited: set[Hashable] = set()

    def _visit(vertex: Hashable) -> None:
        visited.add(vertex)
        order.append(vertex)
        for neighbour in graph.neighbours(vertex):
            if neighbour not in visited:
                _visit(neighbour)

    _visit(start)
    return order


def dfs_iterative(graph: Graph, start: Hashable) -> list[Hashable]:
    """Return vertices in stack order, marking each one as seen when it is pushed."""
    _require(graph, start)
    order: list[Hashable] = []
    visited = {start}
    pending = [start]
    while pending:
        vertex = pending.pop()
        order.append(vertex)
        for neighbour in graph.neighbours(vertex):
            if neighbour not in visited:
                visited.add(neighbour)
                pending.append(neighbour)
    return order


def has_cycle_directed(graph: Graph, start: Hashable) -> bool:
    """Return True if a directed cycle is reachable from ``start``."""
    _require(graph, start)
    visited: set[Hashable] = set()
    in_path: set[Hashable] = set()

    def _visit(vertex: Hashable) -> bool:
        visited.add(vertex)
        in_path.add(vertex)
        for neighbour in graph.neighbours(vertex):
            if neighbour in in_path:
                return True
            if neighbour not in visited and _visit(neighbour):
                return True
        in_path.discard(vertex)
        return False

    return _visit(start)


def has_cycle_undirected(graph: Graph, start: Hashable) -> bool:
    """Return True if the undirected component of ``start`` has a cycle (BFS)."""
    _require(graph, start)
    visited = {start}
    parent: dict[Hashable, Hashable] = {}
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        for neighbour in graph.neighbours(vertex):
            if neighbour not in visited:
                visited.add(neighbour)
                parent[neighbour] = vertex
                pending.append(neighbour)
            elif parent.get(vertex, _NO_PARENT) != neighbour:
                return True
    return False


_NO_PARENT = object()


def has_cycle_undirected_dfs(graph: Graph, start: Hashable) -> bool:
    """Return True if the undirected component of ``start`` has a cycle (DFS)."""
    _require(graph, start)
    visited: set[Hashable] = set()

    def _visit(vertex: Hashable, parent: object) -> bool:
        visited.add(vertex)
        for neighbour in graph.neighbours(vertex):
            if neighbour not in visited:
                if _visit(neighbour, vertex):
                    return True
            elif neighbour != parent:
                return True
        return False

    return _visit(start, _NO_PARENT)


def is_bipartite(graph: Graph, start: Hashable) -> bool:
    """Return True if the component of ``start`` can be two-coloured."""
    _require(graph, start)
    colour = {start: 1}
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        for neighbour in graph.neighbours(vertex):
            if neighbour not in colour:
                colour[neighbour] = 1 - colour[vertex]
                pending.append(neighbour)
            elif colour[neighbour] == colour[vertex]:
                return False
    return True


def shortest_path_unit_weight(graph: Graph, start: Hashable) -> dict[Hashable, float]:
    """Return edge counts from ``start`` to every vertex; unreachable ones get inf."""
    _require(graph, start)
    distance: dict[Hashable, float] = {vertex: math.inf for vertex in graph}
    distance[start] = 0
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        for neighbour in graph.neighbours(vertex):
            if distance[vertex] + 1 < distance[neighbour]:
                distance[neighbour] = distance[vertex] + 1
                pending.append(neighbour)
    return distance


def dijkstra(graph: Graph, start: Hashable) -> dict[Hashable, float]:
    """Return weighted distances from ``start``; unreachable vertices get inf.

    Raises ValueError on a negative edge weight.
    """
    _require(graph, start)
    distance: dict[Hashable, float] = {vertex: math.inf for vertex in graph}
    distance[start] = 0
    tie = count()
    pending = [(0, next(tie), start)]
    while pending:
        dist, _, vertex = heapq.heappop(pending)
        if dist > distance[vertex]:
            continue
        for neighbour in graph.neighbours(vertex):
            weight = graph.weight(vertex, neighbour)
            if weight < 0:
                raise ValueError("negative edge weights are not supported")
            candidate = dist + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(pending, (candidate, next(tie), neighbour))
    return distance


def bellman_ford(
    graph: Graph, edges: Iterable[Edge], start: Hashable
) -> dict[Hashable, float]:
    """Return distances from ``start`` relaxing ``edges``; unreachable ones get inf.

    Raises ValueError if a negative cycle is reachable.
    """
    _require(graph, start)
    edge_list = list(edges)
    distance: dict[Hashable, float] = {vertex: math.inf for vertex in graph}
    distance[start] = 0
    for _ in range(len(graph) - 1):
        changed = False
        for edge in edge_list:
            candidate = distance[edge.source] + edge.weight
            if candidate < distance[edge.target]:
                distance[edge.target] = candidate
                changed = True
        if not changed:
            break
    for edge in edge_list:
        if distance[edge.source] + edge.weight < distance[edge.target]:
            raise ValueError("the graph has a negative cycle")
    return distance


def longest_path_length(graph: Graph, start: Hashable) -> int:
    """Return the depth, in edges, of the deepest vertex in a DFS tree from ``start``."""
    _require(graph, start)
    visited: set[Hashable] = set()

    def _depth(vertex: Hashable) -> int:
        visited.add(vertex)
        deepest = 0
        for neighbour in graph.neighbours(vertex):
            if neighbour not in visited:
                deepest = max(deepest, 1 + _depth(neighbour))
        return deepest

    return _depth(start)


def topological_sort(graph: Graph, start: Hashable) -> list[Hashable]:
    """Return the vertices reachable from ``start`` so that every edge points forward."""
    _require(graph, start)
    visited: set[Hashable] = set()
    finished: list[Hashable] = []

    def _visit(vertex: Hashable) -> None:
        visited.add(vertex)
        for neighbour in graph.neighbours(vertex):
            if neighbour not in visited:
                _visit(neighbour)
        finished.append(vertex)

    _visit(start)
    return finished[::-1]