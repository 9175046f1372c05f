"""Connectivity and spanning-tree algorithms: cut vertices, bridges, SCCs, MSTs."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable
from itertools import count
from operator import attrgetter

from dsakit.graph import Edge, Graph

_NO_PARENT = object()


def _require(graph: Graph, start: Hashable) -> None:
    if start not in graph:
        raise KeyError(f"unknown vertex {start!r}")


class DisjointSet:
    """Union-find over the integers 0..size-1 with union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first: int, second: int) -> bool:
        """Join the sets of both items; return False if they were already joined."""
        first, second = self.find(first), self.find(second)
        if first == second:
            return False
        if self._rank[first] < self._rank[second]:
            first, second = second, first
        self._parent[second] = first
        if self._rank[first] == self._rank[second]:
            self._rank[first] += 1
        return True


def _low_links(graph: Graph, start: Hashable, on_child) -> None:
    discovery: dict[Hashable, int] = {}
    low: dict[Hashable, int] = {}
    timer = count()

    def _visit(vertex: Hashable, parent: object) -> int:
        discovery[vertex] = low[vertex] = next(timer)
        children = 0
        for neighbour in graph.neighbours(vertex):
            if neighbour == parent:
                continue
            if neighbour not in discovery:
                _visit(neighbour, vertex)
                low[vertex] = min(low[vertex], low[neighbour])
                children += 1
                on_child(vertex, neighbour, parent, low[neighbour], discovery[vertex])
            else:
                low[vertex] = min(low[vertex], discovery[neighbour])
        return children

    root_children = _visit(start, _NO_PARENT)
    on_child.root_children = root_children


def articulation_points(graph: Graph, start: Hashable) -> set[Hashable]:
    """Return the cut vertices of the undirected component holding ``start``."""
    _require(graph, start)
    points: set[Hashable] = set()

    def _on_child(vertex, child, parent, child_low, vertex_discovery) -> None:
        if parent is not _NO_PARENT and child_low >= vertex_discovery:
            points.add(vertex)

    _low_links(graph, start, _on_child)
    if _on_child.root_children > 1:
        points.add(start)
    return points


def bridges(graph: Graph, start: Hashable) -> list[tuple[Hashable, Hashable]]:
    """Return the bridges of the undirected component of ``start`` as (parent, child)."""
    _require(graph, start)
    found: list[tuple[Hashable, Hashable]] = []

    def _on_child(vertex, child, parent, child_low, vertex_discovery) -> None:
        if child_low > vertex_discovery:
            found.append((vertex, child))

    _low_links(graph, start, _on_child)
    return found


def strongly_connected_components(
    graph: Graph, start: Hashable
) -> list[list[Hashable]]:
    """Return the strongly connected components among vertices reachable from ``start``."""
    _require(graph, start)
    finished: list[Hashable] = []
    visited: set[Hashable] = set()

    def _finish(vertex: Hashable) -> None:
        visited.add(vertex)
        for neighbour in graph.neighbours(vertex):
            if neighbour not in visited:
                _finish(neighbour)
        finished.append(vertex)

    _finish(start)

    reversed_edges: dict[Hashable, list[Hashable]] = {vertex: [] for vertex in graph}
    for vertex in graph:
        for neighbour in graph.neighbours(vertex):
            reversed_edges[neighbour].append(vertex)

    assigned: set[Hashable] = set()
    components: list[list[Hashable]] = []

    def _collect(vertex: Hashable, component: list[Hashable]) -> None:
        assigned.add(vertex)
        component.append(vertex)
        for neighbour in reversed_edges[vertex]:
            if neighbour in visited and neighbour not in assigned:
                _collect(neighbour, component)

    for vertex in reversed(finished):
        if vertex not in assigned:
            component: list[Hashable] = []
            _collect(vertex, component)
            components.append(component)
    return components


def kruskal_mst(edges: Iterable[Edge], size: int) -> tuple[float, list[Edge]]:
    """Return the total weight and edges of a minimum spanning forest on 0..size-1."""
    sets = DisjointSet(size)
    chosen: list[Edge] = []
    cost: float = 0
    for edge in sorted(edges, key=attrgetter("weight")):
        if sets.union(edge.source, edge.target):
            chosen.append(edge)
            cost += edge.weight
    return cost, chosen


def prim_mst(graph: Graph, start: Hashable) -> dict[Hashable, Hashable]:
    """Return each vertex's parent in a minimum spanning tree grown from ``start``.

    Only vertices reachable from ``start`` appear; ``start`` itself has no entry.
    """
    _require(graph, start)
    best: dict[Hashable, float] = {start: 0}
    parent: dict[Hashable, Hashable] = {}
    in_tree: set[Hashable] = set()
    while True:
        candidates = [vertex for vertex in best if vertex not in in_tree]
        if not candidates:
            return parent
        vertex = min(candidates, key=best.__getitem__)
        in_tree.add(vertex)
        for neighbour in graph.neighbours(vertex):
            weight = graph.weight(vertex, neighbour)
            if neighbour not in in_tree and weight < best.get(neighbour, math.inf):
                best[neighbour] = weight
                parent[neighbour] = vertex