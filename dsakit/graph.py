"""Directed weighted graph stored as ordered adjacency maps."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A directed edge from ``source`` to ``target`` carrying ``weight``."""

    source: Hashable
    target: Hashable
    weight: float = 1


class Graph:
    """Directed graph; add an edge both ways to model an undirected one."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, dict[Hashable, float]] = {}

    def _edges_from(self, key: Hashable) -> dict[Hashable, float]:
        try:
            return self._adjacency[key]
        except KeyError:
            raise KeyError(f"unknown vertex {key!r}") from None

    def add_vertex(self, key: Hashable) -> None:
        """Add a vertex; adding one that exists already has no effect."""
        self._adjacency.setdefault(key, {})

    def add_edge(self, source: Hashable, target: Hashable, weight: float = 1) -> Edge:
        """Add a directed edge between existing vertices and return it.

        Raises KeyError for an unknown vertex and ValueError for a duplicate edge.
        """
        edges = self._edges_from(source)
        self._edges_from(target)
        if target in edges:
            raise ValueError(f"duplicate edge {source!r} -> {target!r}")
        edges[target] = weight
        return Edge(source, target, weight)

    def neighbours(self, key: Hashable) -> list[Hashable]:
        """Return the targets of the edges leaving ``key``, in insertion order."""
        return list(self._edges_from(key))

    def weight(self, source: Hashable, target: Hashable) -> float:
        """Return the weight of the edge from ``source`` to ``target``."""
        edges = self._edges_from(source)
        try:
            return edges[target]
        except KeyError:
            raise KeyError(f"no edge {source!r} -> {target!r}") from None

    def __contains__(self, key: object) -> bool:
        return key in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._adjacency)