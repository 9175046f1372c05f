import pytest

from dsakit.graph import Edge, Graph
from dsakit.graph_algorithms import (
    DisjointSet,
    articulation_points,
    bridges,
    kruskal_mst,
    prim_mst,
    strongly_connected_components,
)


def _undirected(vertices, pairs):
    graph = Graph()
    for vertex in vertices:
        graph.add_vertex(vertex)
    for pair in pairs:
        source, target, *rest = pair
        weight = rest[0] if rest else 1
        graph.add_edge(source, target, weight)
        graph.add_edge(target, source, weight)
    return graph


def _directed(vertices, pairs):
    graph = Graph()
    for vertex in vertices:
        graph.add_vertex(vertex)
    for source, target in pairs:
        graph.add_edge(source, target)
    return graph


WEIGHTED = [(0, 1, 2), (0, 4, 4), (1, 4, 1), (1, 2, 3), (2, 3, 4), (3, 4, 5)]


def test_disjoint_set_union_and_find():
    sets = DisjointSet(4)
    assert sets.union(0, 1) is True
    assert sets.union(1, 0) is False
    assert sets.find(0) == sets.find(1)
    assert sets.find(2) != sets.find(0)


def test_disjoint_set_transitive():
    sets = DisjointSet(5)
    sets.union(0, 1)
    sets.union(2, 3)
    sets.union(1, 3)
    assert len({sets.find(i) for i in range(4)}) == 1
    assert sets.find(4) == 4


def test_disjoint_set_negative_size():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_articulation_point_of_bowtie():
    graph = _undirected(range(5), [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)])
    assert articulation_points(graph, 0) == {2}


def test_cycle_has_no_articulation_points_or_bridges():
    graph = _undirected(range(4), [(0, 1), (1, 2), (2, 3), (3, 0)])
    assert articulation_points(graph, 0) == set()
    assert bridges(graph, 0) == []


def test_chain_interior_vertices_are_articulation_points():
    graph = _undirected(range(4), [(0, 1), (1, 2), (2, 3)])
    assert articulation_points(graph, 0) == {1, 2}
    assert articulation_points(graph, 1) == {1, 2}


def test_bridge_to_pendant_vertex():
    graph = _undirected(range(4), [(0, 1), (1, 2), (2, 0), (2, 3)])
    assert bridges(graph, 0) == [(2, 3)]


def test_every_tree_edge_is_a_bridge():
    pairs = [(0, 1), (0, 2), (2, 3), (2, 4)]
    graph = _undirected(range(5), pairs)
    found = bridges(graph, 0)
    assert len(found) == len(pairs)
    assert {frozenset(bridge) for bridge in found} == {frozenset(p) for p in pairs}


def test_scc_of_two_cycles():
    graph = _directed(range(4), [(0, 1), (1, 0), (1, 2), (2, 3), (3, 2)])
    components = strongly_connected_components(graph, 0)
    assert sorted(sorted(c) for c in components) == [[0, 1], [2, 3]]


def test_scc_of_single_cycle_is_whole_graph():
    graph = _directed(range(3), [(0, 1), (1, 2), (2, 0)])
    components = strongly_connected_components(graph, 0)
    assert len(components) == 1
    assert sorted(components[0]) == [0, 1, 2]


def test_scc_of_dag_are_singletons():
    graph = _directed(range(4), [(0, 1), (1, 2), (0, 3)])
    components = strongly_connected_components(graph, 0)
    assert all(len(c) == 1 for c in components)
    assert sorted(v for c in components for v in c) == [0, 1, 2, 3]


def test_scc_ignores_unreachable_vertices():
    graph = _directed(range(3), [(0, 1), (2, 0)])
    components = strongly_connected_components(graph, 0)
    assert sorted(v for c in components for v in c) == [0, 1]


def test_kruskal_spans_connected_graph():
    edges = [Edge(*triple) for triple in WEIGHTED]
    cost, chosen = kruskal_mst(edges, 5)
    assert len(chosen) == 4
    assert cost == sum(edge.weight for edge in chosen)
    sets = DisjointSet(5)
    assert all(sets.union(edge.source, edge.target) for edge in chosen)


def test_kruskal_picks_lighter_of_parallel_choices():
    edges = [Edge(0, 1, 5), Edge(0, 1, 1), Edge(1, 2, 2)]
    cost, chosen = kruskal_mst(edges, 3)
    assert chosen == [Edge(0, 1, 1), Edge(1, 2, 2)]
    assert cost == 1 + 2


def test_prim_matches_kruskal_cost():
    graph = _undirected(range(5), WEIGHTED)
    parent = prim_mst(graph, 0)
    prim_cost = sum(graph.weight(p, child) for child, p in parent.items())
    kruskal_cost, _ = kruskal_mst([Edge(*t) for t in WEIGHTED], 5)
    assert prim_cost == kruskal_cost


def test_prim_covers_every_other_vertex():
    graph = _undirected(range(5), WEIGHTED)
    parent = prim_mst(graph, 3)
    assert set(parent) == {0, 1, 2, 4}
    assert all(child in graph.neighbours(p) for child, p in parent.items())


def test_prim_unknown_start_raises():
    graph = _undirected(range(2), [(0, 1)])
    with pytest.raises(KeyError):
        prim_mst(graph, 9)