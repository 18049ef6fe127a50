import random

import networkx as nx
import pytest

import nx_utils
from graph import Edge, Graph, read_graph
from graphgen import generate_graph
from kruskal import kruskal
from prim import prim, prim_forest


def random_graph(seed):
    rng = random.Random(seed)
    return generate_graph(rng.randint(1, 25),
                          density=rng.choice([0.05, 0.2, 0.5, 1.0]),
                          min_weight=-20,
                          max_weight=20,
                          seed=seed)


@pytest.mark.parametrize('seed', range(25))
def test_builders_agree_with_networkx(seed):
    graph = random_graph(seed)
    g = nx_utils.to_nx(graph)
    expected = nx_utils.reference_weight(graph)
    components = nx.number_connected_components(g)

    k = kruskal(graph)
    f = prim_forest(graph)

    assert k.total_cost == expected
    assert f.total_cost == expected
    assert k.edge_count == graph.n_vertices - components
    assert f.edge_count == graph.n_vertices - components

    p = prim(graph)
    if components == 1:
        assert p.total_cost == expected
        assert p.edge_count == graph.n_vertices - 1
        assert not p.is_partial
    else:
        assert p.is_partial
        assert p.n_covered == len(nx.node_connected_component(g, 0))


@pytest.mark.parametrize('seed', range(10))
def test_kruskal_result_is_a_forest(seed):
    graph = random_graph(seed)
    result = kruskal(graph)

    tree = nx.Graph()
    tree.add_nodes_from(range(graph.n_vertices))
    tree.add_edges_from(result.edge_pairs())

    assert nx.is_forest(tree)
    assert result.edge_pairs() == sorted(result.edge_pairs())


def test_equal_weights_are_reproducible():
    edges = [Edge(u, v, 1) for u in range(6) for v in range(u + 1, 6)]
    forward = kruskal(Graph(6, edges))
    backward = kruskal(Graph(6, list(reversed(edges))))

    assert forward.edges == backward.edges
    assert forward.edge_pairs() == [(0, 1), (0, 2), (0, 3), (0, 4), (0, 5)]


def test_reference_weight_keeps_parallel_edges():
    graph = Graph(2, [Edge(0, 1, 9), Edge(0, 1, 4)])

    assert nx_utils.reference_weight(graph) == 4


def test_from_nx():
    graph = nx_utils.from_nx(nx.path_graph(4), lambda a, b: a + b)

    assert graph.n_vertices == 4
    assert graph.edges == [Edge(0, 1, 1), Edge(1, 2, 3), Edge(2, 3, 5)]
    assert kruskal(graph).total_cost == 9


def test_from_nx_with_node_mapping():
    hypercube_idx = lambda node: sum(node[-i-1]* 2**i for i in range(len(node)))
    graph = nx_utils.from_nx(nx.hypercube_graph(3), nx_utils.arbitrary_weight(1, 1), hypercube_idx)

    assert graph.n_vertices == 8
    assert graph.n_edges == 12
    assert kruskal(graph).total_cost == 7


@pytest.mark.parametrize('binary', [False, True])
def test_to_output_file_reads_back(tmp_path, binary):
    fname = str(tmp_path / 'caveman.graph')
    g = nx.caveman_graph(3, 4)
    nx_utils.to_output_file(g, lambda a, b: a - b, fname, binary=binary)

    graph = read_graph(fname, binary=binary)
    assert graph.n_vertices == 12
    assert graph.n_edges == g.number_of_edges()
    assert all(e.weight == e.u - e.v for e in graph.edges)
    assert kruskal(graph).n_components == 3


@pytest.mark.parametrize('seed', range(10))
def test_kruskal_counts_components(seed):
    graph = random_graph(seed)

    assert kruskal(graph).n_components == nx.number_connected_components(nx_utils.to_nx(graph))
    assert prim_forest(graph).n_components == kruskal(graph).n_components
