import networkx as nx
import random

from typing import Any, Callable

from graph import Edge, Graph, write_graph

def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)

def from_nx(g: nx.classes.graph.Graph,
            decide_weight: Callable[[Any, Any], int],
            nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> Graph:
    edges = []
    for edge in g.edges:
        # Convert edge names to index
        u = nodename_to_idx(edge[0])
        v = nodename_to_idx(edge[1])
        edges.append(Edge(u, v, decide_weight(edge[0], edge[1])))

    return Graph(g.number_of_nodes(), edges)

def to_output_file(g: nx.classes.graph.Graph,
                   decide_weight: Callable[[Any, Any], int],
                   fname: str,
                   binary: bool=False,
                   nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> None:
    write_graph(from_nx(g, decide_weight, nodename_to_idx), fname, binary=binary)

def to_nx(graph: Graph) -> nx.MultiGraph:
    # MultiGraph so parallel edges are not collapsed
    g = nx.MultiGraph()
    g.add_nodes_from(range(graph.n_vertices))
    for edge in graph.edges:
        g.add_edge(edge.u, edge.v, weight=edge.weight)
    return g

def reference_weight(graph: Graph) -> int:
    '''Weight of the networkx minimum spanning forest of graph.'''
    forest = nx.minimum_spanning_tree(to_nx(graph), weight='weight')
    return sum(w for (_, _, w) in forest.edges(data='weight'))
