import heapq
import math
import sys

from typing import Optional

from graph import Edge, Graph
from report import MSTResult


def _grow(adj: list[list[tuple[int, int]]], root: int,
          key: list[float], parent: list[int], visited: list[bool]) -> int:
    '''Grow one tree from root in place, returning the number of settled vertices.'''
    key[root] = 0
    pq = [(0, root)]
    settled = 0

    while pq:
        _, current = heapq.heappop(pq)
        if visited[current]:
            continue

        visited[current] = True
        settled += 1

        for (v, w) in adj[current]:
            if key[v] > w and not visited[v]:
                key[v] = w
                parent[v] = current
                heapq.heappush(pq, (w, v))

    return settled


def _collect(n_vertices: int, key: list[float], parent: list[int],
             visited: list[bool], settles: int, n_components: Optional[int]=None) -> MSTResult:
    # unreachable vertices still hold math.inf, only settled keys count
    cost = sum(key[v] for v in range(n_vertices) if visited[v])

    tree = [Edge(parent[v], v, key[v])
            for v in range(n_vertices)
            if visited[v] and parent[v] is not None and visited[parent[v]]]
    tree.sort(key=lambda e: (e.u, e.v))

    return MSTResult(cost, settles, tree, n_vertices, sum(visited), n_components)


def prim(graph: Graph, root: int=0) -> MSTResult:
    '''
    Prim's algorithm from a single root.

    Only the root's component is explored: on a disconnected graph the
    result is a partial tree (result.is_partial), not a spanning forest.
    Use prim_forest for forest semantics.
    '''
    n = graph.n_vertices
    if n == 0:
        return MSTResult(0, 0, [], 0, 0)
    if not 0 <= root < n:
        raise IndexError(f'root {root} outside [0, {n})')

    key = [math.inf] * n
    parent = [None] * n
    visited = [False] * n

    settled = _grow(graph.adjacency(), root, key, parent, visited)

    # the root's own settle attaches no edge
    return _collect(n, key, parent, visited, settled - 1)


def prim_forest(graph: Graph) -> MSTResult:
    '''Prim's algorithm restarted from every unvisited vertex, giving a minimum spanning forest.'''
    n = graph.n_vertices
    adj = graph.adjacency()

    key = [math.inf] * n
    parent = [None] * n
    visited = [False] * n

    settles = 0
    trees = 0
    for root in range(n):
        if not visited[root]:
            settles += _grow(adj, root, key, parent, visited) - 1
            trees += 1

    return _collect(n, key, parent, visited, settles, trees)


if __name__ == '__main__':
    from graph import MalformedInputError, read_graph

    if len(sys.argv) < 2:
        print(f'Usage: {sys.argv[0]} <filename>')
        sys.exit(1)

    fname = sys.argv[1]
    verbose = (len(sys.argv) > 2)

    try:
        graph = read_graph(fname)
    except MalformedInputError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    result = prim(graph)

    print('Final MST sum:', result.total_cost)
    if result.is_partial:
        print(f'Warning: only {result.n_covered} of {result.n_vertices} vertices reachable from vertex 0',
              file=sys.stderr)
    if verbose:
        print(result.edges)
