import sys

from graph import Graph
from report import MSTResult

ROOT = -1


class UnionFind:
    '''
    Disjoint sets over [0, n_verts) with path compression and union by rank.

    A root is marked by ROOT in `parent`; rank starts at 1 for every vertex.
    '''

    def __init__(self, n_verts: int) -> None:
        self.parent = [ROOT] * n_verts
        self.rank = [1] * n_verts
        self.n_sets = n_verts

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.parent):
            raise IndexError(f'vertex {index} outside [0, {len(self.parent)})')

    def find(self, index: int) -> int:
        self._check(index)

        root = index
        while self.parent[root] != ROOT:
            root = self.parent[root]

        # second pass: point everything on the path straight at the root
        while index != root:
            self.parent[index], index = root, self.parent[index]

        return root

    def union(self, i: int, j: int) -> bool:
        i = self.find(i)
        j = self.find(j)
        if i == j:
            return False

        if self.rank[i] < self.rank[j]:
            self.parent[i] = j
        elif self.rank[j] < self.rank[i]:
            self.parent[j] = i
        else:
            self.parent[j] = i
            self.rank[i] += 1

        self.n_sets -= 1
        return True


def kruskal(graph: Graph) -> MSTResult:
    # (weight, u, v) makes weight ties reproducible
    edges = sorted(graph.edges, key=lambda e: (e.weight, e.u, e.v))
    uf = UnionFind(graph.n_vertices)
    mst = []
    cost = 0

    # no early exit at V-1 edges, a disconnected graph yields a forest
    for edge in edges:
        if uf.find(edge.u) != uf.find(edge.v):
            mst.append(edge)
            cost += edge.weight
            uf.union(edge.u, edge.v)

    mst.sort(key=lambda e: (e.u, e.v))
    return MSTResult(cost, len(mst), mst, graph.n_vertices, graph.n_vertices, uf.n_sets)


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

    result = kruskal(graph)

    print('Final MST sum:', result.total_cost)
    if verbose:
        print(result.edges)
