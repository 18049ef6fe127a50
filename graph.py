from typing import Iterable

import numpy as np


class MalformedInputError(ValueError):
    pass


class Edge:
    def __init__(self, u: int, v: int, weight: int) -> None:
        self.u = u
        self.v = v
        self.weight = weight

    @classmethod
    def from_line(cls, s: str) -> 'Edge':
        parts = s.split()
        if len(parts) != 3:
            raise MalformedInputError(f'expected "u v w", got {s.strip()!r}')

        try:
            return Edge(*[int(token) for token in parts])
        except ValueError:
            raise MalformedInputError(f'non-integer token in {s.strip()!r}') from None

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.u, self.v, self.weight) == (other.u, other.v, other.weight)

    def __hash__(self):
        return hash((self.u, self.v, self.weight))

    def __repr__(self):
        return f'({self.u}, {self.v}, {self.weight})'

    __str__ = __repr__


class Graph:
    '''
    Undirected multigraph on the dense vertex range [0, n_vertices).

    Parallel edges and self-loops are kept as given; neither builder
    ever selects a self-loop.
    '''

    def __init__(self, n_vertices: int, edges: Iterable[Edge]) -> None:
        if n_vertices < 0:
            raise MalformedInputError(f'vertex count must be non-negative, got {n_vertices}')

        self.n_vertices = n_vertices
        self.edges = list(edges)

        for edge in self.edges:
            if not (0 <= edge.u < n_vertices and 0 <= edge.v < n_vertices):
                raise MalformedInputError(f'edge {edge} has an endpoint outside [0, {n_vertices})')

    @property
    def n_edges(self) -> int:
        return len(self.edges)

    def adjacency(self) -> list[list[tuple[int, int]]]:
        adj = [[] for _ in range(self.n_vertices)]

        for edge in self.edges:
            adj[edge.u].append((edge.v, edge.weight))
            adj[edge.v].append((edge.u, edge.weight))

        return adj

    def __repr__(self):
        return f'Graph(n_vertices={self.n_vertices}, n_edges={self.n_edges})'


def parse_graph(lines: Iterable[str], source: str='<input>') -> Graph:
    numbered = ((lineno, line) for (lineno, line) in enumerate(lines, start=1) if line.strip())

    header = next(numbered, None)
    if header is None:
        raise MalformedInputError(f'{source}: empty graph file')

    lineno, line = header
    parts = line.split()
    if len(parts) != 2:
        raise MalformedInputError(f'{source}:{lineno}: expected "<nvertices> <nedges>", got {line.strip()!r}')
    try:
        nvertices, nedges = int(parts[0]), int(parts[1])
    except ValueError:
        raise MalformedInputError(f'{source}:{lineno}: non-integer header {line.strip()!r}') from None

    if nedges < 0:
        raise MalformedInputError(f'{source}:{lineno}: edge count must be non-negative, got {nedges}')

    edges = []
    for (lineno, line) in numbered:
        if len(edges) == nedges:
            raise MalformedInputError(f'{source}:{lineno}: more than the {nedges} edges declared in the header')
        try:
            edges.append(Edge.from_line(line))
        except MalformedInputError as e:
            raise MalformedInputError(f'{source}:{lineno}: {e}') from None

    if len(edges) < nedges:
        raise MalformedInputError(f'{source}: truncated, header declares {nedges} edges but found {len(edges)}')

    try:
        return Graph(nvertices, edges)
    except MalformedInputError as e:
        raise MalformedInputError(f'{source}: {e}') from None


def _parse_binary(data: bytes, source: str) -> Graph:
    if len(data) % 4 != 0:
        raise MalformedInputError(f'{source}: binary graph length {len(data)} is not a multiple of 4')

    nums = np.frombuffer(data, dtype='<i4')
    if len(nums) < 2:
        raise MalformedInputError(f'{source}: missing "<nvertices> <nedges>" header')

    nvertices, nedges = int(nums[0]), int(nums[1])
    if nedges < 0:
        raise MalformedInputError(f'{source}: edge count must be non-negative, got {nedges}')
    if len(nums) != 2 + 3 * nedges:
        raise MalformedInputError(f'{source}: header declares {nedges} edges but found {(len(nums) - 2) / 3:g}')

    triples = nums[2:].reshape(nedges, 3)
    try:
        return Graph(nvertices, [Edge(int(u), int(v), int(w)) for (u, v, w) in triples])
    except MalformedInputError as e:
        raise MalformedInputError(f'{source}: {e}') from None


def read_graph(fname: str, binary: bool=False) -> Graph:
    try:
        if binary:
            with open(fname, 'rb') as f:
                return _parse_binary(f.read(), fname)

        with open(fname, 'r') as f:
            return parse_graph(f, fname)
    except OSError as e:
        raise MalformedInputError(f'{fname}: cannot read graph file ({e.strerror})') from e
    except UnicodeDecodeError:
        raise MalformedInputError(f'{fname}: not a text graph file') from None


def write_graph(graph: Graph, fname: str, binary: bool=False) -> None:
    nvertices, nedges = graph.n_vertices, graph.n_edges

    if binary:
        to_bin = lambda num: int(num).to_bytes(length=4, byteorder='little', signed=True)
        with open(fname, 'wb') as f:
            f.write(to_bin(nvertices))
            f.write(to_bin(nedges))

            for edge in graph.edges:
                f.write(to_bin(edge.u))
                f.write(to_bin(edge.v))
                f.write(to_bin(edge.weight))
    else:
        with open(fname, 'w') as f:
            f.write(f'{nvertices} {nedges}\n')

            for edge in graph.edges:
                f.write(f'{edge.u} {edge.v} {edge.weight}\n')


'''
File format:

<nvertices> <nedges>
<v1> <v2> <w>
<v1> <v2> <w>
...

'''
