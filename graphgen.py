import argparse
import random

from typing import Optional

import numpy as np

from graph import Edge, Graph, write_graph


def generate_graph(nvertices: int,
                   density: float=0.5,
                   min_weight: int=1,
                   max_weight: int=100,
                   seed: Optional[int]=None) -> Graph:
    if nvertices < 0:
        raise ValueError(f'nvertices must be non-negative, got {nvertices}')
    if not 0.0 <= density <= 1.0:
        raise ValueError(f'density must be in [0, 1], got {density}')
    if min_weight > max_weight:
        raise ValueError(f'empty weight range [{min_weight}, {max_weight}]')

    rng = random.Random(seed)
    total_edges = int(density * nvertices * (nvertices-1) / 2)

    weights = np.zeros((nvertices, nvertices), dtype=int)
    occupied = np.zeros((nvertices, nvertices), dtype=bool)

    for _ in range(total_edges):
        # Generate a random edge
        new_spot = False

        # keep trying until an unoccupied spot is found
        while not new_spot:
            i = rng.randint(0, nvertices-2)
            j = rng.randint(i+1, nvertices-1) # ensure no self-loops
            if not occupied[i, j]:
                new_spot = True

        # Only bother filling upper triangle for undirected graphs
        occupied[i, j] = True
        weights[i, j] = rng.randint(min_weight, max_weight)

    edges = [Edge(int(i), int(j), int(weights[i, j])) for (i, j) in np.argwhere(occupied)]
    return Graph(nvertices, edges)


def main(argv: Optional[list[str]]=None) -> None:
    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate graphs for benchmarking')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('-b', '--binary', action='store_true')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args(argv)

    if not args.quiet:
        print(f'Generating a graph on {args.nvertices} vertices...')
        print(f'  Density: {args.density}')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    try:
        graph = generate_graph(args.nvertices, args.density, args.min_weight, args.max_weight, args.seed)
    except ValueError as e:
        parser.error(str(e))

    if not args.quiet:
        print(f'  Generated {graph.n_edges} edges')

    if args.verbose:
        print()
        print('Graph edges:')
        print(graph.edges)

    write_graph(graph, args.outfile, binary=args.binary)


if __name__ == '__main__':
    main()
