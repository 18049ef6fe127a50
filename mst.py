## Runs the MST builders on one graph file and writes their results

import argparse
import sys

from typing import Callable, Optional

from graph import Graph, MalformedInputError, read_graph
from kruskal import kruskal
from prim import prim, prim_forest
from report import MSTResult, write_results

ALGORITHMS: dict[str, Callable[[Graph], MSTResult]] = {
    'kruskal': kruskal,
    'prim': prim,
    'prim-forest': prim_forest,
}

# which builders each --algorithm choice runs, in output order
SELECTIONS = {
    'kruskal': ['kruskal'],
    'prim': ['prim'],
    'prim-forest': ['prim-forest'],
    'both': ['kruskal', 'prim'],
    'all': ['kruskal', 'prim', 'prim-forest'],
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='mst',
                                     description='Compute minimum spanning trees with Kruskal and Prim')
    parser.add_argument('infile')
    parser.add_argument('outfile')
    parser.add_argument('-a', '--algorithm',
                        default='both',
                        choices=list(SELECTIONS),
                        help='which builders to run (default: Kruskal then Prim)')
    parser.add_argument('-b', '--binary',
                        action='store_true',
                        help='read the input in the 4-byte little-endian binary format')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')
    return parser


def run(graph: Graph, names: list[str]) -> dict[str, MSTResult]:
    return {name: ALGORITHMS[name](graph) for name in names}


def main(argv: Optional[list[str]]=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        graph = read_graph(args.infile, binary=args.binary)
    except MalformedInputError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if not args.quiet:
        print(f'Loaded graph on {graph.n_vertices} vertices ({graph.n_edges} edges) from {args.infile}')

    results = run(graph, SELECTIONS[args.algorithm])
    try:
        write_results(results.values(), args.outfile)
    except OSError as e:
        print(f'Error: {args.outfile}: cannot write results ({e.strerror})', file=sys.stderr)
        return 1

    for (name, result) in results.items():
        if not args.quiet:
            components = '' if result.n_components is None else f', {result.n_components} trees'
            print(f'  {name}: total weight {result.total_cost}, {result.edge_count} edges{components}')
        if args.verbose:
            print(f'    {result.edges}')
        if result.is_partial:
            print(f'Warning: {name} reached only {result.n_covered} of {result.n_vertices} vertices',
                  file=sys.stderr)

    # Kruskal and Prim must agree whenever Prim saw the whole graph
    if 'kruskal' in results and 'prim' in results and not results['prim'].is_partial:
        if results['kruskal'].total_cost != results['prim'].total_cost:
            print(f'!!! Error: inconsistent outputs, kruskal={results["kruskal"].total_cost} '
                  f'prim={results["prim"].total_cost}', file=sys.stderr)
            return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())
