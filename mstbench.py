## Tester for cross-checking the MST builders against each other and networkx

import os
import time

from typing import Any, Callable, Optional

import networkx as nx

import nx_utils
from graph import Graph
from kruskal import kruskal
from prim import prim, prim_forest

# Which impl is the one being benchmarked against
BASELINE = 'Kruskal'

IMPLS: dict[str, Callable[[Graph], int]] = {
    BASELINE: lambda g: kruskal(g).total_cost,
    'Prim': lambda g: prim(g).total_cost,
    'Prim forest': lambda g: prim_forest(g).total_cost,
    'networkx': nx_utils.reference_weight,
}

def measure(fxn: Callable[[Graph], int], graph: Graph, nreps: int) -> dict[str, Any]:
    compute_times = []
    weights = []
    for _ in range(nreps):
        start = time.perf_counter()
        weights.append(fxn(graph))
        compute_times.append(time.perf_counter() - start)

    metrics = {
        'compute_times': compute_times,
        'avg_compute_time': sum(compute_times)/len(compute_times),
    }

    if min(weights) == max(weights):
        metrics['weight'] = min(weights)

    return metrics

def print_stats(all_metrics: dict[Any, Any], baseline: str) -> None:
    for impl in all_metrics:
        if impl == baseline:
            continue

        print(f'Performance of {impl}:')
        all_tests = all_metrics[impl]
        comp_speedups = []
        for (test, metrics) in all_tests.items():
            print(f'  {test} ({len(metrics["compute_times"])} runs):')

            if 'weight' not in metrics or metrics['weight'] != all_metrics[baseline][test].get('weight'):
                print('Inconsistent result on this test')
                continue

            compute_time = metrics['avg_compute_time']
            comp_speedup = all_metrics[baseline][test]['avg_compute_time'] / compute_time
            comp_speedups.append(comp_speedup)

            print(f'    Compute time = {compute_time:0.4f}s, Weight = {metrics["weight"]}')
            print(f'    Compute speedup={comp_speedup:0.2f}x')
            print()

        if comp_speedups:
            print(f'Average computation time speedup of {impl}: {sum(comp_speedups)/len(comp_speedups):0.2f}')
        print()

def main(argv: Optional[list[str]]=None) -> None:
    import argparse

    parser = argparse.ArgumentParser(prog='mstbench',
                                     description='Cross-check and benchmark the MST implementations')
    parser.add_argument('-r', '--reps',
                        default=3,
                        help='the number of times to repeat each experiment',
                        type=int)
    parser.add_argument('-s', '--seed',
                        default=0,
                        help='the seed value to use for generating random graphs',
                        type=int)
    parser.add_argument('--min-weight',
                        default=1,
                        help='the minimum edge weight in random graphs',
                        type=int)
    parser.add_argument('--max-weight',
                        default=1000,
                        help='the maximum edge weight in random graphs',
                        type=int)
    parser.add_argument('-n', '--nvertices',
                        default=5000,
                        help='the approximate number of vertices in each test graph',
                        type=int)
    parser.add_argument('--save',
                        default=None,
                        metavar='DIR',
                        help='also write each generated graph into this directory')
    parser.add_argument('-b', '--binary',
                        action='store_true',
                        help='save graphs in the binary format')

    args = parser.parse_args(argv)
    if args.nvertices < 2:
        parser.error('--nvertices must be at least 2')
    if args.reps < 1:
        parser.error('--reps must be at least 1')
    n = args.nvertices

    def create_arb_weight_test(g_fxn: Callable[..., nx.classes.graph.Graph],
                               g_args: tuple[Any, ...],
                               nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> Callable[[Optional[str]], Graph]:
        def inner(save_path: Optional[str]=None) -> Graph:
            g = g_fxn(*g_args)
            if save_path is not None:
                # same seed, so the file carries the weights of the graph returned below
                nx_utils.to_output_file(g,
                                        nx_utils.arbitrary_weight(args.min_weight, args.max_weight, args.seed),
                                        save_path,
                                        binary=args.binary,
                                        nodename_to_idx=nodename_to_idx)
            return nx_utils.from_nx(g,
                                    nx_utils.arbitrary_weight(args.min_weight, args.max_weight, args.seed),
                                    nodename_to_idx=nodename_to_idx)

        return inner

    tests = {
        f'2-degree Circulant n={n}':
            create_arb_weight_test(nx.circulant_graph,
                                   (n, [1, 2]),
            ),

        f'Hypercube d={max(n.bit_length() - 1, 1)}':
            create_arb_weight_test(nx.hypercube_graph,
                                   (max(n.bit_length() - 1, 1),),
                                   lambda node: sum(node[-i-1]* 2**i for i in range(len(node))),
            ),

        # disconnected, so single-root Prim is expected to disagree
        f'Caveman Graph, {max(n // 20, 1)} groups of size k=20':
            create_arb_weight_test(nx.caveman_graph,
                                   (max(n // 20, 1), 20),
            ),

        f'Connected Caveman Graph, {max(n // 20, 2)} groups of size k=20':
            create_arb_weight_test(nx.connected_caveman_graph,
                                   (max(n // 20, 2), 20),
            ),

        f'Binomial Graph, p={4 / n:.1e} n={n}':
            create_arb_weight_test(nx.fast_gnp_random_graph,
                                   (n, 4 / n, args.seed),
            ),
    }

    all_metrics = {
        impl: {} for impl in IMPLS.keys()
    }

    if args.save is not None:
        os.makedirs(args.save, exist_ok=True)

    for (i, (test_name, test_gen)) in enumerate(tests.items()):
        print(f'Generating graph for test "{test_name}"...')
        save_path = None
        if args.save is not None:
            save_path = os.path.join(args.save, f'test{i}.' + ('bin' if args.binary else 'txt'))
        graph = test_gen(save_path)
        if save_path is not None:
            print(f'  Saved to {save_path}')

        for (impl, fxn) in IMPLS.items():
            print(f'  Running {impl} impl on test "{test_name}"...')

            metrics = measure(fxn, graph, args.reps)
            if 'weight' not in metrics:
                print(f'!!! Error on {impl}: inconsistent outputs')

            all_metrics[impl][test_name] = metrics

            print('   ', {k: v for (k, v) in metrics.items() if k != 'compute_times'})
            print()
        print()

    print_stats(all_metrics, BASELINE)

if __name__ == '__main__':
    main()
