from typing import Iterable, Optional

from graph import Edge


class MSTResult:
    '''
    Outcome of one MST builder run.

    n_covered is the number of vertices the builder actually reached. It
    equals n_vertices for a spanning forest and is smaller when a
    single-root Prim run could not reach every component.

    n_components is the number of trees in a spanning forest, or None when
    the builder only explored one component.
    '''

    def __init__(self, total_cost: int, edge_count: int, edges: list[Edge],
                 n_vertices: int, n_covered: int, n_components: Optional[int]=None) -> None:
        self.total_cost = total_cost
        self.edge_count = edge_count
        self.edges = edges
        self.n_vertices = n_vertices
        self.n_covered = n_covered
        self.n_components = n_components

    @property
    def is_spanning_tree(self) -> bool:
        return self.n_vertices == 0 or self.edge_count == self.n_vertices - 1

    @property
    def is_partial(self) -> bool:
        return self.n_covered < self.n_vertices

    def edge_pairs(self) -> list[tuple[int, int]]:
        return [(e.u, e.v) for e in self.edges]

    def __repr__(self):
        return (f'MSTResult(total_cost={self.total_cost}, edge_count={self.edge_count}, '
                f'covered={self.n_covered}/{self.n_vertices})')


def format_result(result: MSTResult) -> str:
    lines = [str(result.total_cost), str(result.edge_count)]
    lines.extend(f'{e.u} {e.v}' for e in result.edges)
    return '\n'.join(lines) + '\n'


def write_results(results: Iterable[MSTResult], fname: str) -> None:
    with open(fname, 'w') as f:
        for result in results:
            f.write(format_result(result))
