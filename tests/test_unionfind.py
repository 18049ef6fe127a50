import random

import pytest

from kruskal import ROOT, UnionFind


def test_new_sets_are_singletons():
    uf = UnionFind(5)

    assert uf.n_sets == 5
    assert uf.parent == [ROOT] * 5
    assert uf.rank == [1] * 5
    for i in range(5):
        assert uf.find(i) == i


def test_empty():
    uf = UnionFind(0)

    assert uf.n_sets == 0
    assert uf.parent == []


def test_union_merges_exactly_one_set():
    uf = UnionFind(4)

    assert uf.union(0, 1)
    assert uf.n_sets == 3
    assert uf.find(0) == uf.find(1)
    assert uf.find(2) != uf.find(0)


def test_union_of_connected_vertices_is_noop():
    uf = UnionFind(3)
    uf.union(0, 1)
    uf.union(1, 2)
    parent = list(uf.parent)

    assert not uf.union(2, 0)
    assert uf.n_sets == 1
    assert uf.parent == parent


def test_union_by_rank():
    uf = UnionFind(4)

    # equal ranks: second root goes under the first, whose rank grows
    uf.union(0, 1)
    assert uf.parent[1] == 0
    assert uf.rank[0] == 2

    # lower rank root goes under the higher one regardless of argument order
    uf.union(2, 0)
    assert uf.parent[2] == 0
    assert uf.rank[0] == 2
    assert uf.parent == [ROOT, 0, 0, ROOT]
    assert uf.n_sets == 2


def test_find_compresses_whole_path():
    uf = UnionFind(5)
    uf.parent = [ROOT, 0, 1, 2, 3]

    assert uf.find(4) == 0
    assert uf.parent == [ROOT, 0, 0, 0, 0]


def test_find_on_long_chain_does_not_recurse():
    n = 100000
    uf = UnionFind(n)
    uf.parent = [ROOT] + list(range(n - 1))

    assert uf.find(n - 1) == 0
    assert uf.parent[n - 1] == 0


@pytest.mark.parametrize('index', [5, -1, 100])
def test_out_of_range_access_raises(index):
    uf = UnionFind(5)

    with pytest.raises(IndexError):
        uf.find(index)
    with pytest.raises(IndexError):
        uf.union(0, index)

    assert uf.n_sets == 5


def test_partition_matches_transitive_unions():
    rng = random.Random(7)
    n = 60
    uf = UnionFind(n)
    labels = list(range(n))

    for _ in range(45):
        a, b = rng.randrange(n), rng.randrange(n)
        merged = uf.union(a, b)
        assert merged == (labels[a] != labels[b])

        old, new = labels[b], labels[a]
        labels = [new if lbl == old else lbl for lbl in labels]

        for x in range(n):
            for y in range(x, n):
                assert (uf.find(x) == uf.find(y)) == (labels[x] == labels[y])

    assert uf.n_sets == len(set(labels))
