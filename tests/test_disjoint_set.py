import pytest

from algokit.disjoint_set import DisjointSet


@pytest.fixture
def ds():
    d = DisjointSet()
    for i in range(10):
        d.make_set(i)
    return d


def test_singletons_are_own_roots(ds):
    for i in range(10):
        assert ds.find(i) == i
        assert ds.rank(i) == 0


def test_union_joins_sets(ds):
    ds.union(1, 2)
    ds.union(3, 4)
    assert ds.find(1) == ds.find(2)
    assert ds.find(3) == ds.find(4)
    assert ds.find(1) != ds.find(3)
    ds.union(2, 4)
    assert ds.find(1) == ds.find(4)


def test_equal_rank_link_increments_rank(ds):
    root = ds.union(5, 6)
    assert root == 6
    assert ds.rank(6) == 1


def test_higher_rank_becomes_root(ds):
    ds.union(0, 1)  # root 1, rank 1
    root = ds.union(2, 1)
    assert root == 1
    assert ds.find(2) == 1
    assert ds.rank(1) == 1


def test_union_same_set_is_stable(ds):
    ds.union(7, 8)
    root = ds.find(7)
    assert ds.union(8, 7) == root
    assert ds.rank(root) == 1


def test_chain_all_into_one(ds):
    for i in range(9):
        ds.union(i, i + 1)
    roots = {ds.find(i) for i in range(10)}
    assert len(roots) == 1


def test_unknown_item_raises(ds):
    with pytest.raises(KeyError):
        ds.find("missing")
    with pytest.raises(KeyError):
        ds.union(1, "missing")