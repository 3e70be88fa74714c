from faemaze.mapgen.disjoint_set import DisjointSet

def test_union_reports_merges():
    ds = DisjointSet.of_size(5)
    assert ds.union(0, 1) is True
    assert ds.union(1, 0) is False
    assert ds.union(2, 3) is True
    assert ds.connected(0, 1) and not ds.connected(1, 2)
    assert ds.component_count() == 3

def test_equal_rank_tie_goes_under_x():
    ds = DisjointSet.of_size(4)
    ds.union(0, 1)
    assert ds.parent[1] == 0 and ds.rank[0] == 1
    # lower rank root (2) attaches under the taller tree regardless of argument order
    ds.union(2, 0)
    assert ds.find(2) == 0 and ds.rank[0] == 1

def test_full_merge_leaves_one_component():
    n = 64
    ds = DisjointSet.of_size(n)
    merges = sum(ds.union(i, i + 1) for i in range(n - 1))
    assert merges == n - 1
    assert ds.component_count() == 1
    root = ds.find(0)
    assert all(ds.find(i) == root for i in range(n))

def test_find_is_iterative_and_compresses():
    # A degenerate chain far deeper than the recursion limit
    n = 200_000
    ds = DisjointSet(parent=[max(i - 1, 0) for i in range(n)])
    assert ds.find(n - 1) == 0
    assert ds.parent[n - 1] == 0
    assert ds.parent[n // 2] == 0
