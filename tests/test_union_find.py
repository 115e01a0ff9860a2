from euclidean_tsp.union_find import find_root, is_root, same_set
from euclidean_tsp.vertex import VertexScratch


def test_roots_have_no_parent():
    parent = [None, 0, None]
    assert is_root(parent, 0)
    assert not is_root(parent, 1)
    assert find_root(parent, 2) == 2


def test_find_root_compresses_the_path():
    parent = [None, 0, 1, 2, 3]
    assert find_root(parent, 4) == 0
    assert parent == [None, 0, 0, 0, 0]


def test_second_find_changes_nothing():
    parent = [None, 0, 1, 2, 3, 4, 5]
    first = find_root(parent, 6)
    snapshot = list(parent)
    assert find_root(parent, 6) == first
    assert parent == snapshot
    assert parent[6] == first


def test_compression_never_lengthens_paths():
    parent = [None, 0, 1, None, 3, 2]

    def depth(v):
        d = 0
        while parent[v] is not None:
            v = parent[v]
            d += 1
        return d

    before = [depth(v) for v in range(len(parent))]
    find_root(parent, 5)
    after = [depth(v) for v in range(len(parent))]
    assert all(a <= b for a, b in zip(after, before))
    assert same_set(parent, 5, 1)
    assert not same_set(parent, 4, 5)


def test_scratch_parents_serve_as_forest():
    scratch = VertexScratch(4)
    scratch.parent[1] = 0
    scratch.parent[3] = 1
    assert find_root(scratch.parent, 3) == 0
    scratch.reset()
    assert all(is_root(scratch.parent, v) for v in range(4))
