"""
Disjoint sets stored directly in a parent array (VertexScratch.parent).

A vertex whose parent is None is the root of its set. There is no union
routine: callers link sets by writing one root into the other's parent
slot (see greedy._merge_components).
"""


def is_root(parent: list, v: int) -> bool:
    return parent[v] is None


def find_root(parent: list, v: int) -> int:
    """
    Root of the set containing v.

    Every vertex met on the way up is re-linked straight to the root (path
    compression), so an immediate second call touches nothing.
    """
    root = v
    while parent[root] is not None:
        root = parent[root]

    while v != root:
        next_v = parent[v]
        if next_v != root:
            parent[v] = root
        v = next_v
    return root


def same_set(parent: list, a: int, b: int) -> bool:
    return find_root(parent, a) == find_root(parent, b)
