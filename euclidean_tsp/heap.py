import math

from .errors import EmptyHeapError


class TreeNode:
    """
    Fringe entry of the MST construction.

    `weight` is the cheapest known edge into the tree (None while unset,
    ranked above every real weight) and `parent` the position of the tree
    vertex at the other end of that edge.
    """

    __slots__ = ("position", "weight", "parent")

    def __init__(self, position: int, weight=None, parent=None):
        self.position = position
        self.weight = weight
        self.parent = parent

    def __repr__(self):
        return f"TreeNode(position={self.position}, weight={self.weight}, parent={self.parent})"


def _rank(weight) -> float:
    return math.inf if weight is None else weight


# -------------------------
# ARRAY-BACKED MIN-HEAP
# -------------------------
class BinaryHeap:
    """
    Binary min-heap of TreeNodes ordered by weight.

    Slot 0 of the backing list is unused; the root lives at 1 and the
    children of i at 2i and 2i+1. The backing list doubles when full.
    Weights may be changed from outside (decrease-key by writing
    `node.weight`), after which `heapify()` must be called.
    """

    def __init__(self, capacity: int = 10):
        self._array = [None] * max(2, capacity)
        self._size = 0

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"BinaryHeap(size={self._size}, capacity={len(self._array)})"

    @property
    def capacity(self) -> int:
        return len(self._array)

    def is_empty(self) -> bool:
        return self._size == 0

    def to_list(self):
        """Nodes in array order (root first)."""
        return self._array[1:self._size + 1]

    # -------------------------
    # PUBLIC OPERATIONS
    # -------------------------
    def insert(self, node: TreeNode):
        if self._size >= len(self._array) - 1:
            self._array.extend([None] * len(self._array))
        self._size += 1
        self._array[self._size] = node
        self._swim(self._size)

    def peek(self) -> TreeNode:
        if self.is_empty():
            raise EmptyHeapError("peek from an empty heap")
        return self._array[1]

    def extract_min(self) -> TreeNode:
        if self.is_empty():
            raise EmptyHeapError("extract from an empty heap")
        result = self._array[1]
        self._array[1] = self._array[self._size]
        self._array[self._size] = None
        self._size -= 1
        if self._size > 0:
            self._sink(1)
        return result

    def heapify(self):
        """Restore heap order over the whole array by sinking every inner node."""
        for i in range(self._size // 2, 0, -1):
            self._sink(i)

    def is_valid(self) -> bool:
        """True if every node ranks no higher than its children."""
        for i in range(2, self._size + 1):
            if _rank(self._array[i // 2].weight) > _rank(self._array[i].weight):
                return False
        return True

    # -------------------------
    # INTERNALS
    # -------------------------
    def _swap(self, i: int, j: int):
        self._array[i], self._array[j] = self._array[j], self._array[i]

    def _swim(self, index: int):
        # an unset weight never rises; a real weight rises past unset parents
        while index > 1:
            parent = index // 2
            if _rank(self._array[parent].weight) > _rank(self._array[index].weight):
                self._swap(index, parent)
                index = parent
            else:
                break

    def _sink(self, index: int):
        # unset weights rank as infinity, so they sink below real weights too
        while 2 * index <= self._size:
            child = 2 * index
            right = child + 1
            if right <= self._size and _rank(self._array[child].weight) > _rank(self._array[right].weight):
                child = right
            if _rank(self._array[index].weight) > _rank(self._array[child].weight):
                self._swap(index, child)
                index = child
            else:
                break
