class VertexScratch:
    """
    Per-run mutable records of the vertices, kept apart from the points so
    that nothing leaks from one solver run into the next.

    Every record is indexed by point identity:
        parent[v]       union-find / traversal parent (None for a root)
        visited[v]      marked flag
        best_weight[v]  cheapest known connecting weight (None while unset,
                        which ranks as the worst possible weight)
    """

    def __init__(self, n: int):
        self.n = n
        self.parent = [None] * n
        self.visited = [False] * n
        self.best_weight = [None] * n

    def __len__(self):
        return self.n

    def __repr__(self):
        return f"VertexScratch(n={self.n}, visited={sum(self.visited)})"

    def reset(self):
        """Bring every record back to its neutral state."""
        for v in range(self.n):
            self.parent[v] = None
            self.visited[v] = False
            self.best_weight[v] = None

    def mark(self, v: int):
        self.visited[v] = True

    def is_marked(self, v: int) -> bool:
        return self.visited[v]

    def improves(self, v: int, weight: float) -> bool:
        """True if `weight` is strictly cheaper than the best known weight of v."""
        best = self.best_weight[v]
        return best is None or weight < best
