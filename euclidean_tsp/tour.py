from dataclasses import dataclass, field
from typing import Sequence

from .geometry import round_distance


@dataclass(frozen=True)
class TourResult:
    """Output of one solver run: closed tour starting at vertex 0 and its length."""

    solver: str
    tour: tuple
    distance: float
    extras: dict = field(default_factory=dict, compare=False)

    def __str__(self):
        path = " ".join(str(v) for v in self.tour)
        return f"Distance using {self.solver}: {self.distance:.2f} for path {path}"


def tour_distance(weights, tour: Sequence[int]) -> float:
    """Sum of the (already rounded) weights along consecutive tour vertices, rounded."""
    total = 0.0
    for a, b in zip(tour[:-1], tour[1:]):
        total += weights[a][b]
    return round_distance(float(total))


def is_valid_tour(tour: Sequence[int], n: int) -> bool:
    """Closed at vertex 0, n + 1 entries, every vertex exactly once before closing."""
    if n == 1:
        return list(tour) == [0]
    if len(tour) != n + 1 or tour[0] != 0 or tour[-1] != 0:
        return False
    return sorted(tour[:-1]) == list(range(n))


def degenerate_result(solver: str, **extras) -> TourResult:
    """The single-vertex tour."""
    return TourResult(solver, (0,), 0.0, extras)
