import math
from typing import NamedTuple, Sequence

import numpy as np

from .config import DISTANCE_PRECISION


class Point(NamedTuple):
    """A vertex of the plane: stable identity index and integer coordinates."""

    index: int
    x: int
    y: int

    def __str__(self):
        return f"({self.x},{self.y}) "


# -------------------------
# 1. DISTANCES
# -------------------------
def round_distance(value: float) -> float:
    """Round a length to the fixed precision used for every comparison and sum."""
    return round(value, DISTANCE_PRECISION)


def euclidean_distance(p: Point, q: Point) -> float:
    """Rounded Euclidean distance between two points."""
    return round_distance(math.hypot(p.x - q.x, p.y - q.y))


# -------------------------
# 2. POINT GENERATION
# -------------------------
def normalize_seed(seed: int) -> int:
    """Map any integer seed into the range accepted by numpy's generators."""
    return int(seed) % 2 ** 32


def generate_points(n: int, seed: int) -> list:
    """
    Place n points with integer coordinates in [0, n) x [0, n), all with
    distinct x-coordinates.

    Points are drawn from a generator seeded with `seed`; a draw whose x
    already appears is thrown away and drawn again, so the same (n, seed)
    always yields the same point set.
    """
    rng = np.random.default_rng(normalize_seed(seed))
    points = []
    used_x = set()
    while len(points) < n:
        x = int(rng.integers(n))
        y = int(rng.integers(n))
        if x in used_x:
            continue
        used_x.add(x)
        points.append(Point(len(points), x, y))
    return points


def points_from_coordinates(coordinates: Sequence) -> list:
    """Wrap (x, y) pairs into Points, numbered in the given order."""
    return [Point(i, int(x), int(y)) for i, (x, y) in enumerate(coordinates)]


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """(n, 2) float array of coordinates, row i holding point i."""
    if len(points) == 0:
        return np.empty((0, 2))
    return np.array([[p.x, p.y] for p in points], dtype=float)
