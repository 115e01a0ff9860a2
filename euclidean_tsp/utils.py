from .config import MAX_EXACT_VERTICES, SOLVER_NAMES


# -------------------------
# SOLVER SELECTION
# -------------------------
def solvers_for_size(n: int) -> list:
    """Solvers worth running on n points: the exhaustive one only while n is small."""
    if n <= MAX_EXACT_VERTICES:
        return list(SOLVER_NAMES)
    return [name for name in SOLVER_NAMES if name != "optimal"]


# -------------------------
# RATIOS
# -------------------------
def reference_distance(distances: dict) -> float:
    """Optimal distance when known, otherwise the best distance found."""
    if "optimal" in distances:
        return distances["optimal"]
    return min(distances.values())


def ratios_to_reference(distances: dict) -> dict:
    """Each solver's distance divided by the reference; 1.0 for a zero-length reference."""
    reference = reference_distance(distances)
    if reference == 0:
        return {name: 1.0 for name in distances}
    return {name: d / reference for name, d in distances.items()}
