import os
import time

import numpy as np

from .config import DEFAULT_RESULTS_FOLDER, TRACE_PRINT_LIMIT
from .geometry import points_from_coordinates, points_to_array
from .graph import WeightedGraph
from .solvers import solve
from .utils import ratios_to_reference, solvers_for_size


# -------------------------
# TIMING
# -------------------------
def time_solver(graph: WeightedGraph, name: str, **kwargs):
    """Run one solver and return (result, runtime in milliseconds)."""
    start = time.perf_counter()
    result = solve(graph, name, **kwargs)
    runtime_ms = (time.perf_counter() - start) * 1000
    return result, runtime_ms


def compare_solvers(n, seed, solvers=None, greedy_seed=None, verbose=True):
    """
    Build the graph of (n, seed) once and run every requested solver on it.

    Returns (graph, {name: (TourResult, runtime_ms)}). When `solvers` is
    None, every solver practical for n is used.
    """
    graph = WeightedGraph.from_seed(n, seed)
    if verbose:
        print(f"✅ Graph generated with {graph.n} points (seed {seed})")

    if solvers is None:
        solvers = solvers_for_size(n)

    results = {}
    for name in solvers:
        kwargs = {}
        if name == "greedy":
            kwargs["seed"] = greedy_seed
        elif name == "optimal" and graph.n <= TRACE_PRINT_LIMIT:
            kwargs["trace"] = []
        result, runtime_ms = time_solver(graph, name, **kwargs)
        results[name] = (result, runtime_ms)
        if verbose:
            print(f"[{name}] distance {result.distance:.2f} | {runtime_ms:.3f} ms")
    return graph, results


# -------------------------
# SAVE / LOAD RESULTS
# -------------------------
def result_filename(n, seed, folder=DEFAULT_RESULTS_FOLDER):
    return os.path.join(folder, f"points_n{n}_seed{seed}.npz")


def save_result_to_file(graph, results, seed, folder=DEFAULT_RESULTS_FOLDER, verbose=True):
    """Save points, tours, distances and runtimes of one comparison as a single .npz."""
    os.makedirs(folder, exist_ok=True)
    filename = result_filename(graph.n, seed, folder)

    names = list(results)
    arrays = {
        "points": points_to_array(graph.points),
        "solvers": np.array(names),
        "distances": np.array([results[name][0].distance for name in names]),
        "runtimes": np.array([results[name][1] for name in names]),
        "seed": seed,
    }
    for name in names:
        arrays[f"tour_{name}"] = np.array(results[name][0].tour, dtype=int)

    np.savez_compressed(filename, **arrays)
    if verbose:
        print(f"💾 Saved: {filename}")
    return filename


def load_result_from_file(n, seed, folder=DEFAULT_RESULTS_FOLDER):
    """Load a saved comparison; the graph is rebuilt from the stored points."""
    filename = result_filename(n, seed, folder)
    with np.load(filename) as data:
        names = [str(name) for name in data["solvers"]]
        points = points_from_coordinates(data["points"].astype(int))
        return {
            "graph": WeightedGraph(points),
            "seed": int(data["seed"]),
            "distances": dict(zip(names, data["distances"].tolist())),
            "runtimes": dict(zip(names, data["runtimes"].tolist())),
            "tours": {name: tuple(data[f"tour_{name}"].tolist()) for name in names},
        }


# -------------------------
# BATCH RUNS
# -------------------------
def run_experiments(sizes=range(4, 11), seeds=range(3), folder=None, greedy_seed=None, verbose=True):
    """
    Compare all solvers over every (n, seed) pair and report each solver's
    distance relative to the optimal (or best found) tour.
    Returns one record per (n, seed, solver).
    """
    records = []
    for n in sizes:
        if verbose:
            print(f"\n📦 n = {n}")
        for seed in seeds:
            graph, results = compare_solvers(n, seed, greedy_seed=greedy_seed, verbose=False)
            distances = {name: r.distance for name, (r, _) in results.items()}
            ratios = ratios_to_reference(distances)

            for name, (result, runtime_ms) in results.items():
                records.append({
                    "n": n,
                    "seed": seed,
                    "solver": name,
                    "distance": result.distance,
                    "ratio": ratios[name],
                    "runtime_ms": runtime_ms,
                })

            if verbose:
                summary = " | ".join(f"{name} {ratios[name]:.4f}" for name in results)
                print(f"➡️ seed {seed}: {summary}")
            if folder is not None:
                save_result_to_file(graph, results, seed, folder=folder, verbose=verbose)

        if verbose:
            print(f"✅ Done for n={n}")
    return records
