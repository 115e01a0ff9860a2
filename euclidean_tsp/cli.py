import argparse
import sys

from .config import SOLVER_NAMES, validate_arguments
from .errors import ConfigurationError, TSPError
from .experiment import compare_solvers, save_result_to_file
from .report import format_report

parser = argparse.ArgumentParser(
    prog="euclidean_tsp",
    description="Solve the Euclidean TSP on n random points with exact, MST, greedy and bitonic solvers",
)
parser.add_argument('solver',
                    help='solver to run, or "all" to compare every solver on the same points',
                    choices=[*SOLVER_NAMES, "all"])
parser.add_argument('n', help='number of points')
parser.add_argument('seed', help='seed used to place the points')
parser.add_argument('--greedy-seed',
                    help='seed for the shuffle that precedes the greedy edge sort',
                    type=int, default=None)
parser.add_argument('--save',
                    help='folder to write the results to as .npz',
                    type=str, default=None)
parser.add_argument('--plot',
                    help='show the tours in a matplotlib window',
                    action="store_true")


def main(argv=None) -> int:
    args = parser.parse_args(argv)
    try:
        n, seed = validate_arguments(args.n, args.seed, args.solver)
    except ConfigurationError as exc:
        print(exc)
        print(f"Usage: {parser.prog} {{{','.join(SOLVER_NAMES)},all}} n seed")
        return 1

    solvers = list(SOLVER_NAMES) if args.solver == "all" else [args.solver]
    try:
        graph, results = compare_solvers(
            n, seed, solvers=solvers, greedy_seed=args.greedy_seed, verbose=False
        )
    except TSPError as exc:
        print(f"Solving went badly: {exc}", file=sys.stderr)
        return 2

    for index, (result, runtime_ms) in enumerate(results.values()):
        # points and weights are printed once, before the first solver
        print(format_report(graph, result, runtime_ms, include_graph=index == 0))
        print()

    if args.save:
        save_result_to_file(graph, results, seed, folder=args.save)

    if args.plot:
        from .plotting import plot_solutions
        plot_solutions(graph.points, results, title=f"n = {n}, seed = {seed}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
