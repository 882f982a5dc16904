import argparse
import sys
import time

import numpy as np
from scipy.stats import linregress

from percolation_stats import PercolationStats, positive_int, seed_int


def sweep(sizes, trials: int, rng=None):
    """
    Runs PercolationStats for every grid size in 'sizes', all drawing from
    one shared random source so that a seed reproduces the whole sweep.
    """
    rng = np.random.default_rng(rng)
    return [PercolationStats(int(n), trials, rng=rng) for n in sizes]


def extrapolate_threshold(sizes, means, exponent=-3/4):
    """
    Fits mean critical probability against L^(exponent) and reads the
    infinite-lattice threshold off the intercept at L^(exponent) = 0.

    Returns:
        dict with 'pc_inf', 'slope', 'r_squared' and 'stderr' (standard
        error of the intercept)
    """
    sizes = np.asarray(sizes, dtype=float)
    means = np.asarray(means, dtype=float)
    if sizes.shape != means.shape:
        raise ValueError(f"got {len(sizes)} sizes but {len(means)} means")
    if len(sizes) < 2:
        raise ValueError("at least two grid sizes are needed to extrapolate")

    X_scaling = sizes ** exponent
    fit = linregress(X_scaling, means)
    return {
        'pc_inf': float(fit.intercept),
        'slope': float(fit.slope),
        'r_squared': float(fit.rvalue ** 2),
        'stderr': float(fit.intercept_stderr),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run percolation Monte Carlo over a range of grid sizes and extrapolate pc(infinity)."
    )

    parser.add_argument(
        '--Lmin',
        type=positive_int,
        default=50,
        help="Minimum size of the square grid (L_min x L_min)."
    )

    parser.add_argument(
        '--Lmax',
        type=positive_int,
        default=200,
        help="Maximum size of the square grid (L_max x L_max)."
    )

    parser.add_argument(
        '--Lstep',
        type=positive_int,
        default=50,
        help="Step size for increasing the grid size L."
    )

    parser.add_argument(
        '--t',
        type=positive_int,
        default=500,
        help="The number of Monte Carlo trials to perform per size."
    )

    parser.add_argument(
        '--exponent',
        type=float,
        default=-3/4,
        help="Scaling exponent applied to L in the extrapolation fit."
    )

    parser.add_argument(
        '--seed',
        type=seed_int,
        default=None,
        help="Seed for the random number generator, for reproducible runs."
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.Lmax < args.Lmin:
        parser.error(f"--Lmax ({args.Lmax}) must not be smaller than --Lmin ({args.Lmin})")

    L_values = list(range(args.Lmin, args.Lmax + 1, args.Lstep))

    print("Starting Monte Carlo Percolation Analysis...")
    print(f"System sizes (L): {args.Lmin} to {args.Lmax}, step {args.Lstep}")
    print(f"Trials per size: {args.t}")

    rng = np.random.default_rng(args.seed)
    means = []
    for L in L_values:
        print(f"simulate L = {L}")
        t0 = time.time()
        stats = sweep([L], args.t, rng=rng)[0]
        t1 = time.time()
        stats.report()
        print(f"Completed in {t1 - t0:.2f}s")
        means.append(stats.mean())

    print("\n--- Simulation Complete ---")
    if len(L_values) < 2:
        print("Only one grid size simulated, skipping extrapolation.")
        return 0

    res = extrapolate_threshold(L_values, means, exponent=args.exponent)
    print(f"\n--- Extrapolation Results (exponent {args.exponent:.2f}) ---")
    print(f"pc(infinity) = {res['pc_inf']:.6f} +/- {res['stderr']:.6f}, "
          f"R^2 = {res['r_squared']:.4f}")
    print("-------------------------------------------------------")
    return 0


if __name__ == "__main__":
    sys.exit(main())
