import argparse
import math
import sys

import numpy as np
from scipy.stats import norm

from percolation import Percolation


def run_trial(n: int, rng: np.random.Generator) -> float:
    """
    Opens blocked sites of a fresh n-by-n grid in uniformly random order
    until it percolates.

    Args:
        n: grid size
        rng: random source, one of numpy's Generators

    Returns:
        fraction of sites open at the moment the grid first percolates
    """
    simulator = Percolation(n)
    # walking a random permutation picks each next site uniformly among
    # the ones still blocked
    for idx in rng.permutation(n * n):
        row, col = divmod(int(idx), n)
        simulator.open(row + 1, col + 1)
        if simulator.percolates():
            break
    return simulator.numberOfOpenSites() / (n * n)


class PercolationStats:
    """
    Runs 'trials' independent experiments on an n-by-n grid and summarises
    the percolation thresholds they produce.

    The random source is explicit: pass a numpy Generator or an integer
    seed for reproducible runs, or nothing for fresh entropy.
    """

    def __init__(self, n: int, trials: int, rng=None, confidence: float = 0.95):
        if n <= 0 or trials <= 0:
            raise ValueError("grid size n and trials count must be positive integers")
        if not 0.0 < confidence < 1.0:
            raise ValueError(f"confidence must be in (0, 1), got {confidence}")

        self.gridSize = n
        self.trialCount = trials
        self.confidence = confidence
        self.rng = np.random.default_rng(rng)

        self.threshold_samples = np.array(
            [run_trial(n, self.rng) for _ in range(trials)], dtype=np.float64)

    def mean(self) -> float:
        return float(np.mean(self.threshold_samples))

    def stddev(self) -> float:
        # the sample standard deviation is undefined for a single trial
        if self.trialCount == 1:
            return float("nan")
        return float(np.std(self.threshold_samples, ddof=1))

    def z_value(self) -> float:
        return float(norm.ppf(1.0 - (1.0 - self.confidence) / 2.0))

    def half_width(self) -> float:
        return self.z_value() * self.stddev() / math.sqrt(self.trialCount)

    def confidenceLo(self) -> float:
        return self.mean() - self.half_width()

    def confidenceHi(self) -> float:
        return self.mean() + self.half_width()

    def confidence_interval(self):
        return self.confidenceLo(), self.confidenceHi()

    def report(self):
        print("=" * 60)
        print(f"STATS REPORT (n = {self.gridSize}, trials = {self.trialCount})")
        print("=" * 60)

        print(f"mean value of critical value pc = {self.mean(): .6f}")
        print(f"std value of critical value pc = {self.stddev(): .6f}")
        lo, hi = self.confidence_interval()
        print(f"the {self.confidence * 100:g}% confidence interval is {lo:.6f} ~ {hi:.6f}")
        print("=" * 60)


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text!r} is not an integer")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return value


def seed_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text!r} is not an integer")
    # numpy seeds must be non-negative
    if value < 0:
        raise argparse.ArgumentTypeError(f"{value} is not a non-negative integer")
    return value


def probability(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text!r} is not a number")
    if not 0.0 < value < 1.0:
        raise argparse.ArgumentTypeError(f"{value} is not strictly between 0 and 1")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimate the site percolation threshold of an n-by-n grid by Monte Carlo simulation."
    )

    parser.add_argument(
        'n',
        type=positive_int,
        help="Size of the square grid (n x n)."
    )

    parser.add_argument(
        't',
        type=positive_int,
        help="The number of Monte Carlo trials to perform."
    )

    parser.add_argument(
        '--seed',
        type=seed_int,
        default=None,
        help="Seed for the random number generator, for reproducible runs."
    )

    parser.add_argument(
        '--confidence',
        type=probability,
        default=0.95,
        help="Confidence level of the reported interval."
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    stats = PercolationStats(args.n, args.t, rng=args.seed, confidence=args.confidence)
    lo, hi = stats.confidence_interval()
    label = f"{args.confidence * 100:g}% confidence interval"

    print(f"{'mean':<23} = {stats.mean()}")
    print(f"{'stddev':<23} = {stats.stddev()}")
    print(f"{label:<23} = [{lo}, {hi}]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
