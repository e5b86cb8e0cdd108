"""
Benchmark driver for the binary radix sort.

Run with something like:
    python -m binary_radix.benchmark --sizes 10000 100000 --iterations 5 --seed 1
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from .digits import DEFAULT_WIDTH, find_estimator_mismatch
from .errors import BenchmarkValidationError, RadixSortError
from .sequential_radix import BinaryRadixSorter

logger = logging.getLogger(__name__)

DEFAULT_SIZES = [10_000, 100_000, 1_000_000]


@dataclass(frozen=True)
class BenchmarkRun:
    size: int
    iteration: int
    seconds: float
    passes: int
    validated: bool


@dataclass
class BenchmarkResult:
    size: int
    iterations: int
    runs: List[BenchmarkRun] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return bool(self.runs) and len(self.runs) == self.iterations and all(run.validated for run in self.runs)

    @property
    def total(self) -> float:
        return sum(run.seconds for run in self.runs)

    @property
    def average(self) -> float:
        return self.total / len(self.runs) if self.runs else 0.0

    def raise_for_failure(self) -> None:
        for run in self.runs:
            if not run.validated:
                raise BenchmarkValidationError(self.size, run.iteration)


def make_input(n: int, rng: random.Random) -> List[int]:
    """A shuffled permutation of 0..n-1."""
    unsorted = list(range(n))
    rng.shuffle(unsorted)
    return unsorted


def benchmark_size(
    n: int,
    iterations: int,
    rng: random.Random,
    width: int = DEFAULT_WIDTH,
) -> BenchmarkResult:
    """Time ``iterations`` sorts of fresh inputs of size ``n``; stop at the first unsorted output."""
    result = BenchmarkResult(size=n, iterations=iterations)
    for it in range(1, iterations + 1):
        sorter = BinaryRadixSorter(make_input(n, rng), width=width)
        start = time.perf_counter()
        sorter.sort()
        end = time.perf_counter()

        run = BenchmarkRun(
            size=n,
            iteration=it,
            seconds=end - start,
            passes=sorter.passes,
            validated=sorter.is_sorted(),
        )
        result.runs.append(run)
        logger.debug("n = %d, iteration %d: %.6f s over %d passes", n, it, run.seconds, run.passes)
        if not run.validated:
            break
    return result


def run_benchmark(
    sizes: Sequence[int] = DEFAULT_SIZES,
    iterations: int = 10,
    seed: Optional[int] = None,
    width: int = DEFAULT_WIDTH,
) -> List[BenchmarkResult]:
    rng = random.Random(seed)
    results = []
    for n in sizes:
        result = benchmark_size(n, iterations, rng, width=width)
        results.append(result)
        if not result.passed:
            break
    return results


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Binary radix sort benchmark")
    parser.add_argument("--sizes", type=int, nargs="+", default=DEFAULT_SIZES, help="Input sizes to benchmark.")
    parser.add_argument("--iterations", type=int, default=10, help="Sorts timed per input size.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Bit width of the signed integer type.")
    parser.add_argument(
        "--check-digits",
        type=int,
        default=None,
        metavar="LIMIT",
        help="Cross-check both digit estimators on powers of two below LIMIT and exit.",
    )
    parser.add_argument("--svg", type=Path, default=None, help="Write a log-log timing chart to this path.")
    parser.add_argument("--verbose", action="store_true", help="Log per-pass diagnostics.")
    args = parser.parse_args(argv)

    if args.iterations < 1:
        parser.error("--iterations must be at least 1")
    if args.width < 2:
        parser.error("--width must be at least 2")
    if any(n < 1 for n in args.sizes):
        parser.error("--sizes must all be at least 1")
    if args.check_digits is not None and args.check_digits < 1:
        parser.error("--check-digits must be at least 1")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        if args.check_digits is not None:
            broke = find_estimator_mismatch(args.check_digits, width=args.width)
            if broke is not None:
                print(f"BROKE AT {broke}")
                return 1
            print(f"Estimators agree on every power of two below {args.check_digits:,}")
            return 0

        print(f"\tSizes:\t\t{', '.join(f'{n:,}' for n in args.sizes)}")
        print(f"\tIterations:\t{args.iterations}")
        results = run_benchmark(args.sizes, args.iterations, seed=args.seed, width=args.width)
        for result in results:
            for run in result.runs:
                print(f"n = {run.size:>10,}  {run.iteration:>3}  →  time = {run.seconds:.3f} s")
            result.raise_for_failure()
            print(f"n = {result.size:>10,}  average time = {result.average:.3f} s")

        if args.svg is not None:
            from .report import write_svg

            print(f"Wrote {write_svg(results, args.svg)}")
    except RadixSortError as e:
        print(f"SORTER BROKE: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
