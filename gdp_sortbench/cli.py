# cli.py
# ------------------------------------------------------------
# gdp-sortbench DATASET ALGORITHM LINES
# Reads LINES rows of country/GDP data, benchmarks one sort on
# sorted/shuffled/reversed copies, writes sorted.txt and appends
# to analysis.txt.
# ------------------------------------------------------------

import argparse
import sys
from typing import List, Optional

import numpy as np
import pandas as pd

from .algorithms import ALGORITHMS, UnknownAlgorithmError, get_algorithm
from .datasets import DatasetError, build_arrangements, read_gdp_csv
from .environment import machine_banner
from .harness import run_benchmark
from .output import append_analysis, summarize_analysis, write_sorted_output


def _non_negative_int(text: str) -> int:
    n = int(text)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="gdp-sortbench",
        description="Benchmark a sorting algorithm on GDP data (sorted, shuffled and reversed inputs).")
    p.add_argument("dataset", help="CSV file with a header row, then country,gdp rows")
    p.add_argument("algorithm", help=f"One of: {', '.join(ALGORITHMS)} (case-insensitive)")
    p.add_argument("lines", type=_non_negative_int, help="Number of data rows to use")
    p.add_argument("--sorted-out", default="sorted.txt",
                   help="Where the sorted records go (default: sorted.txt)")
    p.add_argument("--analysis-out", default="analysis.txt",
                   help="CSV the measurements get appended to (default: analysis.txt)")
    p.add_argument("--append-sorted", action="store_true",
                   help="Append to the sorted output instead of overwriting it")
    p.add_argument("--seed", type=int, default=None,
                   help="Seed for the shuffled arrangement (random if omitted)")
    p.add_argument("--summary", action="store_true",
                   help="Print a grouped summary of the analysis file after the run")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main flow:
      1) parse args, resolve the algorithm
      2) read the dataset and build the three arrangements
      3) run the benchmark (all in memory)
      4) only then write sorted output + append analysis rows
    """
    args = parse_args(argv)

    # checked before anything is read or opened, so a bad name leaves the files alone
    try:
        algorithm = get_algorithm(args.algorithm)
    except UnknownAlgorithmError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        data = read_gdp_csv(args.dataset, args.lines)
    except DatasetError as e:
        print(f"Error reading dataset: {e}", file=sys.stderr)
        return 1

    arrangements = build_arrangements(data, np.random.default_rng(args.seed))

    print("========================================")
    print("Sorting Algorithm Performance Analysis")
    print("========================================")
    print(f"Algorithm    : {algorithm.name}")
    print(f"Dataset size : {args.lines} ({len(data)} rows read)")
    for line in machine_banner():
        print(line)
    print()

    run = run_benchmark(algorithm, arrangements, dataset_size=args.lines)

    write_sorted_output(args.sorted_out, algorithm.title, run.sorted_output, append=args.append_sorted)
    append_analysis(args.analysis_out, run.results)

    print()
    if run.correct:
        print("All runs produced sorted output ✅")
    else:
        print("Some runs did not produce sorted output ❌")
    print(f"Results written to {args.sorted_out} and {args.analysis_out}")

    if args.summary:
        print()
        with pd.option_context("display.max_rows", None, "display.width", 120):
            print(summarize_analysis(args.analysis_out).to_string(index=False))
    return 0 if run.correct else 1


if __name__ == "__main__":
    sys.exit(main())
