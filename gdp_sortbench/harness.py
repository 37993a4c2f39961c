# harness.py
# ------------------------------------------------------------
# Runs one algorithm over the three arrangements and turns each
# run into ResultRecord rows (Time and/or Comparisons).
# One parametrized runner instead of a copy per algorithm.
# ------------------------------------------------------------

import time
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Mapping, Optional, Sequence

from .algorithms import SortAlgorithm
from .records import CountryGDP, copy_records


class Arrangement(Enum):
    SORTED = "Sorted"
    SHUFFLED = "Shuffled"
    REVERSED = "Reversed"

    @property
    def heading(self) -> str:
        """Label used in the console output."""
        return "Already Sorted" if self is Arrangement.SORTED else self.value


class Metric(Enum):
    TIME = "Time"
    COMPARISONS = "Comparisons"


@dataclass(frozen=True)
class ResultRecord:
    """
    One row of analysis output (one metric of one run).
    """
    algorithm: str
    arrangement: Arrangement
    size: int
    metric: Metric
    value: int

    def to_row(self) -> List:
        # column order is fixed so analysis files from many runs stay aggregatable
        return [self.algorithm, self.arrangement.value, self.size, self.metric.value, self.value]


@dataclass
class BenchmarkRun:
    algorithm: str
    results: List[ResultRecord] = field(default_factory=list)
    sorted_output: List[CountryGDP] = field(default_factory=list)
    correct: bool = True


# =========================
# Sanity checks (run outside the timed block)
# =========================
def is_sorted(a: Sequence[CountryGDP]) -> bool:
    """quick correctness check (non-decreasing by gdp)."""
    return all(a[i].gdp <= a[i + 1].gdp for i in range(len(a) - 1))


def is_permutation(before: Sequence[CountryGDP], after: Sequence[CountryGDP]) -> bool:
    return Counter(before) == Counter(after)


# =========================
# Runner
# =========================
def run_benchmark(algorithm: SortAlgorithm,
                  arrangements: Mapping[Arrangement, Sequence[CountryGDP]],
                  dataset_size: Optional[int] = None,
                  clock: Callable[[], int] = time.perf_counter_ns,
                  verbose: bool = True) -> BenchmarkRun:
    """
    Runs `algorithm` (a SortAlgorithm) on a private copy of each arrangement,
    in Sorted, Shuffled, Reversed order.

    Timing brackets only the sort call. `clock` must be monotonic and return
    nanoseconds; elapsed is never reported below 0. Counted algorithms get a
    Comparisons row from the value the sort returns.

    `dataset_size` is what goes in the size column; defaults to the length of
    the Sorted arrangement.
    """
    if dataset_size is None:
        dataset_size = len(arrangements[Arrangement.SORTED])

    run = BenchmarkRun(algorithm=algorithm.name)
    for arrangement in Arrangement:
        source = arrangements[arrangement]
        data = copy_records(source)

        start = clock()
        count = algorithm.func(data)
        end = clock()
        elapsed = max(0, end - start)

        if verbose:
            print(f"{algorithm.title} - {arrangement.heading}:")
        if algorithm.timed:
            run.results.append(ResultRecord(algorithm.name, arrangement, dataset_size, Metric.TIME, elapsed))
            if verbose:
                print(f"  Time: {elapsed} ns")
        if algorithm.counted:
            run.results.append(ResultRecord(algorithm.name, arrangement, dataset_size, Metric.COMPARISONS, int(count)))
            if verbose:
                print(f"  Comparisons: {count}")

        if not (is_sorted(data) and is_permutation(source, data)):
            run.correct = False
        if arrangement is Arrangement.SORTED:
            run.sorted_output = data
    return run

