"""
Sorting benchmarks over country/GDP data.

Five sorts (bubble, merge, quick, heap, odd-even transposition) are timed
and/or counted against sorted, shuffled and reversed copies of one dataset.
"""

from .records import CountryGDP
from .algorithms import ALGORITHMS, SortAlgorithm, UnknownAlgorithmError, get_algorithm
from .datasets import DatasetError, build_arrangements, read_gdp_csv
from .harness import Arrangement, BenchmarkRun, Metric, ResultRecord, run_benchmark

__version__ = "0.1.0"
