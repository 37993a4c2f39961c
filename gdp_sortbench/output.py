# output.py
# ------------------------------------------------------------
# The two result files:
#   sorted output  -> "=== <Algorithm> Results ===" + one line per record
#   analysis       -> append-only CSV rows, one per metric per run
# plus a grouped summary over everything the analysis file holds.
# ------------------------------------------------------------

from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from .harness import ResultRecord
from .records import CountryGDP

ANALYSIS_COLUMNS = ["algorithm", "arrangement", "size", "metric", "value"]


def write_sorted_output(path: str, title: str, records: Iterable[CountryGDP], append: bool = False) -> None:
    with open(path, "a" if append else "w", encoding="utf-8") as f:
        f.write(f"=== {title} Results ===\n")
        for r in records:
            f.write(f"{r}\n")


def append_analysis(path: str, results: Sequence[ResultRecord]) -> None:
    """
    Appends rows as algorithm,arrangement,datasetSize,metric,value.
    No header: the file grows over repeated invocations.
    """
    df = pd.DataFrame([r.to_row() for r in results], columns=ANALYSIS_COLUMNS)
    df.to_csv(path, mode="a", header=False, index=False)


def load_analysis(path: str) -> pd.DataFrame:
    try:
        return pd.read_csv(path, header=None, names=ANALYSIS_COLUMNS)
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=ANALYSIS_COLUMNS)


def summarize_analysis(path: str) -> pd.DataFrame:
    """
    Groups the accumulated rows by (algorithm, arrangement, size, metric) and
    computes run count, median, mean, std (0 when there's a single run) and min.
    """
    df = load_analysis(path)
    if df.empty:
        return pd.DataFrame(columns=ANALYSIS_COLUMNS[:-1] + ["Runs", "Median", "Mean", "Std", "Min"])
    g = df.groupby(ANALYSIS_COLUMNS[:-1], as_index=False).agg(
        Runs=("value", "size"),
        Median=("value", lambda x: float(np.median(x))),
        Mean=("value", "mean"),
        Std=("value", "std"),
        Min=("value", "min"),
    )
    g["Std"] = g["Std"].fillna(0.0)
    return g.sort_values(["metric", "size", "arrangement", "algorithm"]).reset_index(drop=True)
