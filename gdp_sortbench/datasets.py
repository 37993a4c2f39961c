# datasets.py
# ------------------------------------------------------------
# Loading the country/GDP CSV and building the three input
# arrangements (sorted, shuffled, reversed) every algorithm
# gets benchmarked on.
# ------------------------------------------------------------

from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from .harness import Arrangement
from .records import CountryGDP, copy_records


class DatasetError(Exception):
    """Source CSV is missing, unreadable or has a bad row."""


# wide enough for any sane row; fields past the gdp column mark the row as bad
_MAX_FIELDS = 32
_COLUMNS = ["country", "gdp"] + [f"extra_{i}" for i in range(_MAX_FIELDS - 2)]


# =========================
# Reading
# =========================
def read_gdp_csv(path: str, limit: int) -> List[CountryGDP]:
    """
    Reads up to `limit` (country, gdp) rows from a CSV with a header line.
    First column is the country, second the GDP (integer). Rows with an empty
    country or GDP, or with anything after the GDP field (e.g. an unquoted
    "Korea, South,1760"), are skipped and don't count towards the limit.

    Columns are named explicitly and index_col=False, so pandas never turns
    the first column into an index when a row is wider than the header.
    """
    if limit < 0:
        raise DatasetError(f"number of lines must be >= 0, got {limit}")
    try:
        df = pd.read_csv(path, header=None, names=_COLUMNS, index_col=False, dtype=str,
                         skipinitialspace=True, keep_default_na=False, on_bad_lines="skip")
    except FileNotFoundError as e:
        raise DatasetError(f"dataset not found: {path}") from e
    except pd.errors.EmptyDataError as e:
        raise DatasetError(f"{path} is empty") from e
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
        raise DatasetError(f"could not read {path}: {e}") from e
    if df.empty:
        raise DatasetError(f"{path} is empty")

    df = df.fillna("")
    fields = pd.DataFrame({c: df[c].str.strip() for c in _COLUMNS}, index=df.index)
    if fields.iloc[0]["gdp"] == "":
        raise DatasetError(f"{path}: expected 2 columns (country, gdp) in the header")

    body = fields.iloc[1:]
    ok = (body["country"] != "") & (body["gdp"] != "") & (body[_COLUMNS[2:]] == "").all(axis=1)
    pairs = body.loc[ok, ["country", "gdp"]]

    records: List[CountryGDP] = []
    for row_no, country, gdp in pairs.itertuples(name=None):
        if len(records) >= limit:
            break
        try:
            value = int(gdp)
        except ValueError:
            # row_no counts the header as row 0
            raise DatasetError(f"{path}, row {row_no + 1}: GDP {gdp!r} is not an integer") from None
        records.append(CountryGDP(country, value))
    return records


# =========================
# Arrangements
# =========================
def build_arrangements(source: Sequence[CountryGDP],
                       rng: Optional[np.random.Generator] = None) -> Dict[Arrangement, List[CountryGDP]]:
    """
    Builds the three independent inputs, in benchmark order:
    - Sorted: ascending by GDP
    - Shuffled: uniform random permutation (pass a seeded rng to reproduce it)
    - Reversed: descending by GDP
    Both sorts are stable, so equal GDPs keep their file order.
    """
    if rng is None:
        rng = np.random.default_rng()
    shuffled = copy_records(source)
    order = rng.permutation(len(shuffled))
    return {
        Arrangement.SORTED: sorted(copy_records(source), key=lambda r: r.gdp),
        Arrangement.SHUFFLED: [shuffled[i] for i in order],
        Arrangement.REVERSED: sorted(copy_records(source), key=lambda r: r.gdp, reverse=True),
    }
