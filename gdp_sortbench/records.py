# records.py
# ------------------------------------------------------------
# The one record type the benchmarks sort: a country and its
# GDP figure, ordered by GDP only.
# ------------------------------------------------------------

from dataclasses import dataclass, replace
from typing import List, Sequence


@dataclass(frozen=True, eq=True)
class CountryGDP:
    """
    One (country, gdp) pair from the dataset.
    Comparisons look at gdp only, so two countries with the same GDP are
    "equal" as far as the sorts are concerned (ties are not broken by name).
    """
    country: str
    gdp: int

    def __lt__(self, other: "CountryGDP") -> bool:
        return self.gdp < other.gdp

    def __le__(self, other: "CountryGDP") -> bool:
        return self.gdp <= other.gdp

    def __gt__(self, other: "CountryGDP") -> bool:
        return self.gdp > other.gdp

    def __ge__(self, other: "CountryGDP") -> bool:
        return self.gdp >= other.gdp

    def copy(self) -> "CountryGDP":
        return replace(self)

    def __str__(self) -> str:
        return f"{self.country}: {self.gdp}"


def copy_records(records: Sequence[CountryGDP]) -> List[CountryGDP]:
    """Deep copy, element by element."""
    return [r.copy() for r in records]
