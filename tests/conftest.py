import random

import pytest

from gdp_sortbench.records import CountryGDP


@pytest.fixture
def five_countries():
    # values [30, 10, 50, 20, 40]
    return [
        CountryGDP("Canada", 30),
        CountryGDP("Denmark", 10),
        CountryGDP("Egypt", 50),
        CountryGDP("France", 20),
        CountryGDP("Ghana", 40),
    ]


@pytest.fixture
def random_countries():
    rng = random.Random(1234)
    return [CountryGDP(f"C{i}", rng.randint(-50, 50)) for i in range(200)]


@pytest.fixture
def gdp_csv(tmp_path):
    """Writes a CSV with a header and the given (country, gdp) rows; returns its path."""
    def _write(rows, header="Country,GDP"):
        path = tmp_path / "gdp.csv"
        lines = [header] + [f"{c},{g}" for c, g in rows]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)
    return _write
