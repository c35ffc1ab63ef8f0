"""Shared fixtures: small bz2-compressed FARS-style accident files."""

from pathlib import Path

import numpy as np
import pandas as pd
import pytest


def make_accidents(year, months, states=None, latitude=None, longitude=None, extra_columns=0):
    """Build an accident table with one row per entry in *months*."""
    n = len(months)
    data = {
        "STATE": states if states is not None else [1] * n,
        "ST_CASE": list(range(10001, 10001 + n)),
        "MONTH": months,
        "YEAR": [year] * n,
        "LATITUDE": latitude if latitude is not None else np.linspace(31.0, 34.0, n),
        "LONGITUD": longitude if longitude is not None else np.linspace(-88.0, -85.0, n),
    }
    for i in range(extra_columns):
        data[f"EXTRA_{i}"] = [i] * n
    return pd.DataFrame(data)


def write_accidents(directory: Path, year: int, df: pd.DataFrame) -> Path:
    path = Path(directory) / f"accident_{year}.csv.bz2"
    df.to_csv(path, index=False, compression="bz2")
    return path


@pytest.fixture
def data_dir(tmp_path):
    """Directory with files for 2013 and 2014 (no 2015)."""
    months_2013 = [m for m in range(1, 13) for _ in range(m)]      # m accidents in month m
    months_2014 = [1, 1, 2, 3, 3, 3, 12]
    write_accidents(tmp_path, 2013, make_accidents(2013, months_2013))
    write_accidents(
        tmp_path,
        2014,
        make_accidents(
            2014,
            months_2014,
            states=[1, 1, 1, 6, 6, 56, 56],
            latitude=[32.5, 33.1, 99.9999, 36.7, 34.0, 41.1, 44.0],
            longitude=[-86.9, 999.9999, -87.5, -119.4, -118.2, -105.5, -107.3],
        ),
    )
    return tmp_path
