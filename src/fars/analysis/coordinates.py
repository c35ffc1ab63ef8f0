"""
Accident Coordinate Cleaning (Functional Core)

FARS encodes unknown positions with out-of-range values instead of blanks
(e.g. LONGITUD 999.9999, LATITUDE 99.9999).  ``clean_coordinates`` turns
those sentinels into NaN; the state map generator applies it to the
state-filtered rows before any range or plotting step, so nothing
downstream of it has to know the codes.

Package Location: src/fars/analysis/coordinates.py
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pandas as pd

# Values strictly above these thresholds mean "unknown".
LATITUDE_SENTINEL: float = 90.0
LONGITUDE_SENTINEL: float = 900.0

Bounds = Tuple[Tuple[float, float], Tuple[float, float]]


def _mask_above(values: pd.Series, threshold: float) -> np.ndarray:
    arr = pd.to_numeric(values, errors="coerce").to_numpy(dtype=float)
    return np.where(arr > threshold, np.nan, arr)


def clean_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Return a copy of *df* with sentinel coordinates replaced by NaN.

    ``LATITUDE`` and ``LONGITUD`` become float columns; non-numeric entries
    are treated as unknown as well.
    """
    out = df.copy()
    out["LATITUDE"] = _mask_above(out["LATITUDE"], LATITUDE_SENTINEL)
    out["LONGITUD"] = _mask_above(out["LONGITUD"], LONGITUDE_SENTINEL)
    return out


def valid_locations(df: pd.DataFrame) -> pd.DataFrame:
    """Rows of a cleaned table where both latitude and longitude are known."""
    return df.dropna(subset=["LATITUDE", "LONGITUD"])


def coordinate_bounds(df: pd.DataFrame) -> Optional[Bounds]:
    """
    Bounding box of the known coordinates in a cleaned table.

    Latitude and longitude ranges are taken independently, so a row whose
    longitude is unknown still contributes its latitude (and vice versa).

    Returns:
        ``((lat_min, lat_max), (lon_min, lon_max))``, or ``None`` when either
        column has no known value.
    """
    lat = df["LATITUDE"].dropna().to_numpy()
    lon = df["LONGITUD"].dropna().to_numpy()
    if lat.size == 0 or lon.size == 0:
        return None
    return (
        (float(lat.min()), float(lat.max())),
        (float(lon.min()), float(lon.max())),
    )
