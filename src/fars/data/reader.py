"""
FARS File Reader (Imperative Shell)

File naming and single-file reads.  Every other module reaches the disk
through ``fars_read``.

Package Location: src/fars/data/reader.py

File naming convention:
    ``accident_<year>.csv.bz2`` – one bz2-compressed CSV per year, as
    published by NHTSA.  ``fars_read`` also accepts plain ``.csv`` files and
    any other compression pandas can infer from the extension.
"""

from __future__ import annotations

import errno
import logging
import os
from pathlib import Path
from typing import Any, Union

import pandas as pd

logger = logging.getLogger(__name__)

_FILENAME_TEMPLATE = "accident_{year}.csv.bz2"


def coerce_int(value: Any) -> int:
    """
    Coerce *value* to an ``int``.

    Integers and numeric strings convert directly; floats (and strings such
    as ``"2013.0"``) are truncated toward zero.

    Raises:
        ValueError: If *value* has no integer interpretation (including
            NaN and infinities).
    """
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        pass
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"expected a value coercible to an integer, got {value!r}")


def coerce_year(year: Any) -> int:
    """
    Coerce *year* to an ``int`` with ``coerce_int``.

    Raises:
        ValueError: If *year* has no integer interpretation.
    """
    return coerce_int(year)


def make_filename(year: Any) -> str:
    """
    Build the name of the FARS accident file for *year*.

    Args:
        year: The year, as anything ``coerce_year`` accepts.

    Returns:
        File name, e.g. ``make_filename(2013) == "accident_2013.csv.bz2"``.
    """
    return _FILENAME_TEMPLATE.format(year=coerce_year(year))


def fars_read(filename: Union[str, os.PathLike]) -> pd.DataFrame:
    """
    Read a FARS accident file into a DataFrame.

    All columns of the file are kept.  ``low_memory=False`` makes pandas
    infer each column's dtype from the whole file, which keeps mixed-type
    DtypeWarnings out of the caller's output.

    Args:
        filename: Path to a plain or compressed CSV file.

    Returns:
        DataFrame with one row per accident.

    Raises:
        FileNotFoundError: If *filename* does not exist.
        pandas.errors.ParserError: If the file is not valid CSV.
        pandas.errors.EmptyDataError: If the file holds no columns.
    """
    path = Path(filename)
    if not path.exists():
        raise FileNotFoundError(
            errno.ENOENT, f"file '{path}' does not exist", str(path)
        )

    logger.debug("Reading FARS file", extra={"path": str(path)})
    return pd.read_csv(path, compression="infer", low_memory=False)
