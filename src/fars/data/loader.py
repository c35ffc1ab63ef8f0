"""
FARS Multi-Year Loader (Imperative Shell)

Reads several years in one batch.  A year whose file is missing or cannot
be parsed is logged as a warning and represented by a failed
``YearResult``; it never aborts the rest of the batch.

Package Location: src/fars/data/loader.py

Only ``MONTH`` and a derived ``year`` column are kept for each year, which
is all the month/year summary needs.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

from ..config import get_data_dir
from .reader import coerce_year, fars_read, make_filename

logger = logging.getLogger(__name__)

YEAR_TABLE_COLUMNS = ["MONTH", "year"]

# Failures that are contained to a single year of the batch.
_RECOVERABLE_ERRORS = (
    OSError,                  # missing file, corrupt compressed stream
    ValueError,               # year coercion; pandas ParserError subclasses it
    KeyError,                 # file without a MONTH column
    pd.errors.EmptyDataError,
)


@dataclass(frozen=True)
class YearResult:
    """
    Outcome of loading one requested year.

    Attributes:
        year: The year exactly as requested by the caller.
        table: ``MONTH`` / ``year`` DataFrame, or ``None`` on failure.
        error: The exception that caused the failure, if any.
    """

    year: Any
    table: Optional[pd.DataFrame] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.table is not None


def _load_year(year: Any, data_dir: Union[str, os.PathLike, None]) -> pd.DataFrame:
    year_int = coerce_year(year)
    path = get_data_dir(data_dir) / make_filename(year_int)
    data = fars_read(path)
    table = data.loc[:, ["MONTH"]].copy()
    table["year"] = year_int
    return table.loc[:, YEAR_TABLE_COLUMNS]


def load_years(
    years: Iterable[Any],
    data_dir: Union[str, os.PathLike, None] = None,
) -> List[YearResult]:
    """
    Load the ``MONTH`` column of each requested year.

    Args:
        years: Years to load, in the order results should be returned.
        data_dir: Directory holding the yearly files.  Defaults to
            ``FARS_DATA_DIR`` or the working directory.

    Returns:
        One ``YearResult`` per requested year, same length and order as
        *years*.
    """
    results: List[YearResult] = []
    for year in years:
        try:
            table = _load_year(year, data_dir)
        except _RECOVERABLE_ERRORS as exc:
            logger.warning(
                f"invalid year: {year}",
                extra={"year": str(year), "error": str(exc)},
            )
            results.append(YearResult(year=year, error=exc))
            continue
        logger.debug(
            f"Loaded {len(table)} accidents for {year}",
            extra={"year": str(year)},
        )
        results.append(YearResult(year=year, table=table))
    return results


def fars_read_years(
    years: Iterable[Any],
    data_dir: Union[str, os.PathLike, None] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Read the ``MONTH`` / ``year`` table for each year, ``None`` where a year failed.

    Convenience view over ``load_years`` for callers that only need the
    tables.
    """
    return [result.table for result in load_years(years, data_dir)]
