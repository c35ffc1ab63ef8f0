"""
FARS Month/Year Summary (Imperative Shell)

Loads the requested years through ``load_years`` and delegates the
aggregation to the Functional Core (analysis/summary.py).

Package Location: src/fars/data/summary.py
"""

from __future__ import annotations

import logging
import os
from typing import Any, Iterable, Union

import pandas as pd

from ..analysis.summary import summarize_months
from .loader import load_years

logger = logging.getLogger(__name__)


def fars_summarize_years(
    years: Iterable[Any],
    data_dir: Union[str, os.PathLike, None] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years that fail to load are warned about by the loader and contribute
    no column.  When no year loads at all the result is an empty table with
    only the ``MONTH`` column.

    Args:
        years: Years to summarise.
        data_dir: Directory holding the yearly files.

    Returns:
        DataFrame with a ``MONTH`` column and one count column per loaded
        year (column label = the year as ``int``).

    Example::

        >>> fars_summarize_years([2013, 2014, 2015])
           MONTH  2013  2014  2015
        0      1  2230  2168  2368
        ...
    """
    years = list(years)
    results = load_years(years, data_dir)
    loaded = [result.table for result in results if result.ok]

    if not loaded:
        logger.warning(
            f"no data loaded for years: {years}",
            extra={"years": [str(y) for y in years]},
        )

    return summarize_months(loaded)
