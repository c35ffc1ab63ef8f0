"""
FARS Month/Year Summary (Functional Core)

Pure functions only. No I/O, no side effects.

Package Location: src/fars/analysis/summary.py
"""

from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd


def empty_summary() -> pd.DataFrame:
    """Return a summary table with no rows and no year columns."""
    return pd.DataFrame({"MONTH": pd.Series([], dtype="int64")})


def summarize_months(tables: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Pivot per-year ``MONTH`` / ``year`` tables into a month x year count table.

    ``None`` entries (years that failed to load) are skipped.  The remaining
    tables are stacked, grouped by ``(year, MONTH)`` and counted; each
    distinct year then becomes a column.

    Args:
        tables: Per-year DataFrames with columns ``MONTH`` and ``year``.

    Returns:
        DataFrame with a ``MONTH`` column (ascending, one row per month seen
        in any year) followed by one ``int`` count column per year
        (ascending).  A month missing from a loaded year counts as 0.
        With no usable tables, ``empty_summary()``.
    """
    frames = [table for table in tables if table is not None]
    if not frames:
        return empty_summary()

    combined = pd.concat(frames, ignore_index=True)
    counts = combined.groupby(["year", "MONTH"]).size()

    summary = counts.unstack("year", fill_value=0).sort_index().sort_index(axis=1)
    summary.columns.name = None
    return summary.reset_index()
