"""
FARS State Map Generator (Imperative Shell)

Thin orchestration layer: reads one year's file, validates the state,
filters and cleans the rows, calls the pure plotting function and
optionally writes the figure to HTML.

Package Location: src/fars/reports/generators.py

Usage::

    from fars import fars_map_state

    fig = fars_map_state(1, 2014, output_path="alabama_2014.html")
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.coordinates import clean_coordinates, coordinate_bounds, valid_locations
from ..config import get_data_dir
from ..data.reader import coerce_int, coerce_year, fars_read, make_filename
from ..errors import InvalidStateError
from ..plotting.state_map import plot_state_map

logger = logging.getLogger(__name__)


def _coerce_state(state: Any) -> int:
    try:
        return coerce_int(state)
    except ValueError:
        raise InvalidStateError(state)


def select_state(data: pd.DataFrame, state: int) -> pd.DataFrame:
    """
    Return the rows of *data* for *state*.

    Raises:
        InvalidStateError: If *state* never occurs in ``data["STATE"]``.
    """
    known = pd.to_numeric(data["STATE"], errors="coerce")
    if state not in set(known.dropna().astype(int)):
        raise InvalidStateError(state)
    return data.loc[known == state]


def fars_map_state(
    state: Any,
    year: Any,
    data_dir: Union[str, os.PathLike, None] = None,
    output_path: Union[str, os.PathLike, None] = None,
) -> Optional[go.Figure]:
    """
    Map the accident locations of one state in one year.

    Args:
        state: FARS state code (coerced to ``int``).
        year: Data year (coerced to ``int``).
        data_dir: Directory holding the yearly files.
        output_path: When given, the figure is also written there as a
            standalone HTML file (parent directories are created).

    Returns:
        The figure, or ``None`` when there is nothing to plot (no rows for
        the state, or no row with a known location).  Both cases are
        logged as warnings, not raised.

    Raises:
        FileNotFoundError: If the year's file does not exist.
        InvalidStateError: If *state* does not occur in that year's data.
    """
    year_int = coerce_year(year)
    data = fars_read(get_data_dir(data_dir) / make_filename(year_int))

    state_int = _coerce_state(state)
    subset = select_state(data, state_int)
    context = {"state": state_int, "year": year_int}

    if subset.empty:
        logger.warning("no accidents to plot", extra=context)
        return None

    cleaned = clean_coordinates(subset)
    bounds = coordinate_bounds(cleaned)
    if bounds is None or valid_locations(cleaned).empty:
        logger.warning("no accident locations known, nothing to plot", extra=context)
        return None

    fig = plot_state_map(cleaned, state_int, year_int, bounds)

    if output_path is not None:
        out = Path(output_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(out))
        logger.info(f"State map written to {out}", extra={**context, "path": str(out)})

    return fig
