"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: accident DataFrame already filtered to one state and cleaned with
``fars.analysis.coordinates.clean_coordinates``.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Map extent:
    The geo subplot is clipped to the bounding box of the known accident
    locations plus a small pad, so the state fills the frame.  Country,
    state and coastline borders form the base map; each accident with a
    known location is drawn as one small dot.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.coordinates import Bounds, coordinate_bounds, valid_locations
from ..analysis.states import state_label

# ---------------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------------

# Degrees added around the bounding box on each side
_PAD_DEG = 0.5

_POINT_COLOR = "black"
_POINT_SIZE  = 3

_BORDER_COLOR = "gray"
_LAND_COLOR   = "white"

_FIG_WIDTH  = 800
_FIG_HEIGHT = 700


def _padded(range_: tuple[float, float], pad: float) -> list[float]:
    low, high = range_
    return [low - pad, high + pad]


def plot_state_map(
    df: pd.DataFrame,
    state: int,
    year: int,
    bounds: Optional[Bounds] = None,
) -> go.Figure:
    """Build a map of accident locations for one state and year.

    Args:
        df: Cleaned accident rows for *state* (columns ``LATITUDE``,
            ``LONGITUD``; unknown coordinates as NaN).
        state: FARS state code, used in the title.
        year: Data year, used in the title.
        bounds: ``((lat_min, lat_max), (lon_min, lon_max))``.  Computed from
            *df* when omitted.

    Returns:
        Figure with a single ``Scattergeo`` trace.

    Raises:
        ValueError: If *bounds* is not given and *df* has no known latitude
            or no known longitude.
    """
    located = valid_locations(df)
    if bounds is None:
        bounds = coordinate_bounds(df)
        if bounds is None:
            raise ValueError("no known accident locations to plot")
    lat_range, lon_range = bounds

    fig = go.Figure(
        go.Scattergeo(
            lat=located["LATITUDE"],
            lon=located["LONGITUD"],
            mode="markers",
            marker=dict(size=_POINT_SIZE, color=_POINT_COLOR),
            name="Accident",
            hovertemplate="Lat: %{lat:.4f}<br>Lon: %{lon:.4f}<extra></extra>",
        )
    )

    fig.update_geos(
        projection_type="mercator",
        resolution=50,
        showcountries=True,
        countrycolor=_BORDER_COLOR,
        showsubunits=True,
        subunitcolor=_BORDER_COLOR,
        showcoastlines=True,
        coastlinecolor=_BORDER_COLOR,
        showland=True,
        landcolor=_LAND_COLOR,
        lataxis_range=_padded(lat_range, _PAD_DEG),
        lonaxis_range=_padded(lon_range, _PAD_DEG),
    )

    fig.update_layout(
        title=dict(
            text=f"Fatal Accidents - {state_label(state)}, {year} "
                 f"({len(located)} located)",
            x=0.5,
        ),
        width=_FIG_WIDTH,
        height=_FIG_HEIGHT,
        showlegend=False,
        margin=dict(l=10, r=10, t=60, b=10),
    )
    return fig
