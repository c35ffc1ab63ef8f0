"""
FARS Analysis Package (Functional Core)

Pure transformation functions with no I/O.  All functions accept
DataFrames and return transformed data.

Modules:
- summary:     Month x year accident counts
- coordinates: Sentinel cleaning and bounding boxes for accident locations
- states:      FARS state code names
"""

from .summary import (
    empty_summary,
    summarize_months,
)

from .coordinates import (
    LATITUDE_SENTINEL,
    LONGITUDE_SENTINEL,
    clean_coordinates,
    coordinate_bounds,
    valid_locations,
)

from .states import (
    STATE_NAMES,
    state_label,
)

__all__ = [
    # Summary
    'empty_summary',
    'summarize_months',
    # Coordinates
    'LATITUDE_SENTINEL',
    'LONGITUDE_SENTINEL',
    'clean_coordinates',
    'coordinate_bounds',
    'valid_locations',
    # States
    'STATE_NAMES',
    'state_label',
]
