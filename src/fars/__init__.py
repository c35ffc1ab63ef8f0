"""
FARS - Fatality Analysis Reporting System toolkit

Loads yearly FARS accident files, summarises accident counts by month and
year, and maps accident locations for a single state.

Structure:
- data/     : Imperative Shell (file naming, CSV reads, multi-year loading)
- analysis/ : Functional Core (pure DataFrame transformations)
- plotting/ : (figure builders)
- reports/  : (read -> validate -> plot orchestration)
"""

from .data import (
    YearResult,
    fars_read,
    fars_read_years,
    fars_summarize_years,
    load_years,
    make_filename,
)
from .errors import InvalidStateError
from .reports import fars_map_state
from .utils.logging import setup_logging

__version__ = "0.1.0"

__all__ = [
    'make_filename',
    'fars_read',
    'fars_read_years',
    'load_years',
    'YearResult',
    'fars_summarize_years',
    'fars_map_state',
    'InvalidStateError',
    'setup_logging',
]
