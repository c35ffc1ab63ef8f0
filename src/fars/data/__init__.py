"""
FARS Data Package (Imperative Shell)

All file access for the toolkit lives here.

Modules:
- reader:  File naming and single-file reads
- loader:  Multi-year loading with per-year failure isolation
- summary: Month x year accident count orchestration
"""

from .reader import coerce_int, coerce_year, make_filename, fars_read
from .loader import YearResult, load_years, fars_read_years
from .summary import fars_summarize_years

__all__ = [
    # Reader
    'coerce_int',
    'coerce_year',
    'make_filename',
    'fars_read',
    # Loader
    'YearResult',
    'load_years',
    'fars_read_years',
    # Summary
    'fars_summarize_years',
]
