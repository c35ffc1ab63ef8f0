"""
FARS Reports Package (Imperative Shell)

Orchestrates data reading, validation and plot generation.  No analysis
logic lives here – this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: fars_map_state() for mapping one state's accidents.
"""

from .generators import (
    fars_map_state,
    select_state,
)

__all__ = [
    'fars_map_state',
    'select_state',
]
