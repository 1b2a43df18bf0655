"""
fars package
============

Helpers for the yearly FARS (Fatality Analysis Reporting System) accident
files, `accident_<YEAR>.csv.bz2`.

- Loading and filename helpers are in `fars/loader.py`.
- The month x year summary is in `fars/summary.py`.
- The state map is in `fars/mapping.py`.
"""

import logging

from .errors import InvalidStateError
from .loader import fars_read, fars_read_years, make_filename
from .mapping import fars_map_state, load_state_boundaries
from .models import MapOptions, ReadOptions, YearResult
from .summary import fars_summarize_years

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "InvalidStateError",
    "MapOptions",
    "ReadOptions",
    "YearResult",
    "fars_map_state",
    "fars_read",
    "fars_read_years",
    "fars_summarize_years",
    "load_state_boundaries",
    "make_filename",
]
