"""
Data model and options
======================

FARS tables stay plain pandas DataFrames; this module only holds the small
typed values that travel around them:

- `ReadOptions`: every knob passed to `pandas.read_csv`, so parsing never
  depends on ambient defaults.
- `MapOptions`: sentinels and drawing settings for the state map.
- `YearResult`: the outcome of loading one year (data or error, never both).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import pandas as pd

# Column names used by the helpers (as spelled in the FARS export)
MONTH = "MONTH"
STATE = "STATE"
LATITUDE = "LATITUDE"
LONGITUD = "LONGITUD"
# Injected by fars_read_years, not read from the file
YEAR = "year"


@dataclass(frozen=True)
class ReadOptions:
    """Parsing configuration for one accident file."""
    sep: str = ","
    encoding: str = "utf-8"
    # "infer" picks bz2 from the .bz2 suffix
    compression: Optional[str] = "infer"
    header: int = 0
    na_values: Optional[Tuple[str, ...]] = None
    low_memory: bool = False

    def read_csv_kwargs(self) -> Dict[str, Any]:
        kw: Dict[str, Any] = dict(
            sep=self.sep,
            encoding=self.encoding,
            compression=self.compression,
            header=self.header,
            low_memory=self.low_memory,
        )
        if self.na_values is not None:
            kw["na_values"] = list(self.na_values)
        return kw


@dataclass(frozen=True)
class MapOptions:
    """Knobs for `fars_map_state`.

    The two sentinels are the FARS "unknown coordinate" markers: any
    longitude above 900 or latitude above 90 is treated as missing.
    """
    longitude_sentinel: float = 900.0
    latitude_sentinel: float = 90.0

    # geodatasets name + column to dissolve counties into states
    boundaries_dataset: str = "geoda.natregimes"
    boundaries_key: str = "STATE_NAME"

    marker: str = ","
    point_size: float = 1.0
    point_color: str = "black"
    edge_color: str = "gray"
    title: Optional[str] = None


@dataclass(frozen=True)
class YearResult:
    """Result of loading one year's file.

    `data` holds the MONTH/year subset on success; on failure it is None and
    `error` says what went wrong.
    """
    year: Any
    data: Optional[pd.DataFrame] = field(default=None, compare=False)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.data is not None
