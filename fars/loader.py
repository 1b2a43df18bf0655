"""
Accident file loader (bz2 CSV -> DataFrame)
===========================================

This module reads the yearly FARS accident exports.

Key ideas:
- Files follow the naming convention `accident_<YEAR>.csv.bz2`.
- `fars_read` keeps every column of the file; callers pick what they need.
- `fars_read_years` never raises: a bad year becomes a failed `YearResult`
  plus a warning, so one missing file does not spoil a multi-year request.
"""

from __future__ import annotations
from typing import Iterable, List, Optional
import logging
import os

import pandas as pd

from .models import MONTH, YEAR, ReadOptions, YearResult

logger = logging.getLogger(__name__)

FILENAME_TEMPLATE = "accident_%d.csv.bz2"


def to_int(x) -> int:
    """Convert a year/state value to int, truncating toward zero."""
    if isinstance(x, int):
        return x
    return int(float(x))


def fars_read(filename: str, options: Optional[ReadOptions] = None) -> pd.DataFrame:
    """Read one accident file into a DataFrame.

    Raises:
        FileNotFoundError: if `filename` does not exist.
    """
    if not os.path.exists(filename):
        raise FileNotFoundError(f"file '{filename}' does not exist")
    opts = options or ReadOptions()
    logger.debug("Reading CSV: %s", filename)
    df = pd.read_csv(filename, **opts.read_csv_kwargs())
    logger.debug("Loaded %d rows x %d columns", len(df), len(df.columns))
    return df


def make_filename(year) -> str:
    """Return the accident file name for `year`, e.g. accident_2013.csv.bz2."""
    return FILENAME_TEMPLATE % to_int(year)


def year_path(year, data_dir: Optional[str] = None) -> str:
    """Path of the year's file, inside `data_dir` when one is given."""
    name = make_filename(year)
    return os.path.join(data_dir, name) if data_dir else name


def fars_read_years(years: Iterable, data_dir: Optional[str] = None,
                    options: Optional[ReadOptions] = None) -> List[YearResult]:
    """Load MONTH plus a constant `year` column for each requested year.

    Results are returned in input order, duplicates included.
    """
    out: List[YearResult] = []
    for year in years:
        try:
            y = to_int(year)
            dat = fars_read(year_path(y, data_dir), options)
            sub = dat.assign(year=y)[[MONTH, YEAR]]
        except Exception as e:
            logger.warning("invalid year: %s", year)
            out.append(YearResult(year=year, error=str(e)))
            continue
        out.append(YearResult(year=y, data=sub))
    return out
