"""
Monthly summary across years
============================

`fars_summarize_years` stacks the MONTH/year subsets of every year that
loaded, counts rows per (year, MONTH) and spreads years into columns:

    MONTH  2013  2014
        1   2230  2168
        2   1952  1893
        ...

Cells with no accidents stay missing (<NA>), they are not filled with 0.
"""

from __future__ import annotations
from typing import Iterable, Optional

import pandas as pd

from .loader import fars_read_years
from .models import MONTH, YEAR, ReadOptions


def fars_summarize_years(years: Iterable, data_dir: Optional[str] = None,
                         options: Optional[ReadOptions] = None) -> pd.DataFrame:
    """Return accident counts per month (rows) and year (columns)."""
    frames = [r.data for r in fars_read_years(years, data_dir, options) if r.ok]
    if not frames:
        return pd.DataFrame(columns=[MONTH])

    dat = pd.concat(frames, ignore_index=True)
    # rows with a blank MONTH keep their own group so column sums match row counts
    counts = dat.groupby([YEAR, MONTH], dropna=False).size()
    wide = counts.unstack(YEAR).sort_index().astype("Int64")
    wide = wide.reindex(columns=sorted(wide.columns))
    wide.columns.name = None
    return wide.reset_index()
