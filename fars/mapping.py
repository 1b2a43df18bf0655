"""
State accident map
==================

`fars_map_state` draws one dot per accident of a state/year on top of the
US state outlines.

Key ideas:
- An unknown STATE number is an error (`InvalidStateError`); a known state
  with nothing to draw only logs "no accidents to plot".
- FARS encodes unknown coordinates with sentinels (LONGITUD > 900,
  LATITUDE > 90). Those become NaN before anything is plotted, so they never
  show up as points or stretch the axes.
- Plotting libraries are imported lazily, the loaders work without them.
"""

from __future__ import annotations
from typing import Optional
import logging

import numpy as np
import pandas as pd

from .errors import InvalidStateError
from .loader import fars_read, to_int, year_path
from .models import LATITUDE, LONGITUD, STATE, MapOptions, ReadOptions

logger = logging.getLogger(__name__)


def load_state_boundaries(map_options: Optional[MapOptions] = None):
    """Return a GeoDataFrame with one polygon per US state.

    The county layer named by `map_options.boundaries_dataset` is fetched with
    geodatasets (cached locally after the first download) and dissolved on
    `map_options.boundaries_key`.
    """
    try:
        import geodatasets
        import geopandas as gpd
    except ImportError as e:
        raise ImportError(
            "Missing dependency: geopandas (and geodatasets).\n"
            "Install with: python -m pip install geopandas geodatasets"
        ) from e

    opts = map_options or MapOptions()
    counties = gpd.read_file(geodatasets.get_path(opts.boundaries_dataset))
    return counties[[opts.boundaries_key, "geometry"]].dissolve(by=opts.boundaries_key)


def rows_for_state(data: pd.DataFrame, state_num: int) -> pd.DataFrame:
    """Rows of `data` whose STATE equals `state_num`."""
    return data[data[STATE] == state_num]


def mask_sentinels(df: pd.DataFrame, map_options: Optional[MapOptions] = None) -> pd.DataFrame:
    """Return a copy with sentinel coordinates replaced by NaN."""
    opts = map_options or MapOptions()
    out = df.copy()
    out[LONGITUD] = out[LONGITUD].astype(float)
    out[LATITUDE] = out[LATITUDE].astype(float)
    out.loc[out[LONGITUD] > opts.longitude_sentinel, LONGITUD] = np.nan
    out.loc[out[LATITUDE] > opts.latitude_sentinel, LATITUDE] = np.nan
    return out


def fars_map_state(state_num, year, data_dir: Optional[str] = None,
                   options: Optional[ReadOptions] = None, boundaries=None,
                   ax=None, map_options: Optional[MapOptions] = None):
    """Plot accident locations for one state and year.

    Returns the matplotlib Axes, or None when there is nothing to plot.

    Raises:
        FileNotFoundError: the year's file is missing.
        InvalidStateError: `state_num` is not in the year's STATE column.
    """
    opts = map_options or MapOptions()
    data = fars_read(year_path(year, data_dir), options)
    state_num = to_int(state_num)

    if state_num not in set(data[STATE].unique()):
        raise InvalidStateError(state_num)
    sub = rows_for_state(data, state_num)
    # state was validated above, so this only fires if the filter disagrees
    if len(sub) == 0:
        logger.info("no accidents to plot")
        return None

    sub = mask_sentinels(sub, opts)
    pts = sub.dropna(subset=[LONGITUD, LATITUDE])

    import matplotlib.pyplot as plt
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6))
    if boundaries is None:
        boundaries = load_state_boundaries(opts)

    boundaries.boundary.plot(ax=ax, color=opts.edge_color, linewidth=0.5)
    ax.scatter(pts[LONGITUD], pts[LATITUDE], s=opts.point_size,
               marker=opts.marker, c=opts.point_color)

    # Ranges use each column's own non-missing values
    lon = sub[LONGITUD].dropna()
    lat = sub[LATITUDE].dropna()
    if len(lon):
        ax.set_xlim(lon.min(), lon.max())
    if len(lat):
        ax.set_ylim(lat.min(), lat.max())

    ax.set_title(opts.title or f"FARS accidents, state {state_num}, {to_int(year)}")
    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    return ax
