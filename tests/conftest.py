import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest

ACCIDENTS_2013 = pd.DataFrame({
    "ST_CASE": [10001, 10002, 10003, 10004, 40001, 60001],
    "STATE": [1, 1, 1, 1, 4, 6],
    "MONTH": [1, 1, 2, 3, 2, 2],
    "LATITUDE": [32.5, 33.0, 99.9999, 31.0, 34.0, 36.0],
    "LONGITUD": [-86.5, -87.0, -86.0, 999.9999, -112.0, -119.0],
    "FATALS": [1, 2, 1, 1, 3, 1],
})

ACCIDENTS_2014 = pd.DataFrame({
    "ST_CASE": [10001, 10002, 40001],
    "STATE": [1, 1, 4],
    "MONTH": [1, 5, 5],
    "LATITUDE": [32.1, 32.2, 33.3],
    "LONGITUD": [-86.1, -86.2, -111.1],
    "FATALS": [1, 1, 2],
})


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding accident_2013.csv.bz2 and accident_2014.csv.bz2."""
    ACCIDENTS_2013.to_csv(tmp_path / "accident_2013.csv.bz2", index=False)
    ACCIDENTS_2014.to_csv(tmp_path / "accident_2014.csv.bz2", index=False)
    return str(tmp_path)


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")
