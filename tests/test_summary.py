import logging

import pandas as pd

from fars import fars_summarize_years

from .conftest import ACCIDENTS_2013, ACCIDENTS_2014


def test_summary_counts_by_month_and_year(data_dir):
    out = fars_summarize_years([2013, 2014], data_dir=data_dir)

    assert list(out.columns) == ["MONTH", 2013, 2014]
    assert out["MONTH"].tolist() == [1, 2, 3, 5]
    assert out[2013].tolist() == [2, 3, 1, pd.NA]
    assert out[2014].tolist() == [1, pd.NA, pd.NA, 2]


def test_summary_column_sums_match_row_counts(data_dir):
    out = fars_summarize_years([2013, 2014], data_dir=data_dir)
    assert out[2013].sum() == len(ACCIDENTS_2013)
    assert out[2014].sum() == len(ACCIDENTS_2014)


def test_summary_ignores_input_order(data_dir):
    a = fars_summarize_years([2013, 2014], data_dir=data_dir)
    b = fars_summarize_years([2014, 2013], data_dir=data_dir)
    pd.testing.assert_frame_equal(a, b[a.columns])


def test_summary_drops_failed_years(data_dir, caplog):
    with caplog.at_level(logging.WARNING, logger="fars.loader"):
        out = fars_summarize_years([2013, 1900], data_dir=data_dir)
    assert list(out.columns) == ["MONTH", 2013]
    assert "invalid year: 1900" in caplog.text


def test_summary_all_years_fail(tmp_path):
    out = fars_summarize_years([1900, 1901], data_dir=str(tmp_path))
    assert out.empty
    assert list(out.columns) == ["MONTH"]


def test_summary_duplicate_years_are_summed(data_dir):
    out = fars_summarize_years([2014, 2014], data_dir=data_dir)
    assert list(out.columns) == ["MONTH", 2014]
    assert out[2014].tolist() == [2, 4]


def test_summary_keeps_blank_month_rows(tmp_path):
    pd.DataFrame({"STATE": [1, 1, 1, 1], "MONTH": [1, 1, None, 2]}).to_csv(
        tmp_path / "accident_2015.csv.bz2", index=False)
    out = fars_summarize_years([2015], data_dir=str(tmp_path))

    assert out[2015].sum() == 4
    assert out["MONTH"].isna().sum() == 1
    assert out.loc[out["MONTH"].isna(), 2015].tolist() == [1]
    assert out.loc[out["MONTH"].notna(), 2015].tolist() == [2, 1]
