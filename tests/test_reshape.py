from __future__ import annotations

import pandas as pd
import pytest

from fieldobs_clean.data.reshape import melt_wide_table, run_reshape, wide_table_from_mapping
from fieldobs_clean.errors import ParseConfigError
from fieldobs_clean.utils.io import read_cleaned_table

INJURIES = {"males": {"injured": 4, "uninjured": 2}, "females": {"injured": 1, "uninjured": 5}}


def test_scenario_d_melt_is_row_major():
    wide = wide_table_from_mapping(INJURIES, "sex")
    long = melt_wide_table(wide, ["sex"], var_name="status", value_name="count")
    assert list(long.columns) == ["sex", "status", "count"]
    assert list(long.itertuples(index=False, name=None)) == [
        ("males", "injured", 4),
        ("males", "uninjured", 2),
        ("females", "injured", 1),
        ("females", "uninjured", 5),
    ]


def test_melt_respects_value_column_subset_and_order():
    wide = wide_table_from_mapping(INJURIES, "sex")
    long = melt_wide_table(wide, ["sex"], value_columns=["uninjured"])
    assert long["variable"].tolist() == ["uninjured", "uninjured"]
    assert long["value"].tolist() == [2, 5]


def test_melt_unknown_id_column():
    with pytest.raises(ParseConfigError):
        melt_wide_table(pd.DataFrame({"a": [1]}), ["sex"])


def test_melt_unknown_value_column():
    wide = wide_table_from_mapping(INJURIES, "sex")
    with pytest.raises(ParseConfigError):
        melt_wide_table(wide, ["sex"], value_columns=["injured", "dead"])


def test_run_reshape_writes_long_csv(workspace):
    config = workspace(["obs1   10/5 - 10/7   A1"])
    long, out_path = run_reshape(config)
    assert len(long) == 4
    back = read_cleaned_table(out_path)
    assert back["status"].tolist() == ["injured", "uninjured", "injured", "uninjured"]
    assert back["count"].tolist() == ["4", "2", "1", "5"]
