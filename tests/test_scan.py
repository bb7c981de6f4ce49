from __future__ import annotations

from pathlib import Path

import pandas as pd

from fieldobs_clean.config import load_config
from fieldobs_clean.data.scan import scan_dataset, scan_raw_lines

from conftest import SCENARIO_A


def test_scan_flags_malformed_lines_without_raising():
    report = scan_raw_lines([SCENARIO_A, "no marker here", "a - b - c"])
    assert report["marker_count"].tolist() == [1, 0, 2]
    assert report["well_formed"].tolist() == [True, False, False]
    assert report.at[0, "token_count"] == 11


def test_scan_dataset_writes_tables(workspace, raw_lines):
    config = workspace(raw_lines)
    report = scan_dataset(config)
    out_tabs = Path(load_config(config)["paths"]["outputs"]) / "tables"
    saved = pd.read_csv(out_tabs / "line_report.csv")
    assert len(saved) == len(raw_lines) == len(report)
    summary = pd.read_csv(out_tabs / "token_count_summary.csv")
    assert summary["lines"].sum() == len(raw_lines)
