from __future__ import annotations

import os
from typing import Sequence, Tuple

import pandas as pd

from ..config import ParseSettings, load_config
from ..utils.io import read_lines, resolve_paths, write_table
from .dates import fix_dates
from .records import parse_lines
from .table import build_table


def clean_lines(lines: Sequence[str], settings: ParseSettings) -> pd.DataFrame:
    records = parse_lines(lines, settings)
    table = build_table(records, settings.columns)
    return fix_dates(
        table,
        columns=settings.date_columns,
        implied_year_suffix=settings.implied_year_suffix,
        date_format=settings.date_format,
        on_error=settings.on_date_error,
    )


def run_preprocess(config_path: str | os.PathLike | None = None) -> Tuple[pd.DataFrame, str]:
    cfg = load_config(config_path)
    settings = ParseSettings.from_config(cfg)
    paths = resolve_paths(cfg)
    data_cfg = cfg["data"]

    src = paths["raw"] / data_cfg["observations_file"]
    lines = read_lines(src)
    print(f"Read {len(lines)} raw record(s) from {src}")

    # Any parse failure raises here, before the output path is touched.
    df = clean_lines(lines, settings)

    out_path = paths["processed"] / data_cfg.get("cleaned_file", "observations_clean.csv")
    write_table(df, out_path, source_paths=[src])
    print(f"Saved cleaned dataset → {out_path}  shape={df.shape}")
    return df, str(out_path)


__all__ = ["clean_lines", "run_preprocess"]
