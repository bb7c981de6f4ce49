from __future__ import annotations

import os
from typing import Dict, Mapping, Sequence, Tuple

import pandas as pd

from ..config import load_config
from ..errors import ParseConfigError
from ..utils.io import resolve_paths, write_table

_ROW_KEY = "_row_order"
_COL_KEY = "_col_order"


def wide_table_from_mapping(
    mapping: Mapping[str, Mapping[str, object]], id_column: str
) -> pd.DataFrame:
    """Build a wide frame from ``{row_label: {column: value}}``."""
    df = pd.DataFrame.from_dict({k: dict(v) for k, v in mapping.items()}, orient="index")
    df.index.name = id_column
    return df.reset_index()


def melt_wide_table(
    df: pd.DataFrame,
    id_columns: Sequence[str],
    value_columns: Sequence[str] | None = None,
    var_name: str = "variable",
    value_name: str = "value",
) -> pd.DataFrame:
    ids = list(id_columns)
    missing = [c for c in ids if c not in df.columns]
    if missing:
        raise ParseConfigError(f"Id columns not found in table: {missing}")
    values = list(value_columns) if value_columns is not None else [c for c in df.columns if c not in ids]
    absent = [c for c in values if c not in df.columns]
    if absent:
        raise ParseConfigError(f"Value columns not found in table: {absent}")

    work = df.reset_index(drop=True).assign(**{_ROW_KEY: range(len(df))})
    long = pd.melt(
        work,
        id_vars=ids + [_ROW_KEY],
        value_vars=values,
        var_name=var_name,
        value_name=value_name,
    )
    # pd.melt is column-major; keep one block of rows per source row instead.
    long[_COL_KEY] = long[var_name].map({c: i for i, c in enumerate(values)})
    long = long.sort_values([_ROW_KEY, _COL_KEY], kind="mergesort")
    return long.drop(columns=[_ROW_KEY, _COL_KEY]).reset_index(drop=True)


def read_wide_table(path: str | os.PathLike) -> pd.DataFrame:
    df = pd.read_csv(path)
    df.columns = [str(c).strip() for c in df.columns]
    return df


def run_reshape(config_path: str | os.PathLike | None = None) -> Tuple[pd.DataFrame, str]:
    cfg = load_config(config_path)
    paths = resolve_paths(cfg)
    data_cfg = cfg["data"]
    reshape_cfg: Dict = cfg.get("reshape") or {}

    src = paths["raw"] / data_cfg["summary_file"]
    wide = read_wide_table(src)
    id_columns = reshape_cfg.get("id_columns") or [wide.columns[0]]
    long = melt_wide_table(
        wide,
        id_columns=id_columns,
        value_columns=reshape_cfg.get("value_columns"),
        var_name=reshape_cfg.get("var_name", "variable"),
        value_name=reshape_cfg.get("value_name", "value"),
    )
    out_path = paths["processed"] / data_cfg.get("summary_long_file", "summary_long.csv")
    write_table(long, out_path, source_paths=[src])
    print(f"Saved long-form summary → {out_path}  shape={long.shape}")
    return long, str(out_path)


__all__ = ["wide_table_from_mapping", "melt_wide_table", "read_wide_table", "run_reshape"]
