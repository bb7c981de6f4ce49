from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

import pandas as pd

from ..errors import OutputPathError

ISO_DATE_FORMAT = "%Y-%m-%d"


def ensure_dirs(*dirs: Path) -> None:
    for d in dirs:
        d.mkdir(parents=True, exist_ok=True)


def resolve_paths(cfg: Dict[str, Any]) -> Dict[str, Path]:
    paths_cfg = cfg.get("paths") or {}
    return {
        "raw": Path(paths_cfg.get("raw", "data/raw")),
        "processed": Path(paths_cfg.get("processed", "data/processed")),
        "outputs": Path(paths_cfg.get("outputs", "outputs")),
    }


def read_lines(path: str | os.PathLike, encoding: str = "utf-8") -> List[str]:
    """Read one record per line, dropping only the line terminators."""
    with open(path, "r", encoding=encoding) as f:
        text = f.read()
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _guard_sources(out_path: Path, source_paths: Iterable[str | os.PathLike]) -> None:
    target = out_path.resolve()
    for src in source_paths:
        if Path(src).resolve() == target:
            raise OutputPathError(
                f"Refusing to write {out_path}: it is a raw input file. "
                "Cleaned output must go to a separate path."
            )


def write_table(
    df: pd.DataFrame,
    path: str | os.PathLike,
    source_paths: Sequence[str | os.PathLike] = (),
) -> Path:
    out_path = Path(path)
    _guard_sources(out_path, source_paths)
    ensure_dirs(out_path.parent)
    df.to_csv(out_path, index=False, na_rep="", date_format=ISO_DATE_FORMAT)
    return out_path


def read_cleaned_table(
    path: str | os.PathLike,
    date_columns: Sequence[str] = (),
) -> pd.DataFrame:
    df = pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])
    df = df.astype(object).where(df.notna(), pd.NA)
    for col in date_columns:
        df[col] = pd.to_datetime(df[col], format=ISO_DATE_FORMAT)
    return df


def load_processed_dataset(cfg: Dict[str, Any]) -> pd.DataFrame:
    paths = resolve_paths(cfg)
    data_cfg = cfg.get("data") or {}
    cleaned = paths["processed"] / data_cfg.get("cleaned_file", "observations_clean.csv")
    if not cleaned.exists():
        raise FileNotFoundError(f"No cleaned dataset found at {cleaned}")
    date_columns = (cfg.get("dates") or {}).get("columns", [])
    return read_cleaned_table(cleaned, date_columns=date_columns)


__all__ = [
    "ISO_DATE_FORMAT",
    "ensure_dirs",
    "resolve_paths",
    "read_lines",
    "write_table",
    "read_cleaned_table",
    "load_processed_dataset",
]
