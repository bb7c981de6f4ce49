from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

import pandas as pd

from ..config import DEFAULT_MARKER, load_config
from ..utils.io import ensure_dirs, read_lines, resolve_paths
from .records import locate_markers, tokenize_trailing


def scan_raw_lines(lines: Sequence[str], marker: str = DEFAULT_MARKER) -> pd.DataFrame:
    """One diagnostic row per raw line; never raises on malformed input."""
    rows = []
    for idx, line in enumerate(lines):
        n_markers = len(locate_markers(line, marker))
        rows.append(
            {
                "line": idx,
                "marker_count": n_markers,
                "token_count": len(tokenize_trailing(line.replace(marker, " "))),
                "well_formed": n_markers == 1,
                "raw": line,
            }
        )
    return pd.DataFrame(rows, columns=["line", "marker_count", "token_count", "well_formed", "raw"])


def scan_dataset(config_path: str | os.PathLike | None = None) -> pd.DataFrame:
    cfg = load_config(config_path)
    paths = resolve_paths(cfg)
    marker = (cfg.get("parsing") or {}).get("marker", DEFAULT_MARKER)
    src = paths["raw"] / cfg["data"]["observations_file"]
    lines = read_lines(src)

    out_tabs = Path(paths["outputs"]) / "tables"
    ensure_dirs(out_tabs)

    report = scan_raw_lines(lines, marker)
    print("Lines:", len(report))
    report.to_csv(out_tabs / "line_report.csv", index=False)

    counts = report["token_count"].value_counts().sort_index()
    counts.rename_axis("token_count").rename("lines").to_csv(out_tabs / "token_count_summary.csv")

    bad = report.loc[~report["well_formed"], "line"].tolist()
    if bad:
        print(f"⚠ {len(bad)} line(s) without exactly one {marker!r} marker: {bad}")
    if len(counts) > 1:
        print(f"Token counts vary across lines: {counts.to_dict()} (short rows will be padded)")

    print(f"✓ Scan complete.\nTables → {out_tabs}")
    return report


__all__ = ["scan_raw_lines", "scan_dataset"]
