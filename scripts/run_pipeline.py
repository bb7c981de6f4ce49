#!/usr/bin/env python3
"""
run_pipeline.py
~~~~~~~~~~~~~~~
Convenience orchestrator that executes the staged cleaning workflow:

01_scan        → per-line QA report of the raw observations
02_preprocess  → parsed, padded, date-typed observation table
03_reshape     → long-form injury summary

Each stage runs as its own process and the chain stops at the first failure,
so a malformed raw file never produces a cleaned artifact.
"""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path
from typing import Iterable, Sequence

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fieldobs_clean.config import load_config
from fieldobs_clean.utils.io import resolve_paths


def _run(step: Sequence[str]) -> None:
    print(f"\nRunning: {' '.join(step)}")
    subprocess.run(step, check=True)


def _ensure_dataset(config_path: str) -> Path:
    cfg = load_config(config_path)
    raw_dir = resolve_paths(cfg)["raw"]
    for key in ("observations_file", "summary_file"):
        dataset = raw_dir / cfg["data"][key]
        if not dataset.exists():
            raise FileNotFoundError(
                f"Expected raw input at '{dataset}'. Place the file under {raw_dir}/ and rerun."
            )
    return raw_dir


def build_steps(config_path: str, skip_scan: bool = False) -> Iterable[list[str]]:
    exe = [sys.executable]
    steps = []
    if not skip_scan:
        steps.append(exe + ["scripts/01_scan.py", "--config", config_path])
    steps += [
        exe + ["scripts/02_preprocess.py", "--config", config_path],
        exe + ["scripts/03_reshape.py", "--config", config_path],
    ]
    return steps


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the full observation cleaning pipeline.")
    parser.add_argument("--config", default="config.yaml", help="Path to config file.")
    parser.add_argument("--skip-scan", action="store_true", help="Skip the raw-input QA stage.")
    args = parser.parse_args()

    _ensure_dataset(args.config)
    for step in build_steps(args.config, skip_scan=args.skip_scan):
        _run(step)

    print("\nPipeline complete. See data/processed/ and outputs/ for artefacts.")


if __name__ == "__main__":
    main()
