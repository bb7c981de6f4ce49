"""
01_scan.py
~~~~~~~~~~
First stage of the cleaning workflow: inspect the raw observation file without
modifying it. Writes ``outputs/tables/line_report.csv`` (marker and token
counts per line) and ``token_count_summary.csv`` so malformed lines and short
records are visible before the cleaning stage runs.

This stage never fails on malformed lines; it exists to find them.
"""

import argparse
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fieldobs_clean.config import DEFAULT_CONFIG_PATH
from fieldobs_clean.data import scan_dataset


def main():
    ap = argparse.ArgumentParser(
        description="Stage 01 – scan the raw observation lines and report malformed records."
    )
    ap.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    args = ap.parse_args()
    scan_dataset(Path(args.config))


if __name__ == "__main__":
    main()
