"""
03_reshape.py
~~~~~~~~~~~~~
Reshape the wide injury summary (one row per sex, one column per injury
status) into long (sex, status, count) form.
"""

import argparse
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fieldobs_clean.config import DEFAULT_CONFIG_PATH
from fieldobs_clean.data import run_reshape
from fieldobs_clean.errors import CleaningError


def main():
    ap = argparse.ArgumentParser(description="Stage 03 – melt the wide summary table to long form.")
    ap.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    args = ap.parse_args()
    try:
        _, out_path = run_reshape(Path(args.config))
    except CleaningError as exc:
        print(f"✗ Reshape aborted: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Reshape complete. File saved at: {out_path}")


if __name__ == "__main__":
    main()
