"""
02_preprocess.py
~~~~~~~~~~~~~~~~
Cleaning stage: parse the ragged observation lines into the fixed 11-column
table, inject the configured year into both date columns and write the result
to ``data/processed``. The raw file is only read.

If any line is malformed or any date fails to parse, the stage exits with a
non-zero status and no cleaned file is written.
"""

import argparse
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fieldobs_clean.config import DEFAULT_CONFIG_PATH
from fieldobs_clean.data import run_preprocess
from fieldobs_clean.errors import CleaningError


def main():
    ap = argparse.ArgumentParser(
        description="Stage 02 – parse raw observation lines into a cleaned CSV table."
    )
    ap.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    args = ap.parse_args()
    try:
        _, out_path = run_preprocess(Path(args.config))
    except CleaningError as exc:
        print(f"✗ Cleaning aborted, nothing written: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Preprocessing complete. File saved at: {out_path}")


if __name__ == "__main__":
    main()
