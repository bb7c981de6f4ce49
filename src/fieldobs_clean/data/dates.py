from __future__ import annotations

from typing import List, Sequence, Tuple

import pandas as pd

from ..errors import DateParseError
from ..logging_utils import get_logger

log = get_logger(__name__)


def _parse_column(
    values: pd.Series, implied_year_suffix: str, date_format: str
) -> Tuple[pd.Series, List[int]]:
    present = values.notna()
    candidates = values[present].astype(str) + implied_year_suffix
    parsed = pd.to_datetime(candidates, format=date_format, errors="coerce")
    failed = [int(i) for i in parsed.index[parsed.isna()]]
    result = pd.Series(pd.NaT, index=values.index, dtype="datetime64[ns]")
    result.loc[parsed.index] = parsed
    return result, failed


def fix_dates(
    table: pd.DataFrame,
    columns: Sequence[str],
    implied_year_suffix: str,
    date_format: str,
    on_error: str = "raise",
) -> pd.DataFrame:
    """
    Append the dataset-wide year suffix to each date string and parse it.

    The frame is converted in place and returned. Padded (missing) values stay
    missing. Values that do not match ``date_format`` either abort the run
    (``on_error="raise"``, the default) or are logged one by one and stored as
    ``NaT`` (``on_error="warn"``). Nothing is coerced silently.
    """
    if on_error not in ("raise", "warn"):
        raise ValueError(f"on_error must be 'raise' or 'warn', got '{on_error}'.")
    absent = [c for c in columns if c not in table.columns]
    if absent:
        raise KeyError(f"Date columns not found in table: {absent}")

    converted = {}
    failures: List[Tuple[int, str, str]] = []
    for col in columns:
        parsed, failed = _parse_column(table[col], implied_year_suffix, date_format)
        converted[col] = parsed
        failures.extend((row, col, str(table.at[row, col])) for row in failed)

    if failures and on_error == "raise":
        raise DateParseError(failures, date_format)
    for row, col, value in failures:
        log.warning(
            "Row %d column %s: %r does not match %s after appending %r; stored as NaT",
            row,
            col,
            value,
            date_format,
            implied_year_suffix,
        )

    for col, parsed in converted.items():
        table[col] = parsed
    return table


__all__ = ["fix_dates"]
