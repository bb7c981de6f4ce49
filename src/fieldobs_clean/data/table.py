from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple, Union

import pandas as pd

from ..errors import ColumnCountMismatchError
from ..logging_utils import get_logger

log = get_logger(__name__)

MISSING = pd.NA


@dataclass(frozen=True)
class CompleteRecord:
    fields: Tuple[str, ...]


@dataclass(frozen=True)
class IncompleteRecord:
    """A record whose last ``missing`` fields were never present in the line."""

    fields: Tuple[str, ...]
    missing: int


ParsedRecord = Union[CompleteRecord, IncompleteRecord]


def classify_record(fields: Sequence[str], width: int) -> ParsedRecord:
    if len(fields) > width:
        raise ColumnCountMismatchError(
            expected=width,
            actual=len(fields),
            message=f"Record has {len(fields)} fields but the table is only {width} columns wide.",
        )
    missing = width - len(fields)
    if missing:
        return IncompleteRecord(tuple(fields), missing)
    return CompleteRecord(tuple(fields))


def pad_record(record: ParsedRecord, missing_value: Any = MISSING) -> List[Any]:
    # Missing fields are always trailing; interior gaps are not representable.
    if isinstance(record, IncompleteRecord):
        return list(record.fields) + [missing_value] * record.missing
    return list(record.fields)


def build_table(
    records: Sequence[Sequence[str]],
    column_names: Sequence[str],
    missing_value: Any = MISSING,
) -> pd.DataFrame:
    columns = list(column_names)
    if not records:
        return pd.DataFrame({c: pd.Series([], dtype="object") for c in columns})

    max_len = max(len(r) for r in records)
    if len(columns) != max_len:
        raise ColumnCountMismatchError(expected=max_len, actual=len(columns))

    classified = [classify_record(r, max_len) for r in records]
    padded_rows = [i for i, rec in enumerate(classified) if isinstance(rec, IncompleteRecord)]
    if padded_rows:
        log.info(
            "Padded %d short record(s) with missing trailing fields: rows %s",
            len(padded_rows),
            padded_rows,
        )

    rows = [pad_record(rec, missing_value) for rec in classified]
    return pd.DataFrame(rows, columns=columns, dtype="object")


__all__ = [
    "MISSING",
    "CompleteRecord",
    "IncompleteRecord",
    "ParsedRecord",
    "classify_record",
    "pad_record",
    "build_table",
]
