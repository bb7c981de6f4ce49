"""Cleaning pipeline exception hierarchy.

Every fatal condition aborts the batch before any cleaned artifact is
written. Each error carries enough context (line index, raw content,
offending values) for an operator to fix the source file or the config.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple


class CleaningError(Exception):
    """Base exception for all cleaning pipeline failures."""


class ParseConfigError(CleaningError, ValueError):
    """Raised for invalid or incomplete parsing configuration."""


class MalformedMarkerCountError(CleaningError, ValueError):
    """Raised when a line does not hold exactly one date-range marker."""

    def __init__(self, line_index: int, line: str, count: int, marker: str) -> None:
        self.line_index = line_index
        self.line = line
        self.count = count
        self.marker = marker
        super().__init__(
            f"Line {line_index}: expected exactly 1 occurrence of marker {marker!r} "
            f"bounding the date range, found {count}. Raw line: {line!r}"
        )


class SegmentationError(CleaningError, ValueError):
    """Raised when the fixed-width date window cannot be cut from a line."""

    def __init__(self, line_index: int, line: str, reason: str) -> None:
        self.line_index = line_index
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_index}: {reason}. Raw line: {line!r}")


class ColumnCountMismatchError(CleaningError, ValueError):
    """Raised when column names do not match the widest parsed record."""

    def __init__(self, expected: int, actual: int, message: str | None = None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            message
            or f"Longest record has {expected} fields but {actual} column names were "
            "supplied. Check parsing.columns in the config."
        )


class DateParseError(CleaningError, ValueError):
    """Raised when date strings do not match the configured pattern."""

    def __init__(self, failures: Sequence[Tuple[int, str, str]], date_format: str) -> None:
        self.failures: List[Tuple[int, str, str]] = list(failures)
        self.date_format = date_format
        preview = ", ".join(f"row {row} {col}={val!r}" for row, col, val in self.failures[:5])
        more = "" if len(self.failures) <= 5 else f" (+{len(self.failures) - 5} more)"
        super().__init__(
            f"{len(self.failures)} date value(s) do not match format {date_format!r}: "
            f"{preview}{more}"
        )


class OutputPathError(CleaningError):
    """Raised when a write would touch one of the raw input files."""


__all__ = [
    "CleaningError",
    "ParseConfigError",
    "MalformedMarkerCountError",
    "SegmentationError",
    "ColumnCountMismatchError",
    "DateParseError",
    "OutputPathError",
]
