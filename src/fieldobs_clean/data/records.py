"""
Parser for the ragged observation record format.

Each raw line looks like::

    obs1   10/5 - 10/7   A1   12.3   N   4.5   1   1   migrant   3

i.e. a free-text observer name, a date range whose two dates sit in a
fixed-width window on either side of a padded marker (``" - "``), then a run
of numeric/categorical tokens separated by irregular whitespace. The line is
cut into three segments around the marker, the trailing segment is
whitespace-normalised and tokenised, and the pieces are concatenated into one
flat field list per line.

The fixed window is a property of this one format, not a general rule: if the
source ever switches to zero-padded or four-digit-year dates, change
``DATE_TOKEN_WIDTH`` (or ``parsing.date_token_width`` in the config).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from ..config import DEFAULT_DATE_TOKEN_WIDTH, DEFAULT_MARKER, ParseSettings
from ..errors import MalformedMarkerCountError, ParseConfigError, SegmentationError

DATE_TOKEN_WIDTH = DEFAULT_DATE_TOKEN_WIDTH
# One marker separates the two dates; its start/end are the range bounds.
MARKERS_PER_DATE_RANGE = 1

_SPACE_RUN = re.compile(r"[ \t]{2,}")


@dataclass(frozen=True)
class MarkerSpan:
    start: int
    end: int  # exclusive


@dataclass(frozen=True)
class Segments:
    leading: str
    dates: Tuple[str, str]
    trailing: str


def locate_markers(line: str, marker: str = DEFAULT_MARKER) -> List[MarkerSpan]:
    """Return every non-overlapping occurrence of ``marker``, left to right."""
    if not marker:
        raise ParseConfigError("Marker must be a non-empty string.")
    spans: List[MarkerSpan] = []
    pos = line.find(marker)
    while pos != -1:
        spans.append(MarkerSpan(pos, pos + len(marker)))
        pos = line.find(marker, pos + len(marker))
    return spans


def date_range_bounds(
    line: str,
    marker: str = DEFAULT_MARKER,
    line_index: int = 0,
) -> Tuple[MarkerSpan, MarkerSpan]:
    """
    Return the (opening, closing) bounds of the date range in ``line``.

    The opening bound is the first located marker and the closing bound the
    last one; the line must carry exactly one marker so that both refer to
    the same separator. Any other count raises ``MalformedMarkerCountError``.
    """
    spans = locate_markers(line, marker)
    if len(spans) != MARKERS_PER_DATE_RANGE:
        raise MalformedMarkerCountError(line_index, line, len(spans), marker)
    return spans[0], spans[-1]


def segment_line(
    line: str,
    opening: MarkerSpan,
    closing: MarkerSpan,
    date_width: int = DATE_TOKEN_WIDTH,
    marker: str = DEFAULT_MARKER,
    line_index: int = 0,
) -> Segments:
    date_start = opening.start - date_width
    date_end = closing.end + date_width
    if date_start < 0:
        raise SegmentationError(
            line_index, line, f"date window starts {-date_start} character(s) before the line"
        )
    # A window running past the end just means there is no trailing segment.
    leading = line[:date_start].strip()
    date_block = line[date_start:date_end]
    trailing = line[date_end:]

    if not leading:
        raise SegmentationError(line_index, line, "no observer text before the date window")

    parts = [p.strip() for p in date_block.split(marker)]
    if len(parts) != 2 or not all(parts):
        raise SegmentationError(
            line_index, line, f"date window {date_block!r} does not hold two dates"
        )
    return Segments(leading=leading, dates=(parts[0], parts[1]), trailing=trailing)


def normalize_whitespace(text: str) -> str:
    out = text.strip()
    # Each substitution shortens the string, so the loop terminates.
    while _SPACE_RUN.search(out):
        out = _SPACE_RUN.sub(" ", out)
    return out.replace("\t", " ")


def tokenize_trailing(text: str) -> List[str]:
    normalized = normalize_whitespace(text)
    if not normalized:
        return []
    return normalized.split(" ")


def assemble_record(leading: str, dates: Sequence[str], trailing_tokens: Sequence[str]) -> List[str]:
    if len(dates) != 2:
        raise ValueError(f"Expected two date tokens, got {len(dates)}: {list(dates)}")
    return [leading, *dates, *trailing_tokens]


def parse_line(line: str, line_index: int = 0, settings: ParseSettings | None = None) -> List[str]:
    settings = settings or ParseSettings()
    opening, closing = date_range_bounds(line, settings.marker, line_index)
    seg = segment_line(
        line,
        opening,
        closing,
        date_width=settings.date_token_width,
        marker=settings.marker,
        line_index=line_index,
    )
    return assemble_record(seg.leading, seg.dates, tokenize_trailing(seg.trailing))


def parse_lines(lines: Iterable[str], settings: ParseSettings | None = None) -> List[List[str]]:
    """Parse every line in order; the first malformed line aborts the batch."""
    settings = settings or ParseSettings()
    return [parse_line(line, idx, settings) for idx, line in enumerate(lines)]


__all__ = [
    "DATE_TOKEN_WIDTH",
    "MarkerSpan",
    "Segments",
    "locate_markers",
    "date_range_bounds",
    "segment_line",
    "normalize_whitespace",
    "tokenize_trailing",
    "assemble_record",
    "parse_line",
    "parse_lines",
]
