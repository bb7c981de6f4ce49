from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

import yaml

from .errors import ParseConfigError


DEFAULT_CONFIG_PATH = Path("config.yaml")

DEFAULT_MARKER = " - "
# Characters a date token (with its padding) occupies next to the marker.
DEFAULT_DATE_TOKEN_WIDTH = 5
DEFAULT_COLUMNS: Tuple[str, ...] = (
    "observer",
    "date_first",
    "date_last",
    "id",
    "distance",
    "direction",
    "speed",
    "measurex",
    "measurey",
    "migratory_status",
    "times_observed",
)
DEFAULT_DATE_COLUMNS: Tuple[str, ...] = ("date_first", "date_last")
DEFAULT_DATE_FORMAT = "%m/%d/%y"
DATE_ERROR_POLICIES = ("raise", "warn")


def load_config(path: str | os.PathLike | None = None) -> Dict[str, Any]:
    cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
    with open(cfg_path, "r") as f:
        return yaml.safe_load(f) or {}


@dataclass(frozen=True)
class ParseSettings:
    """Dataset-wide constants for one cleaning run.

    The implied year is not present in the raw records; it is injected
    identically into every date value of the run, so it lives here rather
    than inside the date fixer.
    """

    marker: str = DEFAULT_MARKER
    date_token_width: int = DEFAULT_DATE_TOKEN_WIDTH
    columns: Tuple[str, ...] = DEFAULT_COLUMNS
    date_columns: Tuple[str, ...] = DEFAULT_DATE_COLUMNS
    implied_year_suffix: str = ""
    date_format: str = DEFAULT_DATE_FORMAT
    on_date_error: str = "raise"

    def __post_init__(self) -> None:
        if not self.marker:
            raise ParseConfigError("parsing.marker must be a non-empty string.")
        if self.date_token_width <= 0:
            raise ParseConfigError(
                f"parsing.date_token_width must be positive, got {self.date_token_width}."
            )
        if len(set(self.columns)) != len(self.columns):
            raise ParseConfigError(f"parsing.columns contains duplicates: {list(self.columns)}")
        missing = [c for c in self.date_columns if c not in self.columns]
        if missing:
            raise ParseConfigError(f"dates.columns {missing} are not listed in parsing.columns.")
        if self.on_date_error not in DATE_ERROR_POLICIES:
            raise ParseConfigError(
                f"dates.on_error must be one of {DATE_ERROR_POLICIES}, got '{self.on_date_error}'."
            )

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "ParseSettings":
        parsing = cfg.get("parsing") or {}
        dates = cfg.get("dates") or {}
        if "implied_year_suffix" not in dates:
            raise ParseConfigError(
                "dates.implied_year_suffix is required (e.g. '/12'); the raw records "
                "carry no year."
            )
        try:
            width = int(parsing.get("date_token_width", DEFAULT_DATE_TOKEN_WIDTH))
        except (TypeError, ValueError) as exc:
            raise ParseConfigError(
                f"parsing.date_token_width must be an integer, got {parsing.get('date_token_width')!r}."
            ) from exc
        return cls(
            marker=str(parsing.get("marker", DEFAULT_MARKER)),
            date_token_width=width,
            columns=tuple(str(c) for c in parsing.get("columns", DEFAULT_COLUMNS)),
            date_columns=tuple(str(c) for c in dates.get("columns", DEFAULT_DATE_COLUMNS)),
            implied_year_suffix=str(dates["implied_year_suffix"]),
            date_format=str(dates.get("format", DEFAULT_DATE_FORMAT)),
            on_date_error=str(dates.get("on_error", "raise")),
        )


__all__ = [
    "load_config",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_COLUMNS",
    "DEFAULT_DATE_COLUMNS",
    "DEFAULT_DATE_TOKEN_WIDTH",
    "DEFAULT_MARKER",
    "ParseSettings",
]
