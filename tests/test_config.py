from __future__ import annotations

import pytest

from fieldobs_clean.config import DEFAULT_COLUMNS, ParseSettings
from fieldobs_clean.errors import ParseConfigError


def test_project_config_loads(settings):
    assert settings.marker == " - "
    assert settings.columns == DEFAULT_COLUMNS
    assert settings.implied_year_suffix == "/12"
    assert settings.on_date_error == "raise"


def test_implied_year_is_required():
    with pytest.raises(ParseConfigError):
        ParseSettings.from_config({"parsing": {}, "dates": {}})


@pytest.mark.parametrize(
    "parsing,dates",
    [
        ({"marker": ""}, {}),
        ({"date_token_width": 0}, {}),
        ({"date_token_width": "wide"}, {}),
        ({"columns": ["a", "a"]}, {"columns": []}),
        ({}, {"columns": ["date_seen"]}),
        ({}, {"on_error": "ignore"}),
    ],
)
def test_invalid_settings(parsing, dates):
    dates = {"implied_year_suffix": "/12", **dates}
    with pytest.raises(ParseConfigError):
        ParseSettings.from_config({"parsing": parsing, "dates": dates})
