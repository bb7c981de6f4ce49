import logging
import sys
from pathlib import Path

import pytest
import yaml

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fieldobs_clean.config import ParseSettings, load_config
from fieldobs_clean.utils.io import read_lines

SCENARIO_A = "obs1   10/5 - 10/7   A1   12.3   N   4.5   1   1   migrant   3"


@pytest.fixture(scope="session")
def config_path() -> Path:
    return ROOT / "config.yaml"


@pytest.fixture(scope="session")
def cfg(config_path):
    return load_config(config_path)


@pytest.fixture(scope="session")
def settings(cfg) -> ParseSettings:
    return ParseSettings.from_config(cfg)


@pytest.fixture(scope="session")
def raw_lines(cfg):
    return read_lines(ROOT / cfg["paths"]["raw"] / cfg["data"]["observations_file"])


@pytest.fixture
def workspace(tmp_path, cfg):
    """Copy of the project config whose paths all point inside tmp_path."""

    def _make(observation_lines, summary_csv="sex,injured,uninjured\nmales,4,2\nfemales,1,5\n"):
        raw = tmp_path / "raw"
        raw.mkdir(exist_ok=True)
        (raw / cfg["data"]["observations_file"]).write_text("\n".join(observation_lines) + "\n")
        (raw / cfg["data"]["summary_file"]).write_text(summary_csv)
        local = dict(cfg)
        local["paths"] = {
            "raw": str(raw),
            "processed": str(tmp_path / "processed"),
            "outputs": str(tmp_path / "outputs"),
        }
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(local))
        return path

    return _make


@pytest.fixture
def module_log(caplog):
    """Route a non-propagating package logger into caplog."""
    attached = []

    def _attach(name, level="INFO"):
        logger = logging.getLogger(name)
        logger.addHandler(caplog.handler)
        attached.append(logger)
        caplog.set_level(level, logger=name)
        return caplog

    yield _attach
    for logger in attached:
        logger.removeHandler(caplog.handler)
