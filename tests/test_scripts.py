from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import yaml

from conftest import ROOT, SCENARIO_A


def _run_script(name: str, config: Path) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, str(ROOT / "scripts" / name), "--config", str(config)],
        capture_output=True,
        text=True,
    )


def _cleaned_path(config: Path) -> Path:
    cfg = yaml.safe_load(config.read_text())
    return Path(cfg["paths"]["processed"]) / cfg["data"]["cleaned_file"]


def test_preprocess_script_succeeds(workspace, raw_lines):
    config = workspace(raw_lines)
    result = _run_script("02_preprocess.py", config)
    assert result.returncode == 0, result.stderr
    assert _cleaned_path(config).exists()


def test_preprocess_script_exits_nonzero_on_malformed_line(workspace):
    config = workspace([SCENARIO_A, "obs9   10/5 - 10/7 - 10/9   A1"])
    result = _run_script("02_preprocess.py", config)
    assert result.returncode == 1
    assert "Cleaning aborted" in result.stderr
    assert "Line 1" in result.stderr
    assert not _cleaned_path(config).exists()


def test_reshape_script_reports_unknown_id_column(workspace):
    config = workspace([SCENARIO_A])
    cfg = yaml.safe_load(config.read_text())
    cfg["reshape"]["id_columns"] = ["gender"]
    config.write_text(yaml.safe_dump(cfg))
    result = _run_script("03_reshape.py", config)
    assert result.returncode == 1
    assert "Reshape aborted" in result.stderr
    assert "Traceback" not in result.stderr
