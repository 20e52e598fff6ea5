"""
Tests for the terminal report script following kkb_fastapi pattern.
"""

import importlib.util
import sys
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).resolve().parents[4] / "scripts" / "emissions_report.py"


@pytest.fixture
def emissions_report():
    """Import the report script as a module."""
    spec = importlib.util.spec_from_file_location("emissions_report", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_unknown_config_exits_with_error_panel(emissions_report, monkeypatch, capsys):
    """Test a missing config file prints the error panel and exits 1."""
    monkeypatch.setattr(sys, "argv", ["emissions_report.py", "--config", "missing.toml"])

    with pytest.raises(SystemExit) as exc_info:
        emissions_report.main()

    assert exc_info.value.code == 1
    assert "CONFIG NOT FOUND" in capsys.readouterr().out


def test_broken_dataset_exits_with_error_panel(emissions_report, monkeypatch, capsys):
    """Test a dataset integrity error prints the error panel and exits 1."""

    def reject(config):
        raise emissions_report.DataIntegrityError(Path("records.csv"), "file is not valid UTF-8")

    monkeypatch.setattr(emissions_report, "load_record_store", reject)
    monkeypatch.setattr(sys, "argv", ["emissions_report.py", "--config", "test.toml"])

    with pytest.raises(SystemExit) as exc_info:
        emissions_report.main()

    assert exc_info.value.code == 1
    assert "DATASET REJECTED" in capsys.readouterr().out


def test_report_for_facility(emissions_report, monkeypatch, capsys):
    """Test the full report with a facility panel."""
    monkeypatch.setattr(
        sys, "argv", ["emissions_report.py", "--config", "test.toml", "--facility", "F003"]
    )

    emissions_report.main()

    out = capsys.readouterr().out
    assert "TOP EMITTERS" in out
    assert "EMISSION RECORDS" in out
