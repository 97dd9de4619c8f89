"""
Tests for the Typer command line interface.
"""

import json

import pytest
from rich.console import Console
from typer.testing import CliRunner

from courtslots.cli import app as cli_app
from courtslots.cli.app import app

runner = CliRunner()

CONFIG_YAML = """
timezone: Europe/Berlin
slot_store_file: slots.json
defaults:
  horizon_months: 1
courts:
  - id: 1
    name: Court 1
    location: Main Hall
    opening_time: "09:00"
    closing_time: "11:00"
    operating_days: "Mon"
  - id: 2
    name: Court 2
    location: Outdoor
    status: MAINTENANCE
    opening_time: "09:00"
    closing_time: "10:00"
  - id: 3
    name: Court 3
    location: Annex
    opening_time: "nine"
    closing_time: "10:00"
"""


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Keep table cells on one line regardless of the terminal size."""
    monkeypatch.setattr(cli_app, "console", Console(width=200))


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    return path


def test_courts_lists_calendars_and_errors(config_path):
    result = runner.invoke(app, ["courts", "--config", str(config_path)])

    assert result.exit_code == 0
    assert "Court 1" in result.output
    assert "09:00 - 11:00" in result.output
    assert "Invalid time format" in result.output


def test_generate_then_query(config_path):
    result = runner.invoke(app, ["generate", "1", "2", "--start", "2024-11-25", "--config", str(config_path)])

    assert result.exit_code == 0
    # Mondays 25.11, 02.12, 09.12, 16.12, 23.12 with two slots each
    assert "Court 1: 10 slot(s) stored" in result.output
    assert "Court 2: 30 slot(s) stored" in result.output

    stored = json.loads((config_path.parent / "slots.json").read_text(encoding="utf-8"))
    assert len(stored) == 40

    result = runner.invoke(
        app,
        ["slots", "--start", "2024-11-25", "--end", "2024-11-25", "--config", str(config_path)],
    )

    assert result.exit_code == 0
    assert "AVAILABLE" in result.output
    assert "MAINTENANCE" in result.output


def test_book_and_available(config_path):
    runner.invoke(app, ["generate", "1", "--start", "2024-11-25", "--config", str(config_path)])

    result = runner.invoke(app, ["book", "1", "--config", str(config_path)])
    assert result.exit_code == 0

    stored = json.loads((config_path.parent / "slots.json").read_text(encoding="utf-8"))
    assert stored[0]["is_available"] is False

    result = runner.invoke(app, ["release", "1", "--config", str(config_path)])
    assert result.exit_code == 0

    stored = json.loads((config_path.parent / "slots.json").read_text(encoding="utf-8"))
    assert stored[0]["is_available"] is True


def test_generate_invalid_court_fails(config_path):
    result = runner.invoke(app, ["generate", "3", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "Invalid time format" in result.output


def test_generate_unknown_court_fails(config_path):
    result = runner.invoke(app, ["generate", "9", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "Court not found" in result.output


def test_generate_requires_targets(config_path):
    result = runner.invoke(app, ["generate", "--config", str(config_path)])

    assert result.exit_code == 1


def test_missing_config_fails(tmp_path):
    result = runner.invoke(app, ["courts", "--config", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert "Config file not found" in result.output
