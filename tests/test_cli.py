"""Mini README: Tests for the Typer command line.

The settings cache is cleared around each test so the commands pick up the
temporary data directory from the environment.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from typer.testing import CliRunner

from budget_dashboard import cli
from budgetboard.configuration import get_settings


@pytest.fixture()
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("BUDGETBOARD_DATA_DIRECTORY", str(tmp_path / "data"))
    get_settings.cache_clear()
    yield tmp_path / "data"
    get_settings.cache_clear()


def test_summary_prints_default_totals(data_dir: Path) -> None:
    result = CliRunner().invoke(cli, ["summary"])

    assert result.exit_code == 0
    assert "Recurring:           $1525.97" in result.output
    assert "Remaining:           $674.03" in result.output


def test_export_writes_monthly_csv(data_dir: Path, tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["export", "--directory", str(tmp_path / "exports")])

    expected = tmp_path / "exports" / f"budget_{date.today():%Y-%m}.csv"
    assert result.exit_code == 0
    assert expected.exists()
    assert expected.read_text(encoding="utf-8").startswith("Date,Description,Amount\nMonthly,")
