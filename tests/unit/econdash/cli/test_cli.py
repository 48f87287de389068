"""Unit tests for CLI commands that need no upstream data."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from econdash.cli.main import app

runner = CliRunner()


@pytest.mark.unit
class TestCli:
    def test_catalog_lists_indicators(self) -> None:
        result = runner.invoke(app, ["catalog", "--category", "labor-market"])

        assert result.exit_code == 0
        assert "UNRATE" in result.stdout
        assert "FEDFUNDS" not in result.stdout

    def test_access_for_basic_tier(self) -> None:
        result = runner.invoke(app, ["access", "--tier", "basic"])

        assert result.exit_code == 0
        assert "MOVING_AVERAGES" in result.stdout
        assert "DATA_EXPORT" not in result.stdout

    def test_access_for_free_tier(self) -> None:
        result = runner.invoke(app, ["access"])

        assert result.exit_code == 0
        assert "No premium features" in result.stdout

    def test_compare_needs_two_ids(self) -> None:
        result = runner.invoke(app, ["compare", "UNRATE"])

        assert result.exit_code == 2
