"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid quotation files pass validation
- Invalid files produce errors with JSON paths
- Clamping warnings are displayed
- Exit codes are correct
"""

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from interiors.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


def _write(tmp_path: Path, data: Any) -> Path:
    path = tmp_path / "quote.json"
    path.write_text(data if isinstance(data, str) else json.dumps(data))
    return path


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_file(self, runner: CliRunner, tmp_path: Path, quotation_data: dict) -> None:
        result = runner.invoke(app, ["validate", str(_write(tmp_path, quotation_data))])

        assert result.exit_code == 0
        assert "Validation passed. Quotation file is valid." in result.output

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output
        assert "Validation failed." in result.output

    def test_invalid_json_syntax(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(_write(tmp_path, '{"items": ['))])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output

    def test_schema_error(self, runner: CliRunner, tmp_path: Path) -> None:
        data = {"items": [{"type": "sofa", "dimensions": {"x": 1, "y": 1, "z": 1}}]}
        result = runner.invoke(app, ["validate", str(_write(tmp_path, data))])

        assert result.exit_code == 1
        assert "items[0].type" in result.output

    def test_semantic_errors(
        self, runner: CliRunner, tmp_path: Path, wardrobe_item: dict[str, Any]
    ) -> None:
        wardrobe_item["dimensions"]["y"] = 0
        wardrobe_item["hardware"] = {}
        result = runner.invoke(app, ["validate", str(_write(tmp_path, {"items": [wardrobe_item]}))])

        assert result.exit_code == 1
        assert "items[0].dimensions.y: Dimension must be greater than zero" in result.output
        assert "items[0].hardware: At least one hardware item must be selected" in result.output
        assert "Validation failed: 2 error(s), 0 warning(s)" in result.output

    def test_warnings_exit_2(
        self, runner: CliRunner, tmp_path: Path, wardrobe_item: dict[str, Any]
    ) -> None:
        wardrobe_item["components"]["doors"] = 12
        result = runner.invoke(app, ["validate", str(_write(tmp_path, {"items": [wardrobe_item]}))])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Suggestion: It will be reduced to 6" in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_missing_catalog_file(
        self, runner: CliRunner, tmp_path: Path, quotation_data: dict
    ) -> None:
        quotation_data["catalog"] = str(tmp_path / "catalog.json")
        result = runner.invoke(app, ["validate", str(_write(tmp_path, quotation_data))])

        assert result.exit_code == 1
        assert "catalog.json" in result.output
