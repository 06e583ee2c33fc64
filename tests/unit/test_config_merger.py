"""Unit tests for merging CLI overrides into a quotation file.

These tests verify:
- CLI args override config values when provided
- CLI args are ignored when None
- Overrides are revalidated
"""

from typing import Any

import pytest

from interiors.application.config import (
    ConfigError,
    QuotationConfiguration,
    load_config_from_dict,
    merge_config_with_cli,
)
from interiors.domain import FurnitureType


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli function."""

    @pytest.fixture
    def base_config(self, quotation_data: dict[str, Any]) -> QuotationConfiguration:
        quotation_data["project_id"] = "p-1"
        quotation_data["pricing"] = {"labor_rates": {"wardrobe": 50}, "default_labor_rate": 30}
        return load_config_from_dict(quotation_data)

    def test_no_overrides_returns_equivalent_config(
        self, base_config: QuotationConfiguration
    ) -> None:
        merged = merge_config_with_cli(base_config)
        assert merged.model_dump() == base_config.model_dump()
        assert merged is not base_config

    def test_override_tax_rate(self, base_config: QuotationConfiguration) -> None:
        merged = merge_config_with_cli(base_config, tax_rate=0.05)
        assert merged.tax_rate == 0.05
        assert merged.project_id == "p-1"
        assert base_config.tax_rate == 0.18

    def test_override_project_id(self, base_config: QuotationConfiguration) -> None:
        assert merge_config_with_cli(base_config, project_id="p-2").project_id == "p-2"

    def test_zero_tax_rate_is_an_override(self, base_config: QuotationConfiguration) -> None:
        """0 is a real value, not an absent one."""
        assert merge_config_with_cli(base_config, tax_rate=0).tax_rate == 0

    def test_labor_rate_replaces_every_rate(self, base_config: QuotationConfiguration) -> None:
        merged = merge_config_with_cli(base_config, labor_rate=25)
        assert merged.pricing.labor_rates == {}
        assert merged.pricing.default_labor_rate == 25

    def test_items_survive_merge(self, base_config: QuotationConfiguration) -> None:
        merged = merge_config_with_cli(base_config, tax_rate=0.1)
        assert merged.items[0].type == FurnitureType.WARDROBE
        assert merged.items[0].hardware == {"hinges": 4}

    def test_invalid_override(self, base_config: QuotationConfiguration) -> None:
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(base_config, tax_rate=2)
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] in ("tax_rate", "taxRate")
