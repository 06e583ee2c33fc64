"""Unit tests for configuration schema and loader.

These tests verify:
- Valid quotation and catalog files are loaded correctly
- camelCase names from the storage service are accepted
- Invalid types and unknown fields are rejected with JSON paths
- Schema version validation
- Loader error handling (file not found, JSON parse errors)
"""

import json
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from interiors.application.config import (
    SUPPORTED_VERSIONS,
    CatalogConfiguration,
    ConfigError,
    DimensionsConfig,
    FurnitureItemConfig,
    QuotationConfiguration,
    load_catalog_config,
    load_catalog_config_from_dict,
    load_config,
    load_config_from_dict,
    load_default_catalog_config,
)
from interiors.application.config.loader import _format_json_path
from interiors.domain import FurnitureType, OptionKind


class TestQuotationConfiguration:
    """Tests for the quotation file root model."""

    def test_defaults(self) -> None:
        config = QuotationConfiguration()
        assert config.schema_version == "1.0"
        assert config.tax_rate == 0.18
        assert config.items == []
        assert config.pricing.labor_rates[FurnitureType.KITCHEN] == 45
        assert config.pricing.default_labor_rate == 35

    def test_loads_item(self, quotation_data: dict[str, Any]) -> None:
        config = load_config_from_dict(quotation_data)
        item = config.items[0]
        assert item.type == FurnitureType.WARDROBE
        assert item.dimensions.raw() == {"x": 10, "y": 8, "z": 2}
        assert item.components == {"doors": 2, "shelves": 4}
        assert item.materials.primary == "mdf"
        assert item.hardware == {"hinges": 4}

    def test_accepts_camel_case(self) -> None:
        config = load_config_from_dict(
            {
                "schemaVersion": "1.0",
                "projectId": "p-9",
                "taxRate": 0.12,
                "items": [
                    {
                        "type": "tv_unit",
                        "dimensions": {"x": 6, "y": 2, "z": 1.5, "skirtingHeight": 3},
                        "materials": {"primary": "mdf", "outerLamination": "hpl"},
                    }
                ],
            }
        )
        assert config.project_id == "p-9"
        assert config.tax_rate == 0.12
        item = config.items[0]
        assert item.dimensions.skirting_height == 3
        assert item.materials.outer_lamination == "hpl"

    @pytest.mark.parametrize("rate", [-0.01, 1.5])
    def test_tax_rate_bounds(self, rate: float) -> None:
        with pytest.raises(PydanticValidationError):
            QuotationConfiguration(tax_rate=rate)

    def test_unsupported_version(self) -> None:
        with pytest.raises(PydanticValidationError, match="Unsupported schema version"):
            QuotationConfiguration(schema_version="2.0")
        assert "1.0" in SUPPORTED_VERSIONS

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            QuotationConfiguration.model_validate({"items": [], "discount": 0.1})

    def test_unknown_furniture_type(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                {"items": [{"type": "sofa", "dimensions": {"x": 1, "y": 1, "z": 1}}]}
            )
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "items[0].type"
        assert "items[0].type" in exc_info.value.message

    def test_negative_labor_rate(self) -> None:
        with pytest.raises(PydanticValidationError, match="cannot be negative"):
            QuotationConfiguration.model_validate({"pricing": {"labor_rates": {"kitchen": -5}}})


class TestDimensionsConfig:
    def test_out_of_range_values_are_accepted(self) -> None:
        """Range checks happen later, so every failing field can be reported."""
        dims = DimensionsConfig(x=0, y=-1, z=2)
        assert dims.raw() == {"x": 0, "y": -1, "z": 2}

    def test_raw_omits_unset_auxiliary_fields(self) -> None:
        assert set(DimensionsConfig(x=1, y=1, z=1, back_thickness=0.25).raw()) == {
            "x",
            "y",
            "z",
            "back_thickness",
        }

    def test_item_defaults(self) -> None:
        item = FurnitureItemConfig(type=FurnitureType.OTHER, dimensions=DimensionsConfig())
        assert item.components == {}
        assert item.hardware == {}
        assert item.materials.primary == ""


class TestCatalogConfiguration:
    @pytest.fixture
    def minimal(self) -> dict[str, Any]:
        return {
            "components": {
                "other": [{"key": "shelves", "label": "Shelves", "max": 5, "default": 1}]
            },
            "hardware": {
                "other": [{"key": "hinges", "label": "Hinges", "unit_price": 150, "max": 8}]
            },
            "materials": {"primary": [{"key": "mdf", "label": "MDF", "price_per_area": 120}]},
        }

    def test_minimal_catalog(self, minimal: dict[str, Any]) -> None:
        config = load_catalog_config_from_dict(minimal)
        assert config.dimension_defaults.skirting_height == 4.0
        assert config.materials.lamination == []

    def test_requires_other_table(self, minimal: dict[str, Any]) -> None:
        minimal["components"] = {"wardrobe": minimal["components"]["other"]}
        with pytest.raises(ConfigError, match="fallback table"):
            load_catalog_config_from_dict(minimal)

    def test_duplicate_keys(self, minimal: dict[str, Any]) -> None:
        minimal["hardware"]["other"].append(minimal["hardware"]["other"][0])
        with pytest.raises(ConfigError, match="Duplicate hardware keys"):
            load_catalog_config_from_dict(minimal)

    def test_counter_requires_max(self, minimal: dict[str, Any]) -> None:
        del minimal["components"]["other"][0]["max"]
        with pytest.raises(ConfigError, match="requires max"):
            load_catalog_config_from_dict(minimal)

    def test_default_outside_bounds(self, minimal: dict[str, Any]) -> None:
        minimal["components"]["other"][0]["default"] = 9
        with pytest.raises(ConfigError, match="outside"):
            load_catalog_config_from_dict(minimal)

    def test_toggle_resolves_bounds(self, minimal: dict[str, Any]) -> None:
        minimal["components"]["other"].append(
            {"key": "bench", "label": "Bench", "kind": "toggle", "default": True}
        )
        toggle = load_catalog_config_from_dict(minimal).components[FurnitureType.OTHER][1]
        assert toggle.kind == OptionKind.TOGGLE
        assert (toggle.resolved_max, toggle.resolved_default) == (1, 1)

    def test_bundled_catalog(self) -> None:
        config = load_default_catalog_config()
        assert isinstance(config, CatalogConfiguration)
        assert set(config.components) == set(FurnitureType)
        assert set(config.hardware) == set(FurnitureType)
        assert len(config.materials.primary) == 4
        assert len(config.materials.lamination) == 5


class TestLoader:
    def test_load_from_file(self, tmp_path: Path, quotation_data: dict[str, Any]) -> None:
        path = tmp_path / "quote.json"
        path.write_text(json.dumps(quotation_data))
        assert len(load_config(path).items) == 1

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"items": [\n  {"type": }\n]}')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 2

    def test_catalog_file(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps(
                {
                    "components": {"other": []},
                    "hardware": {"other": []},
                    "materials": {"primary": []},
                }
            )
        )
        with pytest.raises(ConfigError) as exc_info:
            load_catalog_config(path)
        assert exc_info.value.details[0]["path"] == "materials.primary"

    @pytest.mark.parametrize(
        "loc,expected",
        [
            (("items", 0, "dimensions", "x"), "items[0].dimensions.x"),
            (("tax_rate",), "tax_rate"),
            ((0,), "[0]"),
        ],
    )
    def test_format_json_path(self, loc: tuple, expected: str) -> None:
        assert _format_json_path(loc) == expected
