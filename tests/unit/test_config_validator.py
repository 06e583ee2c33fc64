"""Unit tests for semantic validation of quotation files."""

from typing import Any

import pytest

from interiors.application.config import (
    ValidationResult,
    load_config_from_dict,
    validate_config,
)
from interiors.domain import Catalog


def _validate(catalog: Catalog, *items: dict[str, Any]) -> ValidationResult:
    return validate_config(load_config_from_dict({"items": list(items)}), catalog)


class TestValidationResult:
    def test_exit_codes(self) -> None:
        result = ValidationResult()
        assert result.exit_code == 0
        result.add_warning("items", "careful")
        assert result.exit_code == 2
        assert result.is_valid
        result.add_error("items[0]", "broken")
        assert result.exit_code == 1
        assert not result.is_valid


class TestValidateConfig:
    def test_valid_item(self, catalog: Catalog, wardrobe_item: dict[str, Any]) -> None:
        result = _validate(catalog, wardrobe_item)
        assert result.is_valid
        assert not result.has_warnings

    def test_empty_quotation_warns(self, catalog: Catalog) -> None:
        result = _validate(catalog)
        assert result.is_valid
        assert result.warnings[0].path == "items"

    def test_dimension_errors(self, catalog: Catalog, wardrobe_item: dict[str, Any]) -> None:
        wardrobe_item["dimensions"] = {"x": 0, "y": 8, "z": -2, "door_thickness": -1}
        result = _validate(catalog, wardrobe_item)
        paths = [error.path for error in result.errors]
        assert paths == [
            "items[0].dimensions.x",
            "items[0].dimensions.z",
            "items[0].dimensions.door_thickness",
        ]
        assert result.errors[1].value == -2
        assert result.errors[2].message == "Dimension cannot be negative"

    def test_unknown_keys(self, catalog: Catalog, wardrobe_item: dict[str, Any]) -> None:
        wardrobe_item["components"]["baseCabinets"] = 2
        wardrobe_item["hardware"]["basket_slides"] = 1
        result = _validate(catalog, wardrobe_item)
        assert {error.path for error in result.errors} == {
            "items[0].components.baseCabinets",
            "items[0].hardware.basket_slides",
        }

    def test_quantity_above_max_warns(
        self, catalog: Catalog, wardrobe_item: dict[str, Any]
    ) -> None:
        wardrobe_item["components"]["doors"] = 9
        wardrobe_item["hardware"]["hinges"] = 40
        result = _validate(catalog, wardrobe_item)
        assert result.is_valid
        assert [w.path for w in result.warnings] == [
            "items[0].components.doors",
            "items[0].hardware.hinges",
        ]
        assert result.warnings[0].suggestion == "It will be reduced to 6"

    def test_components_default_to_catalog(
        self, catalog: Catalog, wardrobe_item: dict[str, Any]
    ) -> None:
        """Unlisted components keep their defaults, which satisfy the step gate."""
        wardrobe_item["components"] = {}
        assert _validate(catalog, wardrobe_item).is_valid

    def test_all_components_zero(self, catalog: Catalog, wardrobe_item: dict[str, Any]) -> None:
        wardrobe_item["components"] = {
            "doors": 0,
            "shelves": 0,
            "drawers": 0,
            "hangingRod": False,
            "mirrorDoor": False,
            "softClose": False,
        }
        result = _validate(catalog, wardrobe_item)
        assert [e.message for e in result.errors] == ["At least one component must be selected"]

    def test_missing_primary(self, catalog: Catalog, wardrobe_item: dict[str, Any]) -> None:
        wardrobe_item["materials"] = {"innerLamination": "pvc"}
        result = _validate(catalog, wardrobe_item)
        assert [e.path for e in result.errors] == ["items[0].materials.primary"]

    def test_unknown_materials_warn(
        self, catalog: Catalog, wardrobe_item: dict[str, Any]
    ) -> None:
        wardrobe_item["materials"] = {
            "primary": "bamboo",
            "inner_lamination": "none",
            "outer_lamination": "glitter",
        }
        result = _validate(catalog, wardrobe_item)
        assert result.is_valid
        assert [w.path for w in result.warnings] == [
            "items[0].materials.primary",
            "items[0].materials.outer_lamination",
        ]

    @pytest.mark.parametrize("hardware", [{}, {"hinges": 0}])
    def test_no_hardware(
        self, catalog: Catalog, wardrobe_item: dict[str, Any], hardware: dict[str, int]
    ) -> None:
        wardrobe_item["hardware"] = hardware
        result = _validate(catalog, wardrobe_item)
        assert [e.path for e in result.errors] == ["items[0].hardware"]

    def test_paths_use_item_index(self, catalog: Catalog, wardrobe_item: dict[str, Any]) -> None:
        broken = dict(wardrobe_item, hardware={})
        result = _validate(catalog, wardrobe_item, broken)
        assert [e.path for e in result.errors] == ["items[1].hardware"]
