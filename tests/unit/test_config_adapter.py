"""Unit tests for configuration adapter functions.

These tests verify:
- Catalog files convert to immutable catalog tables
- Pricing configuration converts to LaborRates
- load_catalog() reads the bundled catalog or an alternate file
"""

import json
from pathlib import Path

import pytest

from interiors.application.config import (
    ConfigError,
    PricingConfig,
    config_to_catalog,
    config_to_catalog_data,
    config_to_labor_rates,
    load_catalog,
    load_catalog_config_from_dict,
)
from interiors.domain import Catalog, FurnitureType, OptionKind

CATALOG_DATA = {
    "dimension_defaults": {"skirting_height": 3, "door_thickness": 1, "back_thickness": 0.25},
    "components": {
        "other": [
            {"key": "shelves", "label": "Shelves", "max": 5, "default": 1},
            {"key": "bench", "label": "Bench", "kind": "toggle", "default": True},
        ]
    },
    "hardware": {
        "other": [{"key": "hinges", "label": "Hinges", "unit_price": 150, "unit": "pair", "max": 8}]
    },
    "materials": {
        "primary": [{"key": "teak", "label": "Teak", "price_per_area": 400}],
        "lamination": [{"key": "none", "label": "None"}],
    },
}


class TestConfigToCatalog:
    def test_component_bounds_resolved(self) -> None:
        data = config_to_catalog_data(load_catalog_config_from_dict(CATALOG_DATA))
        shelves, bench = data.components[FurnitureType.OTHER]
        assert (shelves.max, shelves.default, shelves.kind) == (5, 1, OptionKind.COUNTER)
        assert (bench.max, bench.default, bench.kind) == (1, 1, OptionKind.TOGGLE)

    def test_dimension_defaults(self) -> None:
        data = config_to_catalog_data(load_catalog_config_from_dict(CATALOG_DATA))
        assert data.dimension_defaults.skirting_height == 3
        assert data.dimension_defaults.back_thickness == 0.25

    def test_missing_types_fall_back_to_other(self) -> None:
        catalog = config_to_catalog(load_catalog_config_from_dict(CATALOG_DATA))
        assert [o.key for o in catalog.components_for(FurnitureType.KITCHEN)] == ["shelves", "bench"]
        assert catalog.hardware_item(FurnitureType.WARDROBE, "hinges").unit_price == 150
        assert catalog.primary_material("teak").price_per_area == 400


class TestConfigToLaborRates:
    def test_defaults(self) -> None:
        rates = config_to_labor_rates(PricingConfig())
        assert rates.rate_for(FurnitureType.TV_UNIT) == 40
        assert rates.default_rate == 35

    def test_partial_table_uses_default_rate(self) -> None:
        rates = config_to_labor_rates(
            PricingConfig(labor_rates={FurnitureType.KITCHEN: 60}, default_labor_rate=20)
        )
        assert rates.rate_for(FurnitureType.KITCHEN) == 60
        assert rates.rate_for(FurnitureType.WARDROBE) == 20


class TestLoadCatalog:
    def test_bundled(self) -> None:
        catalog = load_catalog()
        assert isinstance(catalog, Catalog)
        assert catalog.component(FurnitureType.WARDROBE, "doors").max == 6

    def test_alternate_file(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(CATALOG_DATA))
        catalog = load_catalog(str(path))
        assert catalog.primary_material("mdf") is None
        assert catalog.primary_material("teak") is not None

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_catalog(tmp_path / "nope.json")
        assert exc_info.value.error_type == "file_not_found"
