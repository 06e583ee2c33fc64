"""Unit tests for furniture value objects."""

import pytest

from interiors.domain import CostBreakdown, Dimensions, FurnitureType, MaterialSelection


class TestFurnitureType:
    def test_values_match_catalog_keys(self) -> None:
        assert [t.value for t in FurnitureType] == [
            "wardrobe",
            "kitchen",
            "tv_unit",
            "study_table",
            "shoe_rack",
            "other",
        ]

    def test_labels(self) -> None:
        assert FurnitureType.KITCHEN.label == "Kitchen Cabinet"
        assert FurnitureType.TV_UNIT.label == "TV Unit"

    def test_string_lookup(self) -> None:
        assert FurnitureType("shoe_rack") is FurnitureType.SHOE_RACK


class TestDimensions:
    def test_auxiliary_defaults(self) -> None:
        d = Dimensions(10, 8, 2)
        assert d.skirting_height == 4.0
        assert d.door_thickness == 0.75
        assert d.back_thickness == 0.5

    def test_aliases(self) -> None:
        d = Dimensions(10, 8, 2)
        assert (d.width, d.height, d.depth) == (10, 8, 2)

    def test_areas(self) -> None:
        d = Dimensions(10, 8, 2)
        assert d.front_area == 80
        assert d.surface_area == 232

    @pytest.mark.parametrize("x,y,z", [(0, 8, 2), (10, -1, 2), (10, 8, 0)])
    def test_rejects_non_positive_sizes(self, x: float, y: float, z: float) -> None:
        with pytest.raises(ValueError):
            Dimensions(x, y, z)

    def test_rejects_negative_thickness(self) -> None:
        with pytest.raises(ValueError):
            Dimensions(10, 8, 2, back_thickness=-0.5)

    def test_zero_thickness_allowed(self) -> None:
        assert Dimensions(10, 8, 2, skirting_height=0).skirting_height == 0

    def test_is_immutable(self) -> None:
        d = Dimensions(10, 8, 2)
        with pytest.raises(AttributeError):
            d.x = 5  # type: ignore[misc]


class TestMaterialSelection:
    def test_complete_needs_primary(self) -> None:
        assert MaterialSelection("mdf").is_complete
        assert not MaterialSelection("").is_complete


class TestCostBreakdown:
    def test_from_parts_sums_total(self) -> None:
        costs = CostBreakdown.from_parts(15000, 5000, 8000)
        assert costs.total == 28000

    def test_rejects_inconsistent_total(self) -> None:
        with pytest.raises(ValueError, match="Total"):
            CostBreakdown(material_cost=100, hardware_cost=50, labor_cost=25, total=100)

    def test_rejects_negative_parts(self) -> None:
        with pytest.raises(ValueError):
            CostBreakdown.from_parts(-1, 0, 0)
