"""Unit tests for component, hardware and material selectors."""

import pytest

from interiors.domain import (
    Catalog,
    ComponentSelector,
    FurnitureType,
    HardwareSelector,
    MaterialSelection,
    MaterialSelector,
    UnknownOptionKeyError,
)


class TestComponentSelector:
    def test_starts_at_catalog_defaults(self, catalog: Catalog) -> None:
        selector = ComponentSelector(catalog, FurnitureType.WARDROBE)
        assert selector.selection() == {
            "doors": 2,
            "shelves": 4,
            "drawers": 2,
            "hangingRod": 1,
            "mirrorDoor": 0,
            "softClose": 0,
        }

    def test_initial_values_override_defaults(self, catalog: Catalog) -> None:
        selector = ComponentSelector(catalog, FurnitureType.WARDROBE, {"doors": 4, "drawers": 0})
        assert selector.quantity("doors") == 4
        assert selector.quantity("drawers") == 0
        assert selector.quantity("shelves") == 4

    def test_initial_values_are_clamped(self, catalog: Catalog) -> None:
        selector = ComponentSelector(catalog, FurnitureType.WARDROBE, {"doors": 99, "shelves": -3})
        assert selector.quantity("doors") == 6
        assert selector.quantity("shelves") == 0

    def test_unknown_initial_keys_are_dropped(self, catalog: Catalog) -> None:
        selector = ComponentSelector(catalog, FurnitureType.WARDROBE, {"baseCabinets": 3})
        assert "baseCabinets" not in selector.selection()

    @pytest.mark.parametrize("raw,stored", [(3, 3), ("5", 5), (7, 6), (-2, 0), ("x", 0), (2.9, 2)])
    def test_set_clamps(self, catalog: Catalog, raw: object, stored: int) -> None:
        selector = ComponentSelector(catalog, FurnitureType.WARDROBE)
        assert selector.set("doors", raw) == stored
        assert selector.quantity("doors") == stored

    def test_set_unknown_key(self, catalog: Catalog) -> None:
        selector = ComponentSelector(catalog, FurnitureType.WARDROBE)
        with pytest.raises(UnknownOptionKeyError):
            selector.set("wallCabinets", 1)

    def test_increment_and_decrement_stop_at_bounds(self, catalog: Catalog) -> None:
        selector = ComponentSelector(catalog, FurnitureType.WARDROBE, {"doors": 5})
        assert selector.increment("doors") == 6
        assert selector.increment("doors") == 6
        selector.set("doors", 1)
        assert selector.decrement("doors") == 0
        assert selector.decrement("doors") == 0

    def test_toggle(self, catalog: Catalog) -> None:
        selector = ComponentSelector(catalog, FurnitureType.WARDROBE)
        assert selector.toggle("mirrorDoor", True) == 1
        assert selector.toggle("hangingRod", False) == 0

    def test_toggle_rejects_counters(self, catalog: Catalog) -> None:
        selector = ComponentSelector(catalog, FurnitureType.WARDROBE)
        with pytest.raises(ValueError, match="counter"):
            selector.toggle("doors", True)

    def test_toggle_values_bounded(self, catalog: Catalog) -> None:
        selector = ComponentSelector(catalog, FurnitureType.WARDROBE)
        assert selector.set("mirrorDoor", 5) == 1

    def test_has_any_selection(self, catalog: Catalog) -> None:
        selector = ComponentSelector(
            catalog,
            FurnitureType.OTHER,
            {"shelves": 0, "drawers": 0, "doors": 0},
        )
        assert not selector.has_any_selection()
        selector.increment("drawers")
        assert selector.has_any_selection()
        assert selector.selected() == {"drawers": 1}


class TestHardwareSelector:
    def test_starts_at_zero(self, catalog: Catalog) -> None:
        selector = HardwareSelector(catalog, FurnitureType.KITCHEN)
        assert set(selector.selection().values()) == {0}
        assert not selector.has_any_selection()

    def test_initial_values_clamped(self, catalog: Catalog) -> None:
        selector = HardwareSelector(catalog, FurnitureType.STUDY_TABLE, {"keyboard_tray_slide": 3})
        assert selector.quantity("keyboard_tray_slide") == 1

    def test_total_cost(self, catalog: Catalog) -> None:
        selector = HardwareSelector(catalog, FurnitureType.WARDROBE)
        selector.set("hinges", 4)
        selector.set("shelf_pins", 2)
        assert selector.total_cost() == 4 * 150 + 2 * 50

    def test_options_follow_furniture_type(self, catalog: Catalog) -> None:
        selector = HardwareSelector(catalog, FurnitureType.TV_UNIT)
        assert "led_strips" in [o.key for o in selector.options]


class TestMaterialSelector:
    def test_empty_selector_is_incomplete(self, catalog: Catalog) -> None:
        selector = MaterialSelector(catalog)
        assert not selector.is_complete()
        assert selector.primary == ""

    def test_primary_completes(self, catalog: Catalog) -> None:
        selector = MaterialSelector(catalog)
        selector.set("primary", "plywood")
        assert selector.is_complete()

    def test_estimated_cost(self, catalog: Catalog) -> None:
        selector = MaterialSelector(catalog, {"primary": "mdf", "outerLamination": "hpl"})
        assert selector.estimated_cost() == 120 + 65

    def test_unknown_values_are_kept_but_free(self, catalog: Catalog) -> None:
        selector = MaterialSelector(catalog, {"primary": "marble"})
        assert selector.is_complete()
        assert selector.estimated_cost() == 0

    def test_clearing_a_lamination(self, catalog: Catalog) -> None:
        selector = MaterialSelector(catalog, MaterialSelection("mdf", inner_lamination="pvc"))
        selector.set("inner_lamination", None)
        assert selector.selection() == MaterialSelection("mdf")

    def test_unknown_field(self, catalog: Catalog) -> None:
        selector = MaterialSelector(catalog)
        with pytest.raises(ValueError, match="Unknown material field"):
            selector.set("colour", "red")
