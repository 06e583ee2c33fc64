"""Pytest configuration and shared fixtures for quotation engine tests."""

from __future__ import annotations

from typing import Any

import pytest

from interiors.application.config import load_catalog
from interiors.domain import (
    AreaRateCostCalculator,
    Catalog,
    CatalogData,
    ComponentOption,
    ConfigurationWorkflow,
    FurnitureItem,
    FurnitureType,
    HardwareOption,
    Lamination,
    MaterialCatalog,
    OptionKind,
    PrimaryMaterial,
)

# pytest-httpx provides the httpx_mock fixture automatically


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Catalog fixtures
# =============================================================================


@pytest.fixture(scope="session")
def catalog() -> Catalog:
    """The bundled default catalog."""
    return load_catalog()


@pytest.fixture
def small_catalog() -> Catalog:
    """A hand-built catalog with one wardrobe table and a fallback table."""
    data = CatalogData(
        components={
            FurnitureType.WARDROBE: (
                ComponentOption("doors", "Doors", OptionKind.COUNTER, max=6, default=2),
                ComponentOption("shelves", "Shelves", OptionKind.COUNTER, max=20, default=0),
                ComponentOption("hangingRod", "Hanging Rod", OptionKind.TOGGLE, max=1, default=1),
            ),
            FurnitureType.OTHER: (
                ComponentOption("shelves", "Shelves", OptionKind.COUNTER, max=15, default=3),
            ),
        },
        hardware={
            FurnitureType.WARDROBE: (
                HardwareOption("hinges", "Hinges", unit_price=150, unit="pair", max=12),
                HardwareOption("handles", "Door Handles", unit_price=200, unit="piece", max=8),
            ),
            FurnitureType.OTHER: (
                HardwareOption("hinges", "Hinges", unit_price=150, unit="pair", max=8),
            ),
        },
        materials=MaterialCatalog(
            primary=(PrimaryMaterial("mdf", "MDF", price_per_area=120),),
            lamination=(
                Lamination("none", "No Lamination", price_delta=0),
                Lamination("pvc", "PVC Lamination", price_delta=45),
            ),
        ),
    )
    return Catalog(data)


# =============================================================================
# Workflow fixtures
# =============================================================================


@pytest.fixture
def completed_items() -> list[FurnitureItem]:
    """Sink for items emitted by a workflow's completion callback."""
    return []


@pytest.fixture
def workflow(catalog: Catalog, completed_items: list[FurnitureItem]) -> ConfigurationWorkflow:
    """A wardrobe workflow priced with the area-rate calculator."""
    return ConfigurationWorkflow(
        catalog,
        AreaRateCostCalculator(catalog),
        on_item_complete=completed_items.append,
    )


# =============================================================================
# Quotation file fixtures
# =============================================================================


@pytest.fixture
def wardrobe_item() -> dict[str, Any]:
    """A 10 x 8 x 2 ft MDF wardrobe with two doors, four shelves and four hinges.

    Surface area 232 sq ft: material 27,840 + hardware 600 + labor 8,120 = 36,560.
    """
    return {
        "type": "wardrobe",
        "dimensions": {"x": 10, "y": 8, "z": 2},
        "components": {"doors": 2, "shelves": 4},
        "materials": {"primary": "mdf"},
        "hardware": {"hinges": 4},
    }


@pytest.fixture
def quotation_data(wardrobe_item: dict[str, Any]) -> dict[str, Any]:
    return {"schema_version": "1.0", "items": [wardrobe_item]}
