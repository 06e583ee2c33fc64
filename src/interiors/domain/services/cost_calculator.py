"""Cost calculation strategies for configured furniture.

AreaRateCostCalculator is the default strategy: material and labor are priced
per square foot of carcass surface, hardware per unit. FlatRateCostCalculator
returns fixed amounts regardless of input and stands in where a real price
list is not wanted (demos, fixtures).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from ..catalog import Catalog
from ..entities import FurnitureConfiguration
from ..errors import IncompleteConfigurationError
from ..value_objects import CostBreakdown, FurnitureType

__all__ = [
    "DEFAULT_LABOR_RATES",
    "AreaRateCostCalculator",
    "FlatRateCostCalculator",
    "LaborRates",
    "require_complete",
]

#: Labor charged per square foot of carcass surface, by furniture type.
DEFAULT_LABOR_RATES: dict[FurnitureType, int] = {
    FurnitureType.WARDROBE: 35,
    FurnitureType.KITCHEN: 45,
    FurnitureType.TV_UNIT: 40,
    FurnitureType.STUDY_TABLE: 30,
    FurnitureType.SHOE_RACK: 30,
    FurnitureType.OTHER: 35,
}


def require_complete(config: FurnitureConfiguration) -> None:
    """Check that a configuration can be priced.

    Args:
        config: Configuration to check.

    Raises:
        IncompleteConfigurationError: Listing every missing part.
    """
    missing = config.missing_parts()
    if missing:
        raise IncompleteConfigurationError(missing)


@dataclass(frozen=True)
class LaborRates:
    """Labor rate per square foot for each furniture type."""

    rates: Mapping[FurnitureType, float] = field(default_factory=lambda: dict(DEFAULT_LABOR_RATES))
    default_rate: float = 35

    def __post_init__(self) -> None:
        if self.default_rate < 0 or any(rate < 0 for rate in self.rates.values()):
            raise ValueError("Labor rates cannot be negative")

    def rate_for(self, furniture_type: FurnitureType) -> float:
        return self.rates.get(furniture_type, self.default_rate)


class AreaRateCostCalculator:
    """Prices an item from its surface area, materials and hardware.

    - material cost = surface area x (primary price + lamination deltas)
    - hardware cost = sum of quantity x unit price
    - labor cost = surface area x labor rate for the furniture type

    Each part is rounded to whole currency units before the total is formed.
    """

    def __init__(self, catalog: Catalog, labor_rates: LaborRates | None = None) -> None:
        self.catalog = catalog
        self.labor_rates = labor_rates or LaborRates()

    def compute(self, config: FurnitureConfiguration) -> CostBreakdown:
        """Price a complete configuration.

        Args:
            config: Configuration with dimensions, components, materials and
                hardware set.

        Returns:
            CostBreakdown whose total is the sum of its three parts.

        Raises:
            IncompleteConfigurationError: If any part is missing.
        """
        require_complete(config)
        assert config.dimensions is not None
        assert config.materials is not None
        assert config.hardware is not None

        area = config.dimensions.surface_area
        material_cost = round(area * self.catalog.material_rate(config.materials))
        hardware_cost = self.catalog.hardware_cost(config.furniture_type, config.hardware)
        labor_cost = round(area * self.labor_rates.rate_for(config.furniture_type))
        return CostBreakdown.from_parts(material_cost, hardware_cost, labor_cost)


class FlatRateCostCalculator:
    """Fixed-price strategy that ignores the configuration's contents."""

    def __init__(
        self,
        material_cost: int = 15000,
        hardware_cost: int = 5000,
        labor_cost: int = 8000,
    ) -> None:
        self.breakdown = CostBreakdown.from_parts(material_cost, hardware_cost, labor_cost)

    def compute(self, config: FurnitureConfiguration) -> CostBreakdown:
        require_complete(config)
        return self.breakdown
