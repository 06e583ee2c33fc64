"""Value objects for furniture configuration and pricing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FurnitureType(str, Enum):
    """Kinds of furniture that can be configured.

    The value selects which catalog table applies to an item.
    """

    WARDROBE = "wardrobe"
    KITCHEN = "kitchen"
    TV_UNIT = "tv_unit"
    STUDY_TABLE = "study_table"
    SHOE_RACK = "shoe_rack"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Human-readable name of the furniture type."""
        return _FURNITURE_LABELS[self]


_FURNITURE_LABELS: dict[FurnitureType, str] = {
    FurnitureType.WARDROBE: "Wardrobe",
    FurnitureType.KITCHEN: "Kitchen Cabinet",
    FurnitureType.TV_UNIT: "TV Unit",
    FurnitureType.STUDY_TABLE: "Study Table",
    FurnitureType.SHOE_RACK: "Shoe Rack",
    FurnitureType.OTHER: "Other",
}


class OptionKind(str, Enum):
    """How a component option is chosen."""

    COUNTER = "counter"
    TOGGLE = "toggle"


@dataclass(frozen=True)
class Dimensions:
    """Immutable furniture dimensions.

    Width, height and depth are in feet. Skirting height and panel
    thicknesses are in inches.
    """

    x: float
    y: float
    z: float
    skirting_height: float = 4.0
    door_thickness: float = 0.75
    back_thickness: float = 0.5

    def __post_init__(self) -> None:
        if self.x <= 0 or self.y <= 0 or self.z <= 0:
            raise ValueError("Width, height and depth must be positive")
        if self.skirting_height < 0 or self.door_thickness < 0 or self.back_thickness < 0:
            raise ValueError("Skirting height and thicknesses cannot be negative")

    @property
    def width(self) -> float:
        return self.x

    @property
    def height(self) -> float:
        return self.y

    @property
    def depth(self) -> float:
        return self.z

    @property
    def front_area(self) -> float:
        """Front face area (width x height) in square feet."""
        return self.x * self.y

    @property
    def surface_area(self) -> float:
        """Total carcass surface area in square feet.

        Counts every face of the box: front and back, both sides, top and
        bottom.
        """
        return 2 * (self.x * self.y + self.x * self.z + self.y * self.z)


@dataclass(frozen=True)
class MaterialSelection:
    """Chosen primary material and optional inner/outer laminations."""

    primary: str
    inner_lamination: str | None = None
    outer_lamination: str | None = None

    @property
    def is_complete(self) -> bool:
        """A selection is usable once a primary material is chosen."""
        return bool(self.primary)


@dataclass(frozen=True)
class CostBreakdown:
    """Cost of one furniture item split into material, hardware and labor.

    Amounts are whole currency units. The total is always the exact sum of
    the three parts; use from_parts() to have it computed.
    """

    material_cost: int
    hardware_cost: int
    labor_cost: int
    total: int

    def __post_init__(self) -> None:
        if self.material_cost < 0 or self.hardware_cost < 0 or self.labor_cost < 0:
            raise ValueError("Cost components cannot be negative")
        if self.total != self.material_cost + self.hardware_cost + self.labor_cost:
            raise ValueError("Total must equal material + hardware + labor cost")

    @classmethod
    def from_parts(
        cls, material_cost: int, hardware_cost: int, labor_cost: int
    ) -> CostBreakdown:
        """Build a breakdown whose total is the sum of the given parts."""
        return cls(
            material_cost=material_cost,
            hardware_cost=hardware_cost,
            labor_cost=labor_cost,
            total=material_cost + hardware_cost + labor_cost,
        )


__all__ = [
    "CostBreakdown",
    "Dimensions",
    "FurnitureType",
    "MaterialSelection",
    "OptionKind",
]
