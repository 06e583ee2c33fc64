"""Catalog of selectable components, hardware and materials.

The catalog is a read-only lookup from furniture type to the options that
can be chosen for it. Its tables are held by an immutable CatalogData object
that is built once (usually by interiors.application.config.load_catalog)
and passed to Catalog, so tests and alternate deployments can inject their
own tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .errors import UnknownOptionKeyError
from .value_objects import FurnitureType, MaterialSelection, OptionKind

#: Lamination key meaning "no lamination"; always priced at zero.
NO_LAMINATION = "none"


@dataclass(frozen=True)
class ComponentOption:
    """A structural component that can be added to a furniture item.

    Attributes:
        key: Identifier, unique within a furniture type.
        label: Display name.
        kind: COUNTER for a quantity, TOGGLE for present/absent.
        max: Highest allowed quantity (always 1 for toggles).
        default: Quantity preselected for a new item.
    """

    key: str
    label: str
    kind: OptionKind = OptionKind.COUNTER
    max: int = 1
    default: int = 0

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Component key must not be empty")
        if self.kind == OptionKind.TOGGLE and self.max != 1:
            raise ValueError(f"Toggle component '{self.key}' must have max 1")
        if self.max < 0:
            raise ValueError(f"Component '{self.key}' max cannot be negative")
        if not 0 <= self.default <= self.max:
            raise ValueError(
                f"Component '{self.key}' default {self.default} outside [0, {self.max}]"
            )

    @property
    def is_toggle(self) -> bool:
        return self.kind == OptionKind.TOGGLE


@dataclass(frozen=True)
class HardwareOption:
    """A purchasable hardware item with its unit price and limit."""

    key: str
    label: str
    unit_price: int
    unit: str
    max: int

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Hardware key must not be empty")
        if self.unit_price < 0:
            raise ValueError(f"Hardware '{self.key}' price cannot be negative")
        if self.max < 0:
            raise ValueError(f"Hardware '{self.key}' max cannot be negative")


@dataclass(frozen=True)
class PrimaryMaterial:
    """Carcass material priced per square foot."""

    key: str
    label: str
    price_per_area: int
    description: str = ""


@dataclass(frozen=True)
class Lamination:
    """Surface finish adding a per-square-foot price delta."""

    key: str
    label: str
    price_delta: int = 0


@dataclass(frozen=True)
class MaterialCatalog:
    """Materials shared by every furniture type."""

    primary: tuple[PrimaryMaterial, ...] = ()
    lamination: tuple[Lamination, ...] = ()


@dataclass(frozen=True)
class DimensionDefaults:
    """Default auxiliary dimensions in inches."""

    skirting_height: float = 4.0
    door_thickness: float = 0.75
    back_thickness: float = 0.5


@dataclass(frozen=True)
class CatalogData:
    """Immutable option tables backing a Catalog."""

    components: Mapping[FurnitureType, tuple[ComponentOption, ...]]
    hardware: Mapping[FurnitureType, tuple[HardwareOption, ...]]
    materials: MaterialCatalog = field(default_factory=MaterialCatalog)
    dimension_defaults: DimensionDefaults = field(default_factory=DimensionDefaults)

    def __post_init__(self) -> None:
        # Freeze the tables so a shared catalog cannot be mutated through them
        object.__setattr__(
            self,
            "components",
            MappingProxyType({t: tuple(opts) for t, opts in self.components.items()}),
        )
        object.__setattr__(
            self,
            "hardware",
            MappingProxyType({t: tuple(opts) for t, opts in self.hardware.items()}),
        )
        for table_name, tables in (("component", self.components), ("hardware", self.hardware)):
            for furniture_type, options in tables.items():
                keys = [option.key for option in options]
                if len(keys) != len(set(keys)):
                    raise ValueError(
                        f"Duplicate {table_name} keys for furniture type '{furniture_type.value}'"
                    )


class Catalog:
    """Read-only lookup of options per furniture type.

    Types without a dedicated table fall back to the OTHER table. Values that
    are not furniture types at all resolve to empty tables.

    Example:
        >>> catalog = Catalog(data)
        >>> [c.key for c in catalog.components_for(FurnitureType.WARDROBE)]
        ['doors', 'shelves', 'drawers', 'hangingRod', 'mirrorDoor', 'softClose']
    """

    def __init__(self, data: CatalogData) -> None:
        self._data = data
        self._primary = {m.key: m for m in data.materials.primary}
        self._lamination = {m.key: m for m in data.materials.lamination}

    @property
    def data(self) -> CatalogData:
        return self._data

    @property
    def dimension_defaults(self) -> DimensionDefaults:
        return self._data.dimension_defaults

    def components_for(self, furniture_type: FurnitureType | str) -> tuple[ComponentOption, ...]:
        """Component options for a furniture type."""
        return self._table(self._data.components, furniture_type)

    def hardware_for(self, furniture_type: FurnitureType | str) -> tuple[HardwareOption, ...]:
        """Hardware options for a furniture type."""
        return self._table(self._data.hardware, furniture_type)

    def materials(self) -> MaterialCatalog:
        """Materials available to every furniture type."""
        return self._data.materials

    def component(self, furniture_type: FurnitureType | str, key: str) -> ComponentOption:
        """Look up one component option.

        Args:
            furniture_type: Type whose table is searched (falls back to other).
            key: Option key.

        Returns:
            The matching option.

        Raises:
            UnknownOptionKeyError: If the key is not in the type's table.
        """
        for option in self.components_for(furniture_type):
            if option.key == key:
                return option
        raise UnknownOptionKeyError(key, _type_name(furniture_type))

    def hardware_item(self, furniture_type: FurnitureType | str, key: str) -> HardwareOption:
        """Look up one hardware option.

        Args:
            furniture_type: Type whose table is searched (falls back to other).
            key: Option key.

        Returns:
            The matching option.

        Raises:
            UnknownOptionKeyError: If the key is not in the type's table.
        """
        for option in self.hardware_for(furniture_type):
            if option.key == key:
                return option
        raise UnknownOptionKeyError(key, _type_name(furniture_type))

    def primary_material(self, key: str | None) -> PrimaryMaterial | None:
        return self._primary.get(key) if key else None

    def lamination(self, key: str | None) -> Lamination | None:
        return self._lamination.get(key) if key else None

    def material_rate(self, selection: MaterialSelection) -> int:
        """Price per square foot of a material selection.

        Unknown materials and the "none" lamination contribute zero.

        Args:
            selection: Primary material and optional laminations.

        Returns:
            Primary price plus both lamination deltas.
        """
        primary = self.primary_material(selection.primary)
        rate = primary.price_per_area if primary else 0
        for key in (selection.inner_lamination, selection.outer_lamination):
            if key and key != NO_LAMINATION:
                lamination = self.lamination(key)
                rate += lamination.price_delta if lamination else 0
        return rate

    def hardware_cost(
        self, furniture_type: FurnitureType | str, selection: Mapping[str, int]
    ) -> int:
        """Total price of a hardware selection.

        Args:
            furniture_type: Type whose hardware table supplies unit prices.
            selection: Key to quantity; unknown keys cost nothing.

        Returns:
            Sum of quantity x unit price.
        """
        prices = {option.key: option.unit_price for option in self.hardware_for(furniture_type)}
        return sum(prices.get(key, 0) * quantity for key, quantity in selection.items())

    def _table(self, tables: Mapping[FurnitureType, tuple], furniture_type: FurnitureType | str) -> tuple:
        try:
            resolved = FurnitureType(furniture_type)
        except ValueError:
            return ()
        if resolved in tables:
            return tables[resolved]
        return tables.get(FurnitureType.OTHER, ())


def _type_name(furniture_type: FurnitureType | str) -> str:
    return furniture_type.value if isinstance(furniture_type, FurnitureType) else str(furniture_type)


__all__ = [
    "NO_LAMINATION",
    "Catalog",
    "CatalogData",
    "ComponentOption",
    "DimensionDefaults",
    "HardwareOption",
    "Lamination",
    "MaterialCatalog",
    "PrimaryMaterial",
]
