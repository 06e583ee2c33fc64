"""Stateful selectors holding one category of user choice.

ComponentSelector and HardwareSelector hold key -> quantity maps bounded by
the catalog; MaterialSelector holds the primary material and laminations.
Quantities are clamped to [0, max] on every mutation, including when the
selector is seeded from externally supplied data.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Mapping, TypeVar

from ..catalog import Catalog, ComponentOption, HardwareOption
from ..errors import UnknownOptionKeyError
from ..value_objects import FurnitureType, MaterialSelection
from .dimension_validator import parse_number

logger = logging.getLogger(__name__)

O = TypeVar("O", ComponentOption, HardwareOption)

MATERIAL_FIELDS: tuple[str, ...] = ("primary", "inner_lamination", "outer_lamination")

_MATERIAL_ALIASES: dict[str, str] = {
    "innerLamination": "inner_lamination",
    "outerLamination": "outer_lamination",
}


def coerce_quantity(raw: Any) -> int:
    """Read a raw quantity as an integer.

    Args:
        raw: Number or numeric text from a form or file.

    Returns:
        The truncated integer; unparsable input counts as 0.
    """
    return int(parse_number(raw))


class OptionSelector(Generic[O]):
    """Base selector for catalog-bounded quantities.

    Args:
        catalog: Catalog supplying the option table.
        furniture_type: Type whose table is active.
        initial: Optional starting quantities; unknown keys are dropped.
    """

    def __init__(
        self,
        catalog: Catalog,
        furniture_type: FurnitureType,
        initial: Mapping[str, Any] | None = None,
    ) -> None:
        self.catalog = catalog
        self.furniture_type = furniture_type
        self._options: dict[str, O] = {option.key: option for option in self._load_options()}
        initial = dict(initial or {})

        unknown = sorted(set(initial) - set(self._options))
        if unknown:
            logger.debug(
                f"Dropping {type(self).__name__} keys not in the "
                f"{furniture_type.value} catalog: {', '.join(unknown)}"
            )

        self._quantities: dict[str, int] = {
            key: self._clamp(option, self._initial_quantity(option, initial))
            for key, option in self._options.items()
        }

    def _load_options(self) -> tuple[O, ...]:
        raise NotImplementedError

    def _initial_quantity(self, option: O, initial: Mapping[str, Any]) -> Any:
        raise NotImplementedError

    @staticmethod
    def _clamp(option: O, raw: Any) -> int:
        return max(0, min(coerce_quantity(raw), option.max))

    @property
    def options(self) -> tuple[O, ...]:
        return tuple(self._options.values())

    def option(self, key: str) -> O:
        """Catalog entry for a key.

        Args:
            key: Option key, e.g. "doors".

        Returns:
            The ComponentOption or HardwareOption for the key.

        Raises:
            UnknownOptionKeyError: If the key is not in the active catalog.
        """
        try:
            return self._options[key]
        except KeyError:
            raise UnknownOptionKeyError(key, self.furniture_type.value) from None

    def set(self, key: str, raw_quantity: Any) -> int:
        """Set a quantity, clamped to the catalog bounds.

        Args:
            key: Option key.
            raw_quantity: Requested quantity; text is parsed, junk counts as 0.

        Returns:
            The quantity actually stored.

        Raises:
            UnknownOptionKeyError: If the key is not in the active catalog.
        """
        option = self.option(key)
        quantity = self._clamp(option, raw_quantity)
        self._quantities[key] = quantity
        return quantity

    def increment(self, key: str) -> int:
        """Add one to a quantity, stopping at the catalog maximum.

        Args:
            key: Option key.

        Returns:
            The quantity actually stored.

        Raises:
            UnknownOptionKeyError: If the key is not in the active catalog.
        """
        return self.set(key, self.quantity(key) + 1)

    def decrement(self, key: str) -> int:
        """Subtract one from a quantity, stopping at zero.

        Args:
            key: Option key.

        Returns:
            The quantity actually stored.
        """
        return self.set(key, self.quantity(key) - 1)

    def quantity(self, key: str) -> int:
        """Current quantity for a key.

        Args:
            key: Option key.

        Returns:
            The stored quantity.

        Raises:
            UnknownOptionKeyError: If the key is not in the active catalog.
        """
        self.option(key)
        return self._quantities[key]

    def has_any_selection(self) -> bool:
        """True when at least one quantity is above zero."""
        return any(quantity > 0 for quantity in self._quantities.values())

    def selection(self) -> dict[str, int]:
        """Copy of the full key -> quantity map."""
        return dict(self._quantities)

    def selected(self) -> dict[str, int]:
        """Only the keys with a quantity above zero."""
        return {key: qty for key, qty in self._quantities.items() if qty > 0}


class ComponentSelector(OptionSelector[ComponentOption]):
    """Selects structural components; new selectors start at catalog defaults."""

    def _load_options(self) -> tuple[ComponentOption, ...]:
        return self.catalog.components_for(self.furniture_type)

    def _initial_quantity(self, option: ComponentOption, initial: Mapping[str, Any]) -> Any:
        return initial[option.key] if option.key in initial else option.default

    def toggle(self, key: str, on: bool) -> int:
        """Switch a toggle component on or off.

        Raises:
            UnknownOptionKeyError: If the key is not in the active catalog.
            ValueError: If the component is a counter.
        """
        option = self.option(key)
        if not option.is_toggle:
            raise ValueError(f"Component '{key}' is a counter, not a toggle")
        return self.set(key, 1 if on else 0)


class HardwareSelector(OptionSelector[HardwareOption]):
    """Selects hardware; new selectors start at zero for every item."""

    def _load_options(self) -> tuple[HardwareOption, ...]:
        return self.catalog.hardware_for(self.furniture_type)

    def _initial_quantity(self, option: HardwareOption, initial: Mapping[str, Any]) -> Any:
        return initial.get(option.key) or 0

    def total_cost(self) -> int:
        """Price the current hardware selection.

        Returns:
            Sum of quantity x unit price, in whole currency units.
        """
        return self.catalog.hardware_cost(self.furniture_type, self._quantities)


class MaterialSelector:
    """Holds the primary material and the optional inner/outer laminations.

    Values are replaced unconditionally; a value missing from the catalog is
    kept but priced at zero.
    """

    def __init__(
        self,
        catalog: Catalog,
        initial: MaterialSelection | Mapping[str, Any] | None = None,
    ) -> None:
        self.catalog = catalog
        self._values: dict[str, str] = {name: "" for name in MATERIAL_FIELDS}
        if isinstance(initial, MaterialSelection):
            initial = {
                "primary": initial.primary,
                "inner_lamination": initial.inner_lamination,
                "outer_lamination": initial.outer_lamination,
            }
        for name, value in (initial or {}).items():
            self.set(name, value)

    @staticmethod
    def _field(name: str) -> str:
        resolved = _MATERIAL_ALIASES.get(name, name)
        if resolved not in MATERIAL_FIELDS:
            raise ValueError(f"Unknown material field: {name}")
        return resolved

    def set(self, field_name: str, value: str | None) -> None:
        """Replace one material choice.

        Args:
            field_name: primary, inner_lamination or outer_lamination
                (camelCase aliases accepted).
            value: Catalog key; None or "" clears the choice.

        Raises:
            ValueError: If field_name is not a material field.
        """
        self._values[self._field(field_name)] = value or ""

    def get(self, field_name: str) -> str:
        return self._values[self._field(field_name)]

    @property
    def primary(self) -> str:
        return self._values["primary"]

    def is_complete(self) -> bool:
        """A primary material is required; laminations are optional."""
        return bool(self._values["primary"])

    def estimated_cost(self) -> int:
        """Price per square foot of the current choices."""
        return self.catalog.material_rate(self.selection())

    def selection(self) -> MaterialSelection:
        return MaterialSelection(
            primary=self._values["primary"],
            inner_lamination=self._values["inner_lamination"] or None,
            outer_lamination=self._values["outer_lamination"] or None,
        )


__all__ = [
    "MATERIAL_FIELDS",
    "ComponentSelector",
    "HardwareSelector",
    "MaterialSelector",
    "OptionSelector",
    "coerce_quantity",
]
