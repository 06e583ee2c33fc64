"""Dimension validation service."""

from __future__ import annotations

import math
from typing import Any, Mapping

from ..catalog import DimensionDefaults
from ..errors import InvalidDimensionsError
from ..value_objects import Dimensions

__all__ = ["DIMENSION_FIELDS", "DimensionValidator", "normalize_dimension_field", "parse_number"]

#: Dimension field names in validation order.
DIMENSION_FIELDS: tuple[str, ...] = (
    "x",
    "y",
    "z",
    "skirting_height",
    "door_thickness",
    "back_thickness",
)

_FIELD_ALIASES: dict[str, str] = {
    "width": "x",
    "height": "y",
    "depth": "z",
    "skirtingHeight": "skirting_height",
    "doorThickness": "door_thickness",
    "backThickness": "back_thickness",
}


def normalize_dimension_field(name: str) -> str:
    """Map a camelCase or descriptive field name to its Dimensions attribute.

    Raises:
        ValueError: If the name is not a dimension field.
    """
    resolved = _FIELD_ALIASES.get(name, name)
    if resolved not in DIMENSION_FIELDS:
        raise ValueError(f"Unknown dimension field: {name}")
    return resolved


def parse_number(raw: Any) -> float:
    """Parse a raw value permissively; anything unparsable becomes 0."""
    if isinstance(raw, bool):
        return float(raw)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


class DimensionValidator:
    """Turns raw dimension input into a Dimensions value.

    Parsing is permissive: a field that cannot be read as a number counts as
    zero instead of rejecting the whole input. Auxiliary fields that are not
    supplied take the catalog defaults.
    """

    def __init__(self, defaults: DimensionDefaults | None = None) -> None:
        self.defaults = defaults or DimensionDefaults()

    def parse(self, raw: Mapping[str, Any]) -> dict[str, float]:
        """Parse raw input into a complete field -> number mapping.

        Args:
            raw: Field name to raw value; unknown names are ignored.

        Returns:
            Every Dimensions field, with catalog defaults for the auxiliary
            fields that were not supplied and 0 for anything unparsable.
        """
        values: dict[str, float] = {
            "x": 0.0,
            "y": 0.0,
            "z": 0.0,
            "skirting_height": self.defaults.skirting_height,
            "door_thickness": self.defaults.door_thickness,
            "back_thickness": self.defaults.back_thickness,
        }
        for name, raw_value in raw.items():
            try:
                field_name = normalize_dimension_field(name)
            except ValueError:
                continue
            values[field_name] = parse_number(raw_value)
        return values

    def failing_fields(self, raw: Mapping[str, Any]) -> list[str]:
        """Names of the fields that would make validate() fail."""
        values = self.parse(raw)
        failing = [name for name in ("x", "y", "z") if values[name] <= 0]
        failing.extend(name for name in DIMENSION_FIELDS[3:] if values[name] < 0)
        return failing

    def is_valid(self, raw: Mapping[str, Any]) -> bool:
        return not self.failing_fields(raw)

    def validate(self, raw: Mapping[str, Any]) -> Dimensions:
        """Validate raw input and build Dimensions.

        Args:
            raw: Field name to raw value. Accepts x/y/z or width/height/depth,
                and snake_case or camelCase names for the auxiliary fields.

        Returns:
            The validated Dimensions.

        Raises:
            InvalidDimensionsError: Naming every field that is out of range.
        """
        failing = self.failing_fields(raw)
        if failing:
            raise InvalidDimensionsError(failing)
        return Dimensions(**self.parse(raw))
