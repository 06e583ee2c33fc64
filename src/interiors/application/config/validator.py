"""Semantic checks for quotation files against a catalog.

Schema validation (pydantic) guarantees the shape of a quotation file. This
module checks what the schema cannot: that dimensions are in range, that
option keys exist in the catalog for the item's furniture type, and that each
item would pass every workflow step gate. Quantities above a catalog maximum
are only warnings because the selectors clamp them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from interiors.application.config.schemas import FurnitureItemConfig, QuotationConfiguration
from interiors.domain.catalog import NO_LAMINATION, Catalog
from interiors.domain.services.dimension_validator import DimensionValidator
from interiors.domain.services.selectors import coerce_quantity


@dataclass
class ValidationError:
    """A blocking problem; the item cannot be priced until it is fixed."""

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking concern; the item can still be priced."""

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 1 with errors, 2 with only warnings, else 0."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(ValidationWarning(path=path, message=message, suggestion=suggestion))
        return self


def validate_config(config: QuotationConfiguration, catalog: Catalog) -> ValidationResult:
    """Check every item of a quotation file against the catalog."""
    result = ValidationResult()
    if not config.items:
        result.add_warning("items", "Quotation has no items", "Add at least one furniture item")
    for index, item in enumerate(config.items):
        _check_item(result, f"items[{index}]", item, catalog)
    return result


def _check_item(
    result: ValidationResult, path: str, item: FurnitureItemConfig, catalog: Catalog
) -> None:
    validator = DimensionValidator(catalog.dimension_defaults)
    raw_dimensions = item.dimensions.raw()
    for name in validator.failing_fields(raw_dimensions):
        result.add_error(
            f"{path}.dimensions.{name}",
            "Dimension must be greater than zero" if name in ("x", "y", "z")
            else "Dimension cannot be negative",
            raw_dimensions.get(name),
        )

    components = {option.key: option for option in catalog.components_for(item.type)}
    quantities = {key: option.default for key, option in components.items()}
    for key, raw in item.components.items():
        option = components.get(key)
        if option is None:
            result.add_error(
                f"{path}.components.{key}",
                f"Unknown component for {item.type.value}",
                key,
            )
            continue
        quantity = coerce_quantity(raw)
        if quantity > option.max:
            result.add_warning(
                f"{path}.components.{key}",
                f"Quantity {quantity} exceeds the maximum of {option.max}",
                f"It will be reduced to {option.max}",
            )
        quantities[key] = max(0, min(quantity, option.max))
    if not any(quantities.values()):
        result.add_error(f"{path}.components", "At least one component must be selected")

    materials = item.materials
    if not materials.primary:
        result.add_error(f"{path}.materials.primary", "A primary material is required")
    elif catalog.primary_material(materials.primary) is None:
        result.add_warning(
            f"{path}.materials.primary",
            f"Unknown primary material '{materials.primary}'",
            "It will be priced at zero",
        )
    for name in ("inner_lamination", "outer_lamination"):
        key = getattr(materials, name)
        if key and key != NO_LAMINATION and catalog.lamination(key) is None:
            result.add_warning(
                f"{path}.materials.{name}",
                f"Unknown lamination '{key}'",
                "It will be priced at zero",
            )

    hardware = {option.key: option for option in catalog.hardware_for(item.type)}
    selected = 0
    for key, raw in item.hardware.items():
        option = hardware.get(key)
        if option is None:
            result.add_error(
                f"{path}.hardware.{key}",
                f"Unknown hardware for {item.type.value}",
                key,
            )
            continue
        quantity = coerce_quantity(raw)
        if quantity > option.max:
            result.add_warning(
                f"{path}.hardware.{key}",
                f"Quantity {quantity} exceeds the maximum of {option.max}",
                f"It will be reduced to {option.max}",
            )
        selected += max(0, min(quantity, option.max))
    if not selected:
        result.add_error(f"{path}.hardware", "At least one hardware item must be selected")
