"""Pydantic schemas for catalog files and quotation files.

Two documents are described here:

- CatalogConfiguration: the option tables (components and hardware per
  furniture type, shared materials, dimension defaults). The bundled
  default catalog and any alternate catalog file follow this schema.
- QuotationConfiguration: a list of furniture items to configure and price,
  with the tax rate and labor rates to use.

Field names are snake_case; quotation items also accept the camelCase names
used by the storage service (skirtingHeight, innerLamination, ...).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from interiors.domain.services.cost_calculator import DEFAULT_LABOR_RATES
from interiors.domain.services.quotation import DEFAULT_TAX_RATE
from interiors.domain.value_objects import FurnitureType, OptionKind

# Supported schema versions for catalog and quotation files
# Version 1.0: Initial schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


def _check_version(value: str) -> str:
    if value not in SUPPORTED_VERSIONS:
        supported = ", ".join(sorted(SUPPORTED_VERSIONS))
        raise ValueError(f"Unsupported schema version '{value}' (supported: {supported})")
    return value


# =============================================================================
# Catalog schema
# =============================================================================


class ComponentOptionConfig(BaseModel):
    """Component option entry.

    Counters need an explicit max. Toggles are bounded to {0, 1} and may use
    a boolean default.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = Field(..., min_length=1)
    label: str
    kind: OptionKind = OptionKind.COUNTER
    max: int | None = Field(default=None, ge=0)
    default: int | bool = 0

    @model_validator(mode="after")
    def check_bounds(self) -> "ComponentOptionConfig":
        if self.kind == OptionKind.COUNTER and self.max is None:
            raise ValueError(f"Counter component '{self.key}' requires max")
        if self.kind == OptionKind.TOGGLE and self.max not in (None, 1):
            raise ValueError(f"Toggle component '{self.key}' cannot set max other than 1")
        if not 0 <= self.resolved_default <= self.resolved_max:
            raise ValueError(
                f"Component '{self.key}' default {self.resolved_default} "
                f"outside [0, {self.resolved_max}]"
            )
        return self

    @property
    def resolved_max(self) -> int:
        return 1 if self.kind == OptionKind.TOGGLE else int(self.max or 0)

    @property
    def resolved_default(self) -> int:
        return int(self.default)


class HardwareOptionConfig(BaseModel):
    """Hardware option entry."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = Field(..., min_length=1)
    label: str
    unit_price: int = Field(..., ge=0)
    unit: str = "piece"
    max: int = Field(..., ge=0)


class PrimaryMaterialConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = Field(..., min_length=1)
    label: str
    description: str = ""
    price_per_area: int = Field(..., ge=0)


class LaminationConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = Field(..., min_length=1)
    label: str
    price_delta: int = Field(default=0, ge=0)


class MaterialCatalogConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    primary: list[PrimaryMaterialConfig] = Field(..., min_length=1)
    lamination: list[LaminationConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_keys(self) -> "MaterialCatalogConfig":
        for family, entries in (("primary", self.primary), ("lamination", self.lamination)):
            keys = [entry.key for entry in entries]
            if len(keys) != len(set(keys)):
                raise ValueError(f"Duplicate {family} material keys")
        return self


class DimensionDefaultsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    skirting_height: float = Field(default=4.0, ge=0)
    door_thickness: float = Field(default=0.75, ge=0)
    back_thickness: float = Field(default=0.5, ge=0)


class CatalogConfiguration(BaseModel):
    """Root model of a catalog file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: str = "1.0"
    dimension_defaults: DimensionDefaultsConfig = Field(default_factory=DimensionDefaultsConfig)
    components: dict[FurnitureType, list[ComponentOptionConfig]]
    hardware: dict[FurnitureType, list[HardwareOptionConfig]]
    materials: MaterialCatalogConfig

    _check_schema_version = field_validator("schema_version")(_check_version)

    @model_validator(mode="after")
    def check_tables(self) -> "CatalogConfiguration":
        for table_name, tables in (("components", self.components), ("hardware", self.hardware)):
            if FurnitureType.OTHER not in tables:
                raise ValueError(f"{table_name} must define a fallback table for 'other'")
            for furniture_type, entries in tables.items():
                keys = [entry.key for entry in entries]
                duplicates = sorted({key for key in keys if keys.count(key) > 1})
                if duplicates:
                    raise ValueError(
                        f"Duplicate {table_name} keys for '{furniture_type.value}': "
                        f"{', '.join(duplicates)}"
                    )
        return self


# =============================================================================
# Quotation schema
# =============================================================================


class _CamelModel(BaseModel):
    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)


class DimensionsConfig(_CamelModel):
    """Raw item dimensions.

    Values are checked by the dimension validator rather than by the schema,
    so that every out-of-range field can be reported together.
    """

    x: float = 0
    y: float = 0
    z: float = 0
    skirting_height: float | None = None
    door_thickness: float | None = None
    back_thickness: float | None = None

    def raw(self) -> dict[str, float]:
        """Field -> value for the fields that were supplied."""
        return self.model_dump(exclude_none=True)


class ItemMaterialsConfig(_CamelModel):
    primary: str = ""
    inner_lamination: str | None = None
    outer_lamination: str | None = None


class FurnitureItemConfig(_CamelModel):
    """One furniture item to run through the configuration workflow.

    Component keys that are not listed keep their catalog defaults;
    hardware keys that are not listed stay at zero.
    """

    type: FurnitureType
    dimensions: DimensionsConfig
    components: dict[str, int | bool] = Field(default_factory=dict)
    materials: ItemMaterialsConfig = Field(default_factory=ItemMaterialsConfig)
    hardware: dict[str, int] = Field(default_factory=dict)


class PricingConfig(_CamelModel):
    """Labor rates (per square foot of carcass surface) used for pricing."""

    labor_rates: dict[FurnitureType, float] = Field(
        default_factory=lambda: {t: float(rate) for t, rate in DEFAULT_LABOR_RATES.items()}
    )
    default_labor_rate: float = Field(default=35.0, ge=0)

    @field_validator("labor_rates")
    @classmethod
    def check_rates(cls, value: dict[FurnitureType, float]) -> dict[FurnitureType, float]:
        negative = [t.value for t, rate in value.items() if rate < 0]
        if negative:
            raise ValueError(f"Labor rates cannot be negative: {', '.join(negative)}")
        return value


class QuotationConfiguration(_CamelModel):
    """Root model of a quotation file."""

    schema_version: str = "1.0"
    project_id: str | None = None
    tax_rate: float = Field(default=DEFAULT_TAX_RATE, ge=0, le=1)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    catalog: str | None = Field(
        default=None, description="Path to an alternate catalog file"
    )
    items: list[FurnitureItemConfig] = Field(default_factory=list)

    _check_schema_version = field_validator("schema_version")(_check_version)


__all__ = [
    "SUPPORTED_VERSIONS",
    "CatalogConfiguration",
    "ComponentOptionConfig",
    "DimensionDefaultsConfig",
    "DimensionsConfig",
    "FurnitureItemConfig",
    "HardwareOptionConfig",
    "ItemMaterialsConfig",
    "LaminationConfig",
    "MaterialCatalogConfig",
    "PricingConfig",
    "PrimaryMaterialConfig",
    "QuotationConfiguration",
]
