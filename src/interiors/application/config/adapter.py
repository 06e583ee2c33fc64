"""Adapters from configuration schemas to domain objects."""

from __future__ import annotations

import logging
from pathlib import Path

from interiors.application.config.loader import load_catalog_config, load_default_catalog_config
from interiors.application.config.schemas import CatalogConfiguration, PricingConfig
from interiors.domain.catalog import (
    Catalog,
    CatalogData,
    ComponentOption,
    DimensionDefaults,
    HardwareOption,
    Lamination,
    MaterialCatalog,
    PrimaryMaterial,
)
from interiors.domain.services.cost_calculator import LaborRates

logger = logging.getLogger(__name__)


def config_to_catalog_data(config: CatalogConfiguration) -> CatalogData:
    """Convert a validated catalog file into immutable catalog tables."""
    components = {
        furniture_type: tuple(
            ComponentOption(
                key=entry.key,
                label=entry.label,
                kind=entry.kind,
                max=entry.resolved_max,
                default=entry.resolved_default,
            )
            for entry in entries
        )
        for furniture_type, entries in config.components.items()
    }
    hardware = {
        furniture_type: tuple(
            HardwareOption(
                key=entry.key,
                label=entry.label,
                unit_price=entry.unit_price,
                unit=entry.unit,
                max=entry.max,
            )
            for entry in entries
        )
        for furniture_type, entries in config.hardware.items()
    }
    materials = MaterialCatalog(
        primary=tuple(
            PrimaryMaterial(
                key=m.key,
                label=m.label,
                price_per_area=m.price_per_area,
                description=m.description,
            )
            for m in config.materials.primary
        ),
        lamination=tuple(
            Lamination(key=m.key, label=m.label, price_delta=m.price_delta)
            for m in config.materials.lamination
        ),
    )
    defaults = config.dimension_defaults
    return CatalogData(
        components=components,
        hardware=hardware,
        materials=materials,
        dimension_defaults=DimensionDefaults(
            skirting_height=defaults.skirting_height,
            door_thickness=defaults.door_thickness,
            back_thickness=defaults.back_thickness,
        ),
    )


def config_to_catalog(config: CatalogConfiguration) -> Catalog:
    return Catalog(config_to_catalog_data(config))


def config_to_labor_rates(config: PricingConfig) -> LaborRates:
    return LaborRates(rates=dict(config.labor_rates), default_rate=config.default_labor_rate)


def load_catalog(path: Path | str | None = None) -> Catalog:
    """Build a Catalog from a catalog file, or from the bundled default.

    Raises:
        ConfigError: If the catalog file cannot be loaded or validated.
    """
    if path is None:
        return config_to_catalog(load_default_catalog_config())
    logger.debug(f"Loading catalog from {path}")
    return config_to_catalog(load_catalog_config(Path(path)))
