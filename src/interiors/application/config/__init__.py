"""Configuration loading for quotation files and catalog files.

This package provides:
- Pydantic schemas for quotation files and catalog files
- Loaders that report file, JSON and schema problems as ConfigError
- Adapters from validated configuration to domain objects
- Semantic validation of quotation items against a catalog
- Merging of CLI overrides into a loaded quotation file
"""

from interiors.application.config.adapter import (
    config_to_catalog,
    config_to_catalog_data,
    config_to_labor_rates,
    load_catalog,
)
from interiors.application.config.loader import (
    ConfigError,
    load_catalog_config,
    load_catalog_config_from_dict,
    load_config,
    load_config_from_dict,
    load_default_catalog_config,
)
from interiors.application.config.merger import merge_config_with_cli
from interiors.application.config.schemas import (
    SUPPORTED_VERSIONS,
    CatalogConfiguration,
    DimensionsConfig,
    FurnitureItemConfig,
    ItemMaterialsConfig,
    PricingConfig,
    QuotationConfiguration,
)
from interiors.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CatalogConfiguration",
    "ConfigError",
    "DimensionsConfig",
    "FurnitureItemConfig",
    "ItemMaterialsConfig",
    "PricingConfig",
    "QuotationConfiguration",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_catalog",
    "config_to_catalog_data",
    "config_to_labor_rates",
    "load_catalog",
    "load_catalog_config",
    "load_catalog_config_from_dict",
    "load_config",
    "load_config_from_dict",
    "load_default_catalog_config",
    "merge_config_with_cli",
    "validate_config",
]
