"""Configuration merging utilities for CLI override support.

Precedence is: CLI args > config values > defaults. Only CLI arguments that
are not None override configuration values.
"""

from __future__ import annotations

from typing import Any

from interiors.application.config.loader import load_config_from_dict
from interiors.application.config.schemas import QuotationConfiguration


def merge_config_with_cli(
    config: QuotationConfiguration,
    *,
    tax_rate: float | None = None,
    project_id: str | None = None,
    labor_rate: float | None = None,
) -> QuotationConfiguration:
    """Merge CLI arguments with quotation file values.

    Args:
        config: The base QuotationConfiguration to merge with
        tax_rate: Override for tax_rate (if not None)
        project_id: Override for project_id (if not None)
        labor_rate: Override for pricing.default_labor_rate (if not None);
            per-type labor rates from the file are dropped so the override
            applies to every furniture type

    Returns:
        A new, revalidated QuotationConfiguration

    Raises:
        ConfigError: If an override fails validation (e.g. tax_rate above 1)

    Example:
        >>> merged = merge_config_with_cli(config, tax_rate=0.12)
        >>> merged.tax_rate
        0.12
    """
    data: dict[str, Any] = config.model_dump()
    if tax_rate is not None:
        data["tax_rate"] = tax_rate
    if project_id is not None:
        data["project_id"] = project_id
    if labor_rate is not None:
        data["pricing"] = {"labor_rates": {}, "default_labor_rate": labor_rate}
    return load_config_from_dict(data)
