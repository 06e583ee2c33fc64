"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from interiors.application.commands import BuildQuotationCommand
    from interiors.application.config.schemas import QuotationConfiguration
    from interiors.contracts.pricing import AsyncCostCalculator, CostCalculator
    from interiors.domain.catalog import Catalog
    from interiors.domain.services.cost_calculator import LaborRates
    from interiors.infrastructure.formatters import JsonExporter, QuotationFormatter
    from interiors.infrastructure.remote import (
        HttpIdentityProvider,
        HttpProjectRepository,
        RemoteCostCalculator,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation to support:
    - Dependency injection for testing (pass a prepared catalog)
    - Selecting an alternate catalog file
    - Lazy initialization of the catalog, which is parsed on first use

    Example:
        ```python
        factory = ServiceFactory()
        command = factory.create_build_quotation_command(config)
        output = await command.execute_config(config)
        print(factory.get_quotation_formatter().format(output.quotation))
        ```
    """

    catalog_path: str | None = None
    catalog: "Catalog | None" = None

    _quotation_formatter: "QuotationFormatter | None" = field(default=None, init=False, repr=False)
    _json_exporter: "JsonExporter | None" = field(default=None, init=False, repr=False)

    def get_catalog(self) -> "Catalog":
        """Get or load the catalog (bundled default unless catalog_path is set)."""
        if self.catalog is None:
            from interiors.application.config import load_catalog

            self.catalog = load_catalog(self.catalog_path)
        return self.catalog

    def get_cost_calculator(self, labor_rates: "LaborRates | None" = None) -> "CostCalculator":
        """Create the default area-rate cost calculator over the catalog."""
        from interiors.domain.services import AreaRateCostCalculator

        return AreaRateCostCalculator(self.get_catalog(), labor_rates)

    def create_build_quotation_command(
        self,
        config: "QuotationConfiguration | None" = None,
        calculator: "CostCalculator | AsyncCostCalculator | None" = None,
    ) -> "BuildQuotationCommand":
        """Create a BuildQuotationCommand for a quotation file.

        The file's catalog path, labor rates and tax rate are honoured. A
        calculator passed explicitly (e.g. a RemoteCostCalculator) replaces the
        local one.
        """
        from interiors.application.commands import BuildQuotationCommand
        from interiors.application.config import config_to_labor_rates, load_catalog
        from interiors.domain.services import AreaRateCostCalculator

        if config is None:
            return BuildQuotationCommand(
                self.get_catalog(), calculator or self.get_cost_calculator()
            )

        catalog = load_catalog(config.catalog) if config.catalog else self.get_catalog()
        if calculator is None:
            calculator = AreaRateCostCalculator(catalog, config_to_labor_rates(config.pricing))
        return BuildQuotationCommand(catalog, calculator, tax_rate=config.tax_rate)

    def get_quotation_formatter(self) -> "QuotationFormatter":
        if self._quotation_formatter is None:
            from interiors.infrastructure.formatters import QuotationFormatter

            self._quotation_formatter = QuotationFormatter(self.get_catalog())
        return self._quotation_formatter

    def get_json_exporter(self) -> "JsonExporter":
        if self._json_exporter is None:
            from interiors.infrastructure.formatters import JsonExporter

            self._json_exporter = JsonExporter()
        return self._json_exporter

    def create_remote_calculator(
        self, base_url: str, token: str | None = None
    ) -> "RemoteCostCalculator":
        from interiors.infrastructure.remote import RemoteCostCalculator

        return RemoteCostCalculator(base_url=base_url, token=token)

    def create_project_repository(
        self, base_url: str, token: str | None = None
    ) -> "HttpProjectRepository":
        from interiors.infrastructure.remote import HttpProjectRepository

        return HttpProjectRepository(base_url=base_url, token=token)

    def create_identity_provider(
        self, base_url: str, token: str | None = None
    ) -> "HttpIdentityProvider":
        from interiors.infrastructure.remote import HttpIdentityProvider

        return HttpIdentityProvider(base_url=base_url, token=token)


# Global default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
