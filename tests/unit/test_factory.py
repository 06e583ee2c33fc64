"""Unit tests for the service factory."""

import json
from pathlib import Path
from typing import Any

import pytest

from interiors.application.commands import BuildQuotationCommand
from interiors.application.config import load_config_from_dict
from interiors.application.factory import (
    ServiceFactory,
    get_factory,
    reset_factory,
    set_factory,
)
from interiors.domain import AreaRateCostCalculator, Catalog, FlatRateCostCalculator, FurnitureType
from interiors.infrastructure.formatters import JsonExporter, QuotationFormatter
from interiors.infrastructure.remote import (
    HttpIdentityProvider,
    HttpProjectRepository,
    RemoteCostCalculator,
)


@pytest.fixture(autouse=True)
def clean_factory():
    yield
    reset_factory()


class TestServiceFactory:
    def test_uses_injected_catalog(self, small_catalog: Catalog) -> None:
        factory = ServiceFactory(catalog=small_catalog)
        assert factory.get_catalog() is small_catalog
        assert isinstance(factory.get_cost_calculator(), AreaRateCostCalculator)

    def test_loads_bundled_catalog_lazily(self) -> None:
        factory = ServiceFactory()
        assert factory.catalog is None
        catalog = factory.get_catalog()
        assert factory.get_catalog() is catalog

    def test_command_from_config(self, quotation_data: dict[str, Any]) -> None:
        quotation_data["tax_rate"] = 0.05
        quotation_data["pricing"] = {"labor_rates": {}, "default_labor_rate": 10}
        config = load_config_from_dict(quotation_data)

        command = ServiceFactory().create_build_quotation_command(config)

        assert isinstance(command, BuildQuotationCommand)
        assert command.tax_rate == 0.05
        assert command.calculator.labor_rates.rate_for(FurnitureType.WARDROBE) == 10

    def test_command_uses_alternate_catalog(
        self, tmp_path: Path, quotation_data: dict[str, Any]
    ) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps(
                {
                    "components": {"other": [{"key": "shelves", "label": "S", "max": 3}]},
                    "hardware": {"other": []},
                    "materials": {"primary": [{"key": "pine", "label": "Pine", "price_per_area": 90}]},
                }
            )
        )
        quotation_data["catalog"] = str(path)
        command = ServiceFactory().create_build_quotation_command(
            load_config_from_dict(quotation_data)
        )
        assert command.catalog.primary_material("pine") is not None

    def test_explicit_calculator(self, quotation_data: dict[str, Any]) -> None:
        calculator = FlatRateCostCalculator()
        command = ServiceFactory().create_build_quotation_command(
            load_config_from_dict(quotation_data), calculator=calculator
        )
        assert command.calculator is calculator

    def test_output_services_are_cached(self, small_catalog: Catalog) -> None:
        factory = ServiceFactory(catalog=small_catalog)
        assert isinstance(factory.get_quotation_formatter(), QuotationFormatter)
        assert factory.get_quotation_formatter() is factory.get_quotation_formatter()
        assert isinstance(factory.get_json_exporter(), JsonExporter)

    def test_remote_services(self) -> None:
        factory = ServiceFactory()
        assert isinstance(
            factory.create_remote_calculator("http://api.test", token="t"), RemoteCostCalculator
        )
        assert isinstance(factory.create_project_repository("http://api.test"), HttpProjectRepository)
        assert isinstance(factory.create_identity_provider("http://api.test"), HttpIdentityProvider)


class TestDefaultFactory:
    def test_get_factory_is_shared(self) -> None:
        assert get_factory() is get_factory()

    def test_set_and_reset(self, small_catalog: Catalog) -> None:
        custom = ServiceFactory(catalog=small_catalog)
        set_factory(custom)
        assert get_factory() is custom
        reset_factory()
        assert get_factory() is not custom
