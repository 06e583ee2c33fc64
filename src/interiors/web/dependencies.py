"""FastAPI dependency injection for quotation services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from interiors.application.factory import ServiceFactory, get_factory
from interiors.application.templates import TemplateManager
from interiors.domain import Catalog


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_catalog(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> Catalog:
    """Dependency for the shared, read-only catalog."""
    return factory.get_catalog()


def get_template_manager() -> TemplateManager:
    return TemplateManager()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
CatalogDep = Annotated[Catalog, Depends(get_catalog)]
TemplateManagerDep = Annotated[TemplateManager, Depends(get_template_manager)]
