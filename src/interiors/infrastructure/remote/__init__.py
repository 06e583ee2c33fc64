"""HTTP clients for the pricing, project storage and identity services."""

from interiors.infrastructure.remote.base import CollaboratorError, RemoteClient
from interiors.infrastructure.remote.pricing_client import RemoteCostCalculator
from interiors.infrastructure.remote.project_client import (
    HttpIdentityProvider,
    HttpProjectRepository,
)

__all__ = [
    "CollaboratorError",
    "HttpIdentityProvider",
    "HttpProjectRepository",
    "RemoteClient",
    "RemoteCostCalculator",
]
