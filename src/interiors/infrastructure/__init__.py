"""Infrastructure layer - output formatting and remote collaborators."""

from interiors.infrastructure.formatters import (
    JsonExporter,
    QuotationFormatter,
    format_amount,
    item_to_dict,
    quotation_to_dict,
)
from interiors.infrastructure.remote import (
    CollaboratorError,
    HttpIdentityProvider,
    HttpProjectRepository,
    RemoteCostCalculator,
)

__all__ = [
    "CollaboratorError",
    "HttpIdentityProvider",
    "HttpProjectRepository",
    "JsonExporter",
    "QuotationFormatter",
    "RemoteCostCalculator",
    "format_amount",
    "item_to_dict",
    "quotation_to_dict",
]
