"""Application layer - use cases and orchestration."""

from .commands import BuildQuotationCommand
from .dtos import QuotationOutput

__all__ = [
    "BuildQuotationCommand",
    "QuotationOutput",
]
