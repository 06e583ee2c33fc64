"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from interiors.domain.entities import Quotation


@dataclass
class QuotationOutput:
    """Output DTO of a quotation build.

    Attributes:
        quotation: Quotation over the items that were priced successfully.
        errors: One message per item that could not be priced, prefixed with
            the item's position (e.g. "items[1]: no hardware selected").
    """

    quotation: Quotation
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if every item was priced."""
        return len(self.errors) == 0
