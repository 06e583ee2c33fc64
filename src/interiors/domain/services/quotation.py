"""Quotation aggregation service."""

from __future__ import annotations

import logging
import uuid
from typing import Iterable, Iterator

from ..entities import FurnitureItem, Quotation
from ..errors import IndexOutOfRangeError

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_TAX_RATE", "QuotationAggregator"]

#: GST applied to quotations, as a fraction.
DEFAULT_TAX_RATE = 0.18


def _check_rate(rate: float) -> float:
    if rate < 0:
        raise ValueError(f"Tax rate cannot be negative (got {rate})")
    return rate


class QuotationAggregator:
    """Ordered list of furniture items for one quotation.

    Totals are reductions over the current items and are recomputed on every
    call, so they always reflect the latest additions and removals.
    """

    def __init__(
        self,
        tax_rate: float = DEFAULT_TAX_RATE,
        items: Iterable[FurnitureItem] | None = None,
    ) -> None:
        self.tax_rate = _check_rate(tax_rate)
        self._items: list[FurnitureItem] = []
        for item in items or ():
            self.add_item(item)

    @property
    def items(self) -> tuple[FurnitureItem, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[FurnitureItem]:
        return iter(tuple(self._items))

    def add_item(self, item: FurnitureItem) -> FurnitureItem:
        """Append an item, giving it an identifier if it has none.

        Args:
            item: Priced item, usually emitted by a ConfigurationWorkflow.

        Returns:
            The stored item (a copy carrying the new identifier if one was
            assigned).

        Raises:
            ValueError: If the item's identifier is already in the quotation.
        """
        existing = {stored.id for stored in self._items}
        if item.id is None:
            item_id = uuid.uuid4().hex[:12]
            while item_id in existing:
                item_id = uuid.uuid4().hex[:12]
            item = item.with_id(item_id)
        elif item.id in existing:
            raise ValueError(f"Item id '{item.id}' is already in the quotation")
        self._items.append(item)
        logger.debug(f"Added {item.furniture_type.value} item {item.id} ({len(self._items)} items)")
        return item

    def remove_item(self, index: int) -> FurnitureItem:
        """Remove the item at a position.

        Args:
            index: Zero-based position in insertion order.

        Returns:
            The removed item.

        Raises:
            IndexOutOfRangeError: If index is not in [0, len).
        """
        if not 0 <= index < len(self._items):
            raise IndexOutOfRangeError(index, len(self._items))
        item = self._items.pop(index)
        logger.debug(f"Removed item {item.id} ({len(self._items)} items left)")
        return item

    def clear(self) -> None:
        self._items.clear()

    def subtotal(self) -> int:
        """Sum of the item totals."""
        return sum(item.costs.total for item in self._items)

    def tax(self, rate: float | None = None) -> float:
        """Tax on the subtotal.

        Args:
            rate: Tax rate as a fraction; defaults to the aggregator's tax rate.

        Returns:
            subtotal x rate, unrounded.

        Raises:
            ValueError: If rate is negative.
        """
        rate = self.tax_rate if rate is None else _check_rate(rate)
        return self.subtotal() * rate

    def grand_total(self, rate: float | None = None) -> float:
        """Subtotal plus tax."""
        return self.subtotal() + self.tax(rate)

    def to_quotation(
        self, project_id: str | None = None, rate: float | None = None
    ) -> Quotation:
        """Snapshot the current items and totals.

        Args:
            project_id: Project the quotation belongs to, if known.
            rate: Tax rate override as a fraction.

        Returns:
            A Quotation detached from later changes to the aggregator.
        """
        rate = self.tax_rate if rate is None else _check_rate(rate)
        subtotal = self.subtotal()
        tax = subtotal * rate
        return Quotation(
            items=self.items,
            subtotal=subtotal,
            tax=tax,
            grand_total=subtotal + tax,
            tax_rate=rate,
            project_id=project_id,
        )
