"""Pricing strategy protocols.

The cost calculator is the swappable policy of the quotation engine. A local
calculator prices synchronously; a calculator backed by a remote pricing
service returns an awaitable. The configuration workflow accepts either.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from interiors.domain.entities import FurnitureConfiguration
    from interiors.domain.value_objects import CostBreakdown


@runtime_checkable
class CostCalculator(Protocol):
    """Protocol for synchronous cost calculators.

    Example:
        class FixedCalculator:
            def compute(self, config: FurnitureConfiguration) -> CostBreakdown:
                return CostBreakdown.from_parts(100, 50, 25)
    """

    def compute(self, config: "FurnitureConfiguration") -> "CostBreakdown":
        """Price a complete furniture configuration.

        Args:
            config: Dimensions, components, materials and hardware of an item.

        Returns:
            CostBreakdown whose total is the sum of its parts.

        Raises:
            IncompleteConfigurationError: If a required part is missing.
        """
        ...


@runtime_checkable
class AsyncCostCalculator(Protocol):
    """Protocol for cost calculators that price through a remote service."""

    def compute(self, config: "FurnitureConfiguration") -> Awaitable["CostBreakdown"]:
        """Price a configuration; the result must be awaited."""
        ...


__all__ = [
    "AsyncCostCalculator",
    "CostCalculator",
]
