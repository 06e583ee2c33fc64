"""Application commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from interiors.application.dtos import QuotationOutput
from interiors.domain.catalog import Catalog
from interiors.domain.errors import QuotationError
from interiors.domain.services import (
    DEFAULT_TAX_RATE,
    ConfigurationWorkflow,
    DimensionValidator,
    QuotationAggregator,
    WorkflowStep,
)

if TYPE_CHECKING:
    from interiors.application.config.schemas import FurnitureItemConfig, QuotationConfiguration
    from interiors.contracts.pricing import AsyncCostCalculator, CostCalculator

logger = logging.getLogger(__name__)


class BuildQuotationCommand:
    """Command to price a list of furniture items into a quotation.

    Each item is driven through its own ConfigurationWorkflow exactly as an
    interactive user would: dimensions, components, materials and hardware
    are entered on their step and the workflow is advanced. Completed items
    go to a QuotationAggregator through the workflow's completion callback.

    Items that fail a step gate or a catalog lookup are reported in the
    output's errors and left out of the quotation; the remaining items are
    still priced.
    """

    def __init__(
        self,
        catalog: Catalog,
        calculator: "CostCalculator | AsyncCostCalculator",
        tax_rate: float = DEFAULT_TAX_RATE,
    ) -> None:
        self.catalog = catalog
        self.calculator = calculator
        self.tax_rate = tax_rate

    async def execute(
        self,
        items: Sequence["FurnitureItemConfig"],
        project_id: str | None = None,
    ) -> QuotationOutput:
        """Price every item and aggregate the results.

        Args:
            items: Items as described in a quotation file.
            project_id: Project the quotation belongs to, if any.

        Returns:
            QuotationOutput with the quotation and one error per failed item.
        """
        aggregator = QuotationAggregator(tax_rate=self.tax_rate)
        errors: list[str] = []

        for index, item in enumerate(items):
            workflow = ConfigurationWorkflow(
                self.catalog,
                self.calculator,
                on_item_complete=aggregator.add_item,
                furniture_type=item.type,
            )
            try:
                problem = await self._run_item(workflow, item)
            except QuotationError as e:
                problem = str(e)
            if problem is not None:
                logger.warning(f"Skipping items[{index}] ({item.type.value}): {problem}")
                errors.append(f"items[{index}]: {problem}")

        return QuotationOutput(
            quotation=aggregator.to_quotation(project_id=project_id),
            errors=errors,
        )

    async def execute_config(self, config: "QuotationConfiguration") -> QuotationOutput:
        """Price the items of a loaded quotation file."""
        return await self.execute(config.items, project_id=config.project_id)

    async def _run_item(
        self, workflow: ConfigurationWorkflow, item: "FurnitureItemConfig"
    ) -> str | None:
        """Drive one item to completion; returns a message if a gate fails."""
        raw_dimensions = item.dimensions.raw()
        workflow.set_dimensions(raw_dimensions)
        if not await workflow.advance():
            failing = DimensionValidator(self.catalog.dimension_defaults).failing_fields(
                raw_dimensions
            )
            return f"dimensions out of range: {', '.join(failing)}"

        for key, quantity in item.components.items():
            workflow.set_component(key, quantity)
        if not await workflow.advance():
            return "no components selected"

        workflow.set_material("primary", item.materials.primary)
        workflow.set_material("inner_lamination", item.materials.inner_lamination)
        workflow.set_material("outer_lamination", item.materials.outer_lamination)
        if not await workflow.advance():
            return "a primary material is required"

        for key, quantity in item.hardware.items():
            workflow.set_hardware(key, quantity)
        if not await workflow.advance():
            return "no hardware selected"

        assert workflow.current_state == WorkflowStep.DIMENSIONS
        return None
