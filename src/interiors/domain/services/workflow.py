"""Step-gated configuration workflow for a single furniture item.

The workflow is an explicit finite-state machine:

    DIMENSIONS -> COMPONENTS -> MATERIALS -> HARDWARE -> COMPLETE -> DIMENSIONS

transition() is the pure transition function over (step, event). The
ConfigurationWorkflow class owns the step data (raw dimension input and the
three selectors), checks each step's completion gate before advancing, and
on leaving HARDWARE prices the item, emits it through on_item_complete and
starts over with cleared data.

Pricing is the only suspension point. While it is in flight the workflow is
busy: every further input, including another advance(), raises
WorkflowBusyError.
"""

from __future__ import annotations

import inspect
import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Mapping

from ..catalog import Catalog
from ..entities import FurnitureConfiguration, FurnitureItem
from ..errors import WorkflowBusyError, WorkflowStateError
from ..value_objects import Dimensions, FurnitureType
from .dimension_validator import DimensionValidator, normalize_dimension_field
from .selectors import ComponentSelector, HardwareSelector, MaterialSelector

if TYPE_CHECKING:
    from interiors.contracts.pricing import AsyncCostCalculator, CostCalculator

logger = logging.getLogger(__name__)

__all__ = [
    "ConfigurationWorkflow",
    "ItemCompleteCallback",
    "WorkflowEvent",
    "WorkflowStep",
    "transition",
]

ItemCompleteCallback = Callable[[FurnitureItem], None]


class WorkflowStep(str, Enum):
    """Steps of the configuration workflow, in order."""

    DIMENSIONS = "dimensions"
    COMPONENTS = "components"
    MATERIALS = "materials"
    HARDWARE = "hardware"
    COMPLETE = "complete"

    @property
    def number(self) -> int:
        """1-based position of the step."""
        return _STEP_ORDER.index(self) + 1

    @property
    def description(self) -> str:
        return _STEP_DESCRIPTIONS[self]


class WorkflowEvent(str, Enum):
    ADVANCE = "advance"
    RETREAT = "retreat"


_STEP_ORDER: tuple[WorkflowStep, ...] = (
    WorkflowStep.DIMENSIONS,
    WorkflowStep.COMPONENTS,
    WorkflowStep.MATERIALS,
    WorkflowStep.HARDWARE,
    WorkflowStep.COMPLETE,
)

_STEP_DESCRIPTIONS: dict[WorkflowStep, str] = {
    WorkflowStep.DIMENSIONS: "Enter furniture dimensions",
    WorkflowStep.COMPONENTS: "Select components",
    WorkflowStep.MATERIALS: "Choose materials",
    WorkflowStep.HARDWARE: "Select hardware",
    WorkflowStep.COMPLETE: "Item added to quotation",
}


def transition(step: WorkflowStep, event: WorkflowEvent) -> WorkflowStep:
    """Next step for an event.

    ADVANCE from COMPLETE wraps around to DIMENSIONS (a new item starts).
    RETREAT is defined for COMPONENTS, MATERIALS and HARDWARE only.

    Raises:
        WorkflowStateError: If the event is not valid in the given step.
    """
    index = _STEP_ORDER.index(step)
    if event == WorkflowEvent.ADVANCE:
        if step == WorkflowStep.COMPLETE:
            return WorkflowStep.DIMENSIONS
        return _STEP_ORDER[index + 1]
    if step in (WorkflowStep.DIMENSIONS, WorkflowStep.COMPLETE):
        raise WorkflowStateError(f"Cannot go back from the {step.value} step")
    return _STEP_ORDER[index - 1]


class ConfigurationWorkflow:
    """Guides one furniture item through dimensions, components, materials and hardware.

    Example:
        >>> workflow = ConfigurationWorkflow(catalog, calculator, on_item_complete=items.append)
        >>> workflow.set_dimensions({"x": 10, "y": 8, "z": 2})
        >>> await workflow.advance()
        True
        >>> workflow.current_state
        <WorkflowStep.COMPONENTS: 'components'>
    """

    def __init__(
        self,
        catalog: Catalog,
        calculator: "CostCalculator | AsyncCostCalculator",
        on_item_complete: ItemCompleteCallback | None = None,
        furniture_type: FurnitureType = FurnitureType.WARDROBE,
    ) -> None:
        self.catalog = catalog
        self.calculator = calculator
        self.on_item_complete = on_item_complete
        self._validator = DimensionValidator(catalog.dimension_defaults)
        self._furniture_type = FurnitureType(furniture_type)
        self._state = WorkflowStep.DIMENSIONS
        self._calculating = False
        self._last_item: FurnitureItem | None = None
        self._reset_step_data()

    # ------------------------------------------------------------------
    # State inspection
    # ------------------------------------------------------------------

    @property
    def current_state(self) -> WorkflowStep:
        return self._state

    @property
    def furniture_type(self) -> FurnitureType:
        return self._furniture_type

    @property
    def is_calculating(self) -> bool:
        """True while an item is being priced."""
        return self._calculating

    @property
    def dimensions(self) -> Dimensions | None:
        """Dimensions recorded when the dimensions step was last completed."""
        return self._dimensions

    @property
    def raw_dimensions(self) -> dict[str, Any]:
        return dict(self._raw_dimensions)

    @property
    def components(self) -> ComponentSelector:
        return self._components

    @property
    def materials(self) -> MaterialSelector:
        return self._materials

    @property
    def hardware(self) -> HardwareSelector:
        return self._hardware

    @property
    def last_item(self) -> FurnitureItem | None:
        """Most recently completed item, if any."""
        return self._last_item

    def is_step_complete(self, step: WorkflowStep) -> bool:
        """Whether a step's completion gate currently holds.

        Args:
            step: Step to check; COMPLETE never holds.

        Returns:
            True if advance() would leave that step.
        """
        if step == WorkflowStep.DIMENSIONS:
            return self._validator.is_valid(self._raw_dimensions)
        if step == WorkflowStep.COMPONENTS:
            return self._components.has_any_selection()
        if step == WorkflowStep.MATERIALS:
            return self._materials.is_complete()
        if step == WorkflowStep.HARDWARE:
            return self._hardware.has_any_selection()
        return False

    def configuration(self) -> FurnitureConfiguration:
        """Snapshot of the current step data as a FurnitureConfiguration."""
        return FurnitureConfiguration(
            furniture_type=self._furniture_type,
            dimensions=self._dimensions,
            components=self._components.selection(),
            materials=self._materials.selection(),
            hardware=self._hardware.selection(),
        )

    # ------------------------------------------------------------------
    # Step input
    # ------------------------------------------------------------------

    def set_furniture_type(self, furniture_type: FurnitureType | str) -> None:
        """Change the furniture type; only possible on the dimensions step.

        A real change discards components, materials and hardware chosen for
        the previous type.
        """
        self._require_step(WorkflowStep.DIMENSIONS, "change the furniture type")
        new_type = FurnitureType(furniture_type)
        if new_type == self._furniture_type:
            return
        logger.debug(
            f"Furniture type changed from {self._furniture_type.value} to "
            f"{new_type.value}; resetting selections"
        )
        self._furniture_type = new_type
        self._reset_selections()

    def set_dimension(self, field_name: str, value: Any) -> None:
        self._require_step(WorkflowStep.DIMENSIONS, "edit dimensions")
        self._raw_dimensions[normalize_dimension_field(field_name)] = value

    def set_dimensions(self, values: Mapping[str, Any]) -> None:
        for field_name, value in values.items():
            self.set_dimension(field_name, value)

    def set_component(self, key: str, quantity: Any) -> int:
        """Set a component quantity on the components step.

        Args:
            key: Component key for the current furniture type.
            quantity: Requested quantity, clamped to the catalog bounds.

        Returns:
            The quantity actually stored.

        Raises:
            WorkflowStateError: If the workflow is on another step.
            UnknownOptionKeyError: If the key is not in the catalog.
        """
        self._require_step(WorkflowStep.COMPONENTS, "edit components")
        return self._components.set(key, quantity)

    def toggle_component(self, key: str, on: bool) -> int:
        self._require_step(WorkflowStep.COMPONENTS, "edit components")
        return self._components.toggle(key, on)

    def set_material(self, field_name: str, value: str | None) -> None:
        self._require_step(WorkflowStep.MATERIALS, "edit materials")
        self._materials.set(field_name, value)

    def set_hardware(self, key: str, quantity: Any) -> int:
        """Set a hardware quantity on the hardware step; see set_component()."""
        self._require_step(WorkflowStep.HARDWARE, "edit hardware")
        return self._hardware.set(key, quantity)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def advance(self) -> bool:
        """Move to the next step if the current step is complete.

        From HARDWARE this prices the item, passes it to on_item_complete and
        starts a new item on the dimensions step. A failed pricing call
        propagates its exception and leaves the workflow on HARDWARE with its
        data untouched.

        Returns:
            True if the workflow moved, False if the step gate did not hold.

        Raises:
            WorkflowBusyError: If an item is already being priced.
        """
        self._ensure_idle()
        step = self._state
        if not self.is_step_complete(step):
            logger.debug(f"Step {step.value} is incomplete; staying put")
            return False

        if step == WorkflowStep.DIMENSIONS:
            self._dimensions = self._validator.validate(self._raw_dimensions)
        elif step == WorkflowStep.HARDWARE:
            await self._finalize()
            return True

        self._state = transition(step, WorkflowEvent.ADVANCE)
        logger.debug(f"Workflow advanced from {step.value} to {self._state.value}")
        return True

    def retreat(self) -> bool:
        """Go back one step, keeping everything entered so far.

        Returns:
            True if the workflow moved, False on the first step.

        Raises:
            WorkflowBusyError: If an item is being priced.
        """
        self._ensure_idle()
        try:
            previous = transition(self._state, WorkflowEvent.RETREAT)
        except WorkflowStateError:
            return False
        logger.debug(f"Workflow went back from {self._state.value} to {previous.value}")
        self._state = previous
        return True

    def reset(self) -> None:
        """Abandon the current item and start over on the dimensions step."""
        self._ensure_idle()
        self._state = WorkflowStep.DIMENSIONS
        self._reset_step_data()

    async def _finalize(self) -> None:
        config = self.configuration()
        self._calculating = True
        try:
            result = self.calculator.compute(config)
            if inspect.isawaitable(result):
                result = await result
        finally:
            self._calculating = False

        assert config.dimensions is not None and config.materials is not None
        item = FurnitureItem(
            furniture_type=config.furniture_type,
            dimensions=config.dimensions,
            components=config.components or {},
            materials=config.materials,
            hardware=config.hardware or {},
            costs=result,
        )
        self._state = transition(WorkflowStep.HARDWARE, WorkflowEvent.ADVANCE)
        self._last_item = item
        logger.info(f"Completed {item.furniture_type.value} item, total {item.costs.total}")
        try:
            if self.on_item_complete is not None:
                self.on_item_complete(item)
        finally:
            self._state = transition(self._state, WorkflowEvent.ADVANCE)
            self._reset_step_data()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ensure_idle(self) -> None:
        if self._calculating:
            raise WorkflowBusyError()

    def _require_step(self, step: WorkflowStep, action: str) -> None:
        self._ensure_idle()
        if self._state != step:
            raise WorkflowStateError(
                f"Cannot {action} on the {self._state.value} step (only on {step.value})"
            )

    def _reset_step_data(self) -> None:
        self._raw_dimensions: dict[str, Any] = {}
        self._dimensions: Dimensions | None = None
        self._reset_selections()

    def _reset_selections(self) -> None:
        self._components = ComponentSelector(self.catalog, self._furniture_type)
        self._materials = MaterialSelector(self.catalog)
        self._hardware = HardwareSelector(self.catalog, self._furniture_type)
