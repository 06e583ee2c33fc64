"""Cost calculator backed by the remote pricing service."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from interiors.domain.entities import FurnitureConfiguration
from interiors.domain.services.cost_calculator import require_complete
from interiors.domain.value_objects import CostBreakdown
from interiors.infrastructure.remote.base import CollaboratorError, RemoteClient
from interiors.infrastructure.remote.payloads import CalculationRequest, CostsPayload

logger = logging.getLogger(__name__)


class RemoteCostCalculator(RemoteClient):
    """Prices items with POST /api/calculate/{type}.

    Satisfies the AsyncCostCalculator protocol, so a ConfigurationWorkflow
    awaits it while the item is being finalised. The service's total is
    ignored and recomputed from the returned parts.

    Example:
        >>> calculator = RemoteCostCalculator("http://localhost:5000", token="...")
        >>> workflow = ConfigurationWorkflow(catalog, calculator)
    """

    async def compute(self, config: FurnitureConfiguration) -> CostBreakdown:
        """Price a configuration remotely.

        Raises:
            IncompleteConfigurationError: Before any request, if a part is missing.
            CollaboratorError: If the service reports failure or returns no costs.
            httpx.HTTPError: On transport errors and non-2xx statuses.
        """
        require_complete(config)
        request = CalculationRequest.from_config(config)
        data = await self._call(
            "POST", f"/api/calculate/{config.furniture_type.value}", json=request.to_wire()
        )
        try:
            costs = CostsPayload.model_validate(data)
        except ValidationError as e:
            raise CollaboratorError(f"Pricing service returned invalid costs: {e}") from e
        if costs.total is not None and costs.total != (
            costs.material_cost + costs.hardware_cost + costs.labor_cost
        ):
            logger.debug(f"Ignoring inconsistent total {costs.total} from pricing service")
        return costs.to_breakdown()
