"""Contracts module - protocols for cross-layer communication.

This module provides:
- Pricing strategy protocols consumed by the configuration workflow
- Protocols for the external record-storage and identity collaborators

By depending on protocols rather than concrete implementations, layers remain
loosely coupled and testable.

Example:
    ```python
    from interiors.contracts import CostCalculator, ProjectRepository

    async def save(repository: ProjectRepository, project_id: str, items) -> None:
        await repository.save_furniture(project_id, items)
    ```
"""

from .collaborators import (
    IdentityProvider as IdentityProvider,
    ProjectRepository as ProjectRepository,
)
from .pricing import (
    AsyncCostCalculator as AsyncCostCalculator,
    CostCalculator as CostCalculator,
)
