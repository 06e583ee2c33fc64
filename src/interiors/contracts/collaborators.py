"""Protocols for the external collaborators of the quotation engine.

The engine never stores anything itself. A caller that wants to keep a
quotation hands the priced items to a ProjectRepository, and asks the same
collaborator for a rendered PDF. The IdentityProvider is only used to greet
the signed-in user.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from interiors.domain.entities import Client, FurnitureItem, Project, User


@runtime_checkable
class ProjectRepository(Protocol):
    """Record storage for projects and their furniture lists."""

    async def list_projects(self) -> list["Project"]:
        """Return every project visible to the caller."""
        ...

    async def get_project(self, project_id: str) -> "Project":
        """Fetch one project by identifier."""
        ...

    async def create_project(
        self, title: str, description: str, client: "Client"
    ) -> "Project":
        """Create a project for a client and return the stored record."""
        ...

    async def update_project(self, project_id: str, updates: Mapping[str, Any]) -> "Project":
        """Apply a partial update (e.g. totalAmount) and return the stored record."""
        ...

    async def save_furniture(
        self, project_id: str, items: Sequence["FurnitureItem"]
    ) -> None:
        """Persist the ordered furniture list of a quotation against a project."""
        ...

    async def render_pdf(self, project_id: str) -> bytes:
        """Render the project's quotation and return the PDF document."""
        ...


@runtime_checkable
class IdentityProvider(Protocol):
    """Source of the signed-in user."""

    async def current_user(self) -> "User":
        ...


__all__ = [
    "IdentityProvider",
    "ProjectRepository",
]
