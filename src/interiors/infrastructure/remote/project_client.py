"""HTTP clients for the project storage and identity services."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from interiors.domain.entities import Client, FurnitureItem, Project, User
from interiors.infrastructure.remote.base import CollaboratorError, RemoteClient
from interiors.infrastructure.remote.payloads import (
    ClientPayload,
    FurnitureItemPayload,
    ProjectPayload,
    UserPayload,
)

logger = logging.getLogger(__name__)


class HttpProjectRepository(RemoteClient):
    """ProjectRepository over the storage service's REST routes.

    Routes:
        GET  /api/projects
        POST /api/projects
        GET  /api/projects/{id}
        PUT  /api/projects/{id}
        POST /api/projects/{id}/furniture/bulk
        POST /api/projects/{id}/generate-pdf
    """

    async def list_projects(self) -> list[Project]:
        data = await self._call("GET", "/api/projects")
        return [ProjectPayload.model_validate(entry).to_project() for entry in data or []]

    async def get_project(self, project_id: str) -> Project:
        data = await self._call("GET", f"/api/projects/{project_id}")
        return ProjectPayload.model_validate(data).to_project()

    async def create_project(self, title: str, description: str, client: Client) -> Project:
        body = {
            "title": title,
            "description": description,
            "client": ClientPayload.from_client(client).to_wire(),
        }
        data = await self._call("POST", "/api/projects", json=body)
        project = ProjectPayload.model_validate(data).to_project()
        logger.info(f"Created project {project.id} ({project.title})")
        return project

    async def update_project(self, project_id: str, updates: Mapping[str, Any]) -> Project:
        """Apply a partial update; keys use the service's camelCase names."""
        data = await self._call("PUT", f"/api/projects/{project_id}", json=dict(updates))
        return ProjectPayload.model_validate(data).to_project()

    async def save_furniture(self, project_id: str, items: Sequence[FurnitureItem]) -> None:
        body = {"furniture": [FurnitureItemPayload.from_item(item).to_wire() for item in items]}
        await self._call("POST", f"/api/projects/{project_id}/furniture/bulk", json=body)
        logger.info(f"Saved {len(items)} furniture items to project {project_id}")

    async def render_pdf(self, project_id: str) -> bytes:
        """Return the rendered quotation PDF.

        The body is the document itself, not an envelope.

        Raises:
            CollaboratorError: If the service answers with an empty body.
            httpx.HTTPError: On transport errors and non-2xx statuses.
        """
        response = await self._send("POST", f"/api/projects/{project_id}/generate-pdf", json={})
        if not response.content:
            raise CollaboratorError(
                f"Empty PDF returned for project {project_id}", response.status_code
            )
        return response.content


class HttpIdentityProvider(RemoteClient):
    """IdentityProvider over GET /auth/me."""

    async def current_user(self) -> User:
        data = await self._call("GET", "/auth/me")
        return UserPayload.model_validate(data).to_user()
