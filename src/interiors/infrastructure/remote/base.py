"""Shared plumbing for the HTTP collaborator clients."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from interiors.infrastructure.remote.payloads import ApiEnvelope

logger = logging.getLogger(__name__)


class CollaboratorError(Exception):
    """Raised when a collaborator answers with success: false or a malformed envelope.

    Attributes:
        message: Error text reported by the service.
        status_code: HTTP status of the response.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class RemoteClient:
    """Base for clients of the storage and pricing services.

    A shared httpx.AsyncClient may be injected; otherwise each request opens
    its own short-lived client. HTTP errors (connection failures, non-2xx
    statuses) propagate as httpx exceptions.

    Attributes:
        base_url: Service root, e.g. http://localhost:5000
        token: Bearer token sent in the Authorization header, if set.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        token: str | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._client = client

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _send(
        self, method: str, path: str, json: dict[str, Any] | None = None
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")
        if self._client is not None:
            response = await self._client.request(
                method, url, json=json, headers=self._headers(), timeout=self.timeout
            )
        else:
            async with httpx.AsyncClient() as client:
                response = await client.request(
                    method, url, json=json, headers=self._headers(), timeout=self.timeout
                )
        response.raise_for_status()
        return response

    async def _call(self, method: str, path: str, json: dict[str, Any] | None = None) -> Any:
        """Send a request and return the envelope's data.

        Raises:
            CollaboratorError: If the envelope reports failure or is malformed.
            httpx.HTTPError: On transport errors and non-2xx statuses.
        """
        response = await self._send(method, path, json)
        try:
            envelope = ApiEnvelope.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise CollaboratorError(
                f"Malformed response from {path}: {e}", response.status_code
            ) from e
        if not envelope.success:
            message = envelope.error or envelope.message or "Request failed"
            logger.warning(f"{method} {path} failed: {message}")
            raise CollaboratorError(message, response.status_code)
        return envelope.data
