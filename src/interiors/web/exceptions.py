"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from interiors.application.config import ConfigError
from interiors.application.templates import TemplateNotFoundError
from interiors.domain.errors import (
    IncompleteConfigurationError,
    InvalidDimensionsError,
    QuotationError,
    UnknownOptionKeyError,
)
from interiors.infrastructure.remote import CollaboratorError


class UnknownFurnitureTypeError(Exception):
    """Raised when a path names a furniture type that does not exist."""

    def __init__(self, value: str, available: list[str]) -> None:
        self.value = value
        self.available = available
        super().__init__(f"Unknown furniture type: {value}. Available: {', '.join(available)}")


def _error(status_code: int, error: str, error_type: str, details: object = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "error_type": error_type, "details": details},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        details = [
            {"path": d.get("path"), "message": d.get("message")} for d in exc.details
        ] or None
        return _error(422, exc.message, exc.error_type, details)

    @app.exception_handler(InvalidDimensionsError)
    async def invalid_dimensions_handler(
        request: Request, exc: InvalidDimensionsError
    ) -> JSONResponse:
        return _error(422, str(exc), "invalid_dimensions", {"fields": list(exc.fields)})

    @app.exception_handler(UnknownOptionKeyError)
    async def unknown_option_handler(
        request: Request, exc: UnknownOptionKeyError
    ) -> JSONResponse:
        return _error(
            422,
            str(exc),
            "unknown_option",
            {"key": exc.key, "furniture_type": exc.furniture_type},
        )

    @app.exception_handler(IncompleteConfigurationError)
    async def incomplete_configuration_handler(
        request: Request, exc: IncompleteConfigurationError
    ) -> JSONResponse:
        return _error(422, str(exc), "incomplete_configuration", {"missing": list(exc.missing)})

    @app.exception_handler(QuotationError)
    async def quotation_error_handler(request: Request, exc: QuotationError) -> JSONResponse:
        return _error(422, str(exc), "quotation")

    @app.exception_handler(UnknownFurnitureTypeError)
    async def unknown_type_handler(
        request: Request, exc: UnknownFurnitureTypeError
    ) -> JSONResponse:
        return _error(
            404, str(exc), "not_found", {"value": exc.value, "available": exc.available}
        )

    @app.exception_handler(TemplateNotFoundError)
    async def template_not_found_handler(
        request: Request, exc: TemplateNotFoundError
    ) -> JSONResponse:
        return _error(404, f"Template not found: {exc.name}", "not_found")

    @app.exception_handler(CollaboratorError)
    async def collaborator_error_handler(
        request: Request, exc: CollaboratorError
    ) -> JSONResponse:
        return _error(502, exc.message, "collaborator", {"status_code": exc.status_code})
