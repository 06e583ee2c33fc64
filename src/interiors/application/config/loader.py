"""Configuration file loader with comprehensive error handling.

This module loads and validates the two JSON documents the engine reads:
quotation files (items to price) and catalog files (option tables). File
system errors, JSON syntax errors and schema violations are all reported as
ConfigError with an error_type and, for schema violations, the JSON path of
every failing field.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from interiors.application.config.schemas import CatalogConfiguration, QuotationConfiguration

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

#: Package holding the bundled default catalog.
DATA_PACKAGE = "interiors.application.config.data"
DEFAULT_CATALOG_FILE = "default_catalog.json"


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Integer segments become list indices attached to the preceding key.

    Args:
        loc: Location tuple from a pydantic error (e.g. ("items", 0, "x")).

    Returns:
        Dotted path string such as "items[0].x".

    Examples:
        >>> _format_json_path(("items", 0, "dimensions", "x"))
        'items[0].dimensions.x'
        >>> _format_json_path(("tax_rate",))
        'tax_rate'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    """Extract structured error details from a Pydantic ValidationError.

    Args:
        error: The pydantic ValidationError to extract details from.

    Returns:
        One dict per failing field with path, message, value and error_type.
    """
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    return _parse_json(content, path)


def _parse_json(content: str, path: Path | None) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        where = f": {path}" if path else ""
        raise ConfigError(
            message=f"Invalid JSON in config file{where} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def _validate(model: type[M], data: Any, path: Path | None = None) -> M:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> QuotationConfiguration:
    """Load and validate a quotation file.

    Args:
        path: Path to the JSON quotation file.

    Returns:
        The validated QuotationConfiguration.

    Raises:
        ConfigError: If the file cannot be read, is not JSON, or does not match
            the schema. error_type tells which.

    Example:
        >>> try:
        ...     config = load_config(Path("living-room.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    config = _validate(QuotationConfiguration, _read_json(path), path)
    logger.debug(f"Loaded quotation file {path} with {len(config.items)} items")
    return config


def load_config_from_dict(data: dict[str, Any]) -> QuotationConfiguration:
    """Validate a quotation configuration supplied as a dictionary.

    Args:
        data: Parsed quotation document, e.g. a REST request body.

    Returns:
        The validated QuotationConfiguration.

    Raises:
        ConfigError: With error_type "validation" if data does not match the schema.
    """
    return _validate(QuotationConfiguration, data)


def load_catalog_config(path: Path) -> CatalogConfiguration:
    """Load and validate a catalog file.

    Args:
        path: Path to the JSON catalog file.

    Returns:
        The validated CatalogConfiguration.

    Raises:
        ConfigError: As for load_config().
    """
    return _validate(CatalogConfiguration, _read_json(path), path)


def load_catalog_config_from_dict(data: dict[str, Any]) -> CatalogConfiguration:
    return _validate(CatalogConfiguration, data)


@lru_cache(maxsize=1)
def load_default_catalog_config() -> CatalogConfiguration:
    """Read the catalog bundled with the package (parsed once per process)."""
    content = resources.files(DATA_PACKAGE).joinpath(DEFAULT_CATALOG_FILE).read_text(
        encoding="utf-8"
    )
    return _validate(CatalogConfiguration, _parse_json(content, None))
