"""Bundled sample quotation files."""

from interiors.application.templates.manager import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
)

__all__ = ["TEMPLATE_METADATA", "TemplateManager", "TemplateNotFoundError"]
