"""Pydantic schemas for the REST API."""

from interiors.web.schemas.requests import ConfigValidateRequest, QuotationRequest
from interiors.web.schemas.responses import (
    ErrorResponseSchema,
    FurnitureItemSchema,
    FurnitureOptionsSchema,
    FurnitureTypeListSchema,
    QuotationResponseSchema,
    TemplateContentSchema,
    TemplateListSchema,
    ValidationResultSchema,
)

__all__ = [
    "ConfigValidateRequest",
    "ErrorResponseSchema",
    "FurnitureItemSchema",
    "FurnitureOptionsSchema",
    "FurnitureTypeListSchema",
    "QuotationRequest",
    "QuotationResponseSchema",
    "TemplateContentSchema",
    "TemplateListSchema",
    "ValidationResultSchema",
]
