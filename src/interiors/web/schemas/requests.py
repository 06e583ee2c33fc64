"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class QuotationRequest(BaseModel):
    """Request for pricing a quotation."""

    config: dict[str, Any] = Field(..., description="Quotation file content")


class ConfigValidateRequest(BaseModel):
    """Request for validating a quotation file."""

    config: dict[str, Any] = Field(..., description="Quotation file content")
