"""Pydantic response schemas for the REST API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class DimensionsSchema(BaseModel):
    x: float = Field(..., description="Width in feet")
    y: float = Field(..., description="Height in feet")
    z: float = Field(..., description="Depth in feet")
    skirting_height: float = Field(..., description="Skirting height in inches")
    door_thickness: float = Field(..., description="Door thickness in inches")
    back_thickness: float = Field(..., description="Back panel thickness in inches")


class MaterialsSchema(BaseModel):
    primary: str
    inner_lamination: str | None = None
    outer_lamination: str | None = None


class CostBreakdownSchema(BaseModel):
    material_cost: int
    hardware_cost: int
    labor_cost: int
    total: int


class FurnitureItemSchema(BaseModel):
    """Priced furniture item."""

    id: str | None = Field(default=None, description="Item identifier")
    type: str = Field(..., description="Furniture type")
    dimensions: DimensionsSchema
    components: dict[str, int] = Field(..., description="Selected components (quantity > 0)")
    materials: MaterialsSchema
    hardware: dict[str, int] = Field(..., description="Selected hardware (quantity > 0)")
    costs: CostBreakdownSchema


class QuotationResponseSchema(BaseModel):
    """Response for quotation pricing."""

    is_valid: bool = Field(..., description="Whether every item was priced")
    errors: list[str] = Field(default_factory=list, description="Items that could not be priced")
    project_id: str | None = None
    items: list[FurnitureItemSchema] = Field(default_factory=list)
    subtotal: int = Field(..., description="Sum of item totals")
    tax: float = Field(..., description="Tax on the subtotal")
    grand_total: float = Field(..., description="Subtotal plus tax")
    tax_rate: float = Field(..., description="Tax rate as a fraction")
    generated_at: datetime
    valid_until: datetime


class ComponentOptionSchema(BaseModel):
    key: str
    label: str
    kind: str = Field(..., description="counter or toggle")
    max: int
    default: int


class HardwareOptionSchema(BaseModel):
    key: str
    label: str
    unit_price: int
    unit: str
    max: int


class PrimaryMaterialSchema(BaseModel):
    key: str
    label: str
    description: str
    price_per_area: int


class LaminationSchema(BaseModel):
    key: str
    label: str
    price_delta: int


class MaterialCatalogSchema(BaseModel):
    primary: list[PrimaryMaterialSchema]
    lamination: list[LaminationSchema]


class FurnitureTypeSchema(BaseModel):
    value: str
    label: str


class FurnitureTypeListSchema(BaseModel):
    types: list[FurnitureTypeSchema]


class FurnitureOptionsSchema(BaseModel):
    """Options available for one furniture type."""

    type: FurnitureTypeSchema
    components: list[ComponentOptionSchema]
    hardware: list[HardwareOptionSchema]
    materials: MaterialCatalogSchema


class ValidationResultSchema(BaseModel):
    """Response for quotation file validation."""

    is_valid: bool = Field(..., description="Whether the file can be priced")
    errors: list[dict[str, Any]] = Field(default_factory=list, description="Validation errors")
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class TemplateListItemSchema(BaseModel):
    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")


class TemplateListSchema(BaseModel):
    templates: list[TemplateListItemSchema] = Field(..., description="Available templates")


class TemplateContentSchema(BaseModel):
    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")
    content: dict[str, Any] = Field(..., description="Quotation file content")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
