"""Wire models for the project storage and pricing services.

The services speak camelCase JSON (skirtingHeight, materialCost, ...) and
wrap every response in an envelope {success, data?, message?, error?}. These
models translate between that format and the domain entities.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from interiors.domain.entities import (
    Client,
    FurnitureConfiguration,
    FurnitureItem,
    Project,
    ProjectStatus,
    User,
    UserRole,
)
from interiors.domain.value_objects import CostBreakdown, FurnitureType, MaterialSelection


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict[str, Any]:
        """Serialize with camelCase keys, leaving out unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ApiEnvelope(WireModel):
    success: bool
    data: Any = None
    message: str | None = None
    error: str | None = None


class DimensionsPayload(WireModel):
    x: float
    y: float
    z: float
    skirting_height: float | None = None
    door_thickness: float | None = None
    back_thickness: float | None = None


class MaterialsPayload(WireModel):
    primary: str
    inner_lamination: str | None = None
    outer_lamination: str | None = None

    @classmethod
    def from_selection(cls, selection: MaterialSelection) -> "MaterialsPayload":
        return cls(
            primary=selection.primary,
            inner_lamination=selection.inner_lamination,
            outer_lamination=selection.outer_lamination,
        )


class CostsPayload(WireModel):
    material_cost: int = Field(ge=0)
    hardware_cost: int = Field(ge=0)
    labor_cost: int = Field(ge=0)
    total: int | None = None

    def to_breakdown(self) -> CostBreakdown:
        """Build a CostBreakdown; the total is recomputed from the parts."""
        return CostBreakdown.from_parts(self.material_cost, self.hardware_cost, self.labor_cost)


class CalculationRequest(WireModel):
    """Body of POST /api/calculate/{type}."""

    type: FurnitureType
    dimensions: DimensionsPayload
    components: dict[str, int]
    materials: MaterialsPayload
    hardware: dict[str, int]

    @classmethod
    def from_config(cls, config: FurnitureConfiguration) -> "CalculationRequest":
        assert config.dimensions is not None and config.materials is not None
        d = config.dimensions
        return cls(
            type=config.furniture_type,
            dimensions=DimensionsPayload(
                x=d.x,
                y=d.y,
                z=d.z,
                skirting_height=d.skirting_height,
                door_thickness=d.door_thickness,
                back_thickness=d.back_thickness,
            ),
            components=dict(config.components or {}),
            materials=MaterialsPayload.from_selection(config.materials),
            hardware=dict(config.hardware or {}),
        )


class FurnitureItemPayload(WireModel):
    """One element of the {"furniture": [...]} bulk save body."""

    id: str | None = None
    type: FurnitureType
    dimensions: DimensionsPayload
    components: dict[str, int]
    materials: MaterialsPayload
    hardware: dict[str, int]
    costs: CostsPayload

    @classmethod
    def from_item(cls, item: FurnitureItem) -> "FurnitureItemPayload":
        d = item.dimensions
        return cls(
            id=item.id,
            type=item.furniture_type,
            dimensions=DimensionsPayload(
                x=d.x,
                y=d.y,
                z=d.z,
                skirting_height=d.skirting_height,
                door_thickness=d.door_thickness,
                back_thickness=d.back_thickness,
            ),
            components=dict(item.components),
            materials=MaterialsPayload.from_selection(item.materials),
            hardware=dict(item.hardware),
            costs=CostsPayload(
                material_cost=item.costs.material_cost,
                hardware_cost=item.costs.hardware_cost,
                labor_cost=item.costs.labor_cost,
                total=item.costs.total,
            ),
        )


class ClientPayload(WireModel):
    id: str | None = None
    name: str
    email: str
    phone: str
    address: str

    @classmethod
    def from_client(cls, client: Client) -> "ClientPayload":
        return cls(
            id=client.id,
            name=client.name,
            email=client.email,
            phone=client.phone,
            address=client.address,
        )

    def to_client(self) -> Client:
        return Client(
            name=self.name,
            email=self.email,
            phone=self.phone,
            address=self.address,
            id=self.id,
        )


class ProjectPayload(WireModel):
    id: str
    title: str
    description: str = ""
    client: ClientPayload
    status: ProjectStatus = ProjectStatus.DRAFT
    total_amount: float = 0
    created_at: str | None = None
    updated_at: str | None = None

    def to_project(self) -> Project:
        return Project(
            id=self.id,
            title=self.title,
            description=self.description,
            client=self.client.to_client(),
            status=self.status,
            total_amount=self.total_amount,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class UserPayload(WireModel):
    id: str
    name: str
    email: str
    role: UserRole = UserRole.EMPLOYEE
    created_at: str | None = None

    def to_user(self) -> User:
        return User(
            id=self.id,
            name=self.name,
            email=self.email,
            role=self.role,
            created_at=self.created_at,
        )
