"""Catalog browsing endpoints."""

from fastapi import APIRouter

from interiors.domain import FurnitureType
from interiors.web.dependencies import CatalogDep
from interiors.web.exceptions import UnknownFurnitureTypeError
from interiors.web.schemas.responses import (
    ComponentOptionSchema,
    FurnitureOptionsSchema,
    FurnitureTypeListSchema,
    FurnitureTypeSchema,
    HardwareOptionSchema,
    LaminationSchema,
    MaterialCatalogSchema,
    PrimaryMaterialSchema,
)

router = APIRouter(prefix="/catalog", tags=["catalog"])


def _type_schema(furniture_type: FurnitureType) -> FurnitureTypeSchema:
    return FurnitureTypeSchema(value=furniture_type.value, label=furniture_type.label)


@router.get("", response_model=FurnitureTypeListSchema)
async def list_furniture_types() -> FurnitureTypeListSchema:
    """List the furniture types that can be configured."""
    return FurnitureTypeListSchema(types=[_type_schema(t) for t in FurnitureType])


@router.get("/materials", response_model=MaterialCatalogSchema)
async def list_materials(catalog: CatalogDep) -> MaterialCatalogSchema:
    """Materials and laminations shared by every furniture type."""
    materials = catalog.materials()
    return MaterialCatalogSchema(
        primary=[
            PrimaryMaterialSchema(
                key=m.key,
                label=m.label,
                description=m.description,
                price_per_area=m.price_per_area,
            )
            for m in materials.primary
        ],
        lamination=[
            LaminationSchema(key=m.key, label=m.label, price_delta=m.price_delta)
            for m in materials.lamination
        ],
    )


@router.get("/{furniture_type}", response_model=FurnitureOptionsSchema)
async def get_furniture_options(
    furniture_type: str,
    catalog: CatalogDep,
) -> FurnitureOptionsSchema:
    """Components, hardware and materials for one furniture type.

    Raises:
        UnknownFurnitureTypeError: If the type does not exist (handled as 404).
    """
    try:
        resolved = FurnitureType(furniture_type)
    except ValueError:
        raise UnknownFurnitureTypeError(furniture_type, [t.value for t in FurnitureType])

    return FurnitureOptionsSchema(
        type=_type_schema(resolved),
        components=[
            ComponentOptionSchema(
                key=c.key, label=c.label, kind=c.kind.value, max=c.max, default=c.default
            )
            for c in catalog.components_for(resolved)
        ],
        hardware=[
            HardwareOptionSchema(
                key=h.key, label=h.label, unit_price=h.unit_price, unit=h.unit, max=h.max
            )
            for h in catalog.hardware_for(resolved)
        ],
        materials=await list_materials(catalog),
    )
