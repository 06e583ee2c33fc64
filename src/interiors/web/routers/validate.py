"""Quotation file validation endpoints."""

from fastapi import APIRouter

from interiors.application.config import load_config_from_dict, validate_config
from interiors.web.dependencies import CatalogDep
from interiors.web.schemas.requests import ConfigValidateRequest
from interiors.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_quotation(
    request: ConfigValidateRequest,
    catalog: CatalogDep,
) -> ValidationResultSchema:
    """Validate a quotation file against the catalog without pricing it.

    Schema violations are returned as a 422 error response; semantic problems
    (unknown keys, empty steps) are returned in the result.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config, catalog)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
    )
