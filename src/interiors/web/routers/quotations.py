"""Quotation pricing endpoints."""

from fastapi import APIRouter

from interiors.application.config import ConfigError, load_config_from_dict
from interiors.infrastructure.formatters import quotation_to_dict
from interiors.web.dependencies import ServiceFactoryDep
from interiors.web.schemas.requests import QuotationRequest
from interiors.web.schemas.responses import QuotationResponseSchema

router = APIRouter(prefix="/quotations", tags=["quotations"])


@router.post("", response_model=QuotationResponseSchema)
async def create_quotation(
    request: QuotationRequest,
    factory: ServiceFactoryDep,
) -> QuotationResponseSchema:
    """Price every item of a quotation file.

    Items that fail a workflow step are listed in errors and left out of the
    totals; the response is still 200.

    Raises:
        ConfigError: If the body does not match the quotation schema (422).
    """
    config = load_config_from_dict(request.config)
    if config.catalog:
        raise ConfigError(
            message="Catalog files cannot be selected through the API",
            error_type="validation",
            details=[{"path": "catalog", "message": "Remove the catalog field"}],
        )

    command = factory.create_build_quotation_command(config)
    output = await command.execute_config(config)
    return QuotationResponseSchema.model_validate(
        {
            **quotation_to_dict(output.quotation),
            "is_valid": output.is_valid,
            "errors": output.errors,
        }
    )
