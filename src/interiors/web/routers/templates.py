"""Template endpoints."""

import json

from fastapi import APIRouter

from interiors.application.templates import TEMPLATE_METADATA
from interiors.web.dependencies import TemplateManagerDep
from interiors.web.schemas.responses import (
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListSchema)
async def list_templates(manager: TemplateManagerDep) -> TemplateListSchema:
    """List the bundled sample quotation files."""
    return TemplateListSchema(
        templates=[
            TemplateListItemSchema(name=name, description=desc)
            for name, desc in manager.list_templates()
        ]
    )


@router.get("/{name}", response_model=TemplateContentSchema)
async def get_template(name: str, manager: TemplateManagerDep) -> TemplateContentSchema:
    """Content of one template; TemplateNotFoundError is handled as 404."""
    content = json.loads(manager.get_template(name))
    return TemplateContentSchema(
        name=name,
        description=TEMPLATE_METADATA.get(name, ""),
        content=content,
    )
