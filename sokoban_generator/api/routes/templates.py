"""Room template catalogue API routes."""
from fastapi import APIRouter

from ...models.schemas import TemplateItem, TemplateListResponse
from ...models.templates import TEMPLATES, template_to_rows

router = APIRouter(prefix="/api", tags=["templates"])


@router.get("/templates", response_model=TemplateListResponse)
async def list_templates() -> TemplateListResponse:
    """List the room templates in catalogue order."""
    return TemplateListResponse(
        templates=[
            TemplateItem(index=index, rows=template_to_rows(template))
            for index, template in enumerate(TEMPLATES)
        ]
    )
