from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from nextset.core.db import get_db
from nextset.schemas.templates import ExerciseTemplateList, ExerciseTemplateOut
from nextset.services import templates as template_service

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=ExerciseTemplateList)
async def list_templates(
    db: AsyncSession = Depends(get_db),
):
    templates = await template_service.list_templates(db)
    return ExerciseTemplateList(
        items=[ExerciseTemplateOut(id=t.id, name=t.name) for t in templates]
    )


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(
    template_id: int,
    db: AsyncSession = Depends(get_db),
):
    await template_service.delete_template(db, template_id)
