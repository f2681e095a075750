import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from nextset import rules
from nextset.core.db import save
from nextset.core.errors import NotFound
from nextset.models.exercise_template import ExerciseTemplate

logger = logging.getLogger(__name__)


async def list_templates(db: AsyncSession) -> list[ExerciseTemplate]:
    res = await db.execute(
        select(ExerciseTemplate).order_by(ExerciseTemplate.name.asc(), ExerciseTemplate.id.asc())
    )
    return list(res.scalars().all())


async def get_template(db: AsyncSession, template_id: int) -> ExerciseTemplate:
    template = await db.get(ExerciseTemplate, template_id)
    if not template:
        raise NotFound("Exercise template not found")
    return template


async def register_if_new(db: AsyncSession, name: str) -> ExerciseTemplate | None:
    """Add ``name`` to the catalog unless it is already there in any casing.

    The new entry is added to the session but not committed; it is saved
    together with the exercise that introduced the name.
    """
    templates = await list_templates(db)
    if not rules.needs_template(name, templates):
        return None

    template = ExerciseTemplate(name=rules.normalize_name(name))
    db.add(template)
    logger.info("Registered exercise template %r", template.name)
    return template


async def delete_template(db: AsyncSession, template_id: int) -> None:
    # Catalog entries are not linked to exercises, so nothing else changes
    template = await get_template(db, template_id)
    await db.delete(template)
    await save(db, "delete exercise template")
    logger.info("Deleted exercise template %s", template_id)
