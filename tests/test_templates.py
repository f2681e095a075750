from datetime import date

import pytest

from nextset.core.errors import NotFound
from nextset.services import exercises as exercise_service
from nextset.services import templates as template_service

DAY = date(2025, 9, 1)


@pytest.mark.asyncio
async def test_register_if_new_creates_exactly_one(db):
    created = await template_service.register_if_new(db, "Pull Up")
    await db.commit()

    assert created is not None
    assert created.name == "Pull Up"
    assert await template_service.register_if_new(db, "pull up") is None
    assert await template_service.register_if_new(db, "PULL UP") is None
    assert len(await template_service.list_templates(db)) == 1


@pytest.mark.asyncio
async def test_catalog_is_sorted_by_name(db):
    for name in ["Squat", "Bench Press", "Deadlift"]:
        await exercise_service.create_exercise(db, name=name, day=DAY)

    catalog = await template_service.list_templates(db)

    assert [t.name for t in catalog] == ["Bench Press", "Deadlift", "Squat"]


@pytest.mark.asyncio
async def test_deleting_catalog_entry_leaves_exercises(db):
    ex = await exercise_service.create_exercise(db, name="Bench Press", day=DAY)
    (entry,) = await template_service.list_templates(db)

    await template_service.delete_template(db, entry.id)

    assert await template_service.list_templates(db) == []
    assert await exercise_service.exercises_on_day(db, DAY) == [ex]


@pytest.mark.asyncio
async def test_delete_unknown_catalog_entry(db):
    with pytest.raises(NotFound):
        await template_service.delete_template(db, 42)
