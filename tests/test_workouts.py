import logging
from datetime import date, datetime

import pytest
from sqlalchemy import select

from nextset.core.errors import InvalidInput, NotFound
from nextset.models.exercise import Exercise
from nextset.models.exercise_set import ExerciseSet
from nextset.services import exercises as exercise_service
from nextset.services import sets as set_service
from nextset.services import templates as template_service
from nextset.services import workouts as workout_service

LEG_DAY = date(2025, 9, 5)


async def make_leg_day(db):
    template = await workout_service.create_workout(db, "Leg Day")
    await workout_service.add_exercise(db, template.id, name="Squat")
    await workout_service.add_exercise(db, template.id, name="Lunge")
    return template


@pytest.mark.asyncio
async def test_new_workout_is_a_listed_template(db):
    await workout_service.create_workout(db, "Push")
    await workout_service.create_workout(db, "Arms")

    templates = await workout_service.list_workout_templates(db)

    assert [w.name for w in templates] == ["Arms", "Push"]
    assert all(w.is_template for w in templates)


@pytest.mark.asyncio
async def test_template_exercises_have_no_date_and_register_names(db):
    template = await make_leg_day(db)

    assert sorted(e.name for e in template.exercises) == ["Lunge", "Squat"]
    assert all(e.date is None for e in template.exercises)
    catalog = await template_service.list_templates(db)
    assert [t.name for t in catalog] == ["Lunge", "Squat"]


@pytest.mark.asyncio
async def test_leg_day_instantiation_scenario(db):
    template = await make_leg_day(db)
    template_ids = sorted(e.id for e in template.exercises)

    workout = await workout_service.instantiate(db, template.id, LEG_DAY)

    assert workout.id != template.id
    assert workout.name == "Leg Day"
    assert workout.date == LEG_DAY
    assert sorted(e.name for e in workout.exercises) == ["Lunge", "Squat"]
    for ex in workout.exercises:
        assert ex.date == LEG_DAY
        assert ex.workout is workout
        assert ex.id not in template_ids
        assert ex.sets == []

    res = await db.execute(select(Exercise).where(Exercise.workout_id == template.id))
    stored = res.scalars().all()
    assert sorted(e.id for e in stored) == template_ids
    assert all(e.date is None for e in stored)
    assert template.date is None

    on_day = await exercise_service.exercises_on_day(db, LEG_DAY)
    assert [e.name for e in on_day] == ["Lunge", "Squat"]
    assert [w.id for w in await workout_service.workouts_on_day(db, LEG_DAY)] == [workout.id]
    assert [w.id for w in await workout_service.list_workout_templates(db)] == [template.id]


@pytest.mark.asyncio
async def test_scheduled_workout_cannot_be_instantiated(db):
    template = await make_leg_day(db)
    scheduled = await workout_service.instantiate(db, template.id, LEG_DAY)

    with pytest.raises(InvalidInput):
        await workout_service.instantiate(db, scheduled.id, date(2025, 9, 12))


@pytest.mark.asyncio
async def test_delete_workout_cascades_to_exercises_and_sets(db):
    template = await make_leg_day(db)
    workout = await workout_service.instantiate(db, template.id, LEG_DAY)
    squat = next(e for e in workout.exercises if e.name == "Squat")
    await set_service.add_set(db, squat.id, 225.0, 5)

    await workout_service.delete_workout(db, workout.id)

    with pytest.raises(NotFound):
        await workout_service.get_workout(db, workout.id)
    assert await exercise_service.exercises_on_day(db, LEG_DAY) == []
    res = await db.execute(select(ExerciseSet))
    assert res.scalars().all() == []
    # the template is a different workout and survives
    assert len((await workout_service.get_workout(db, template.id)).exercises) == 2


@pytest.mark.asyncio
async def test_remove_dateless_exercise_from_workout_deletes_it(db):
    template = await make_leg_day(db)
    lunge = next(e for e in template.exercises if e.name == "Lunge")

    survivor = await workout_service.remove_exercise(db, template.id, lunge.id)

    assert survivor is None
    assert [e.name for e in template.exercises] == ["Squat"]
    with pytest.raises(NotFound):
        await exercise_service.get_exercise(db, lunge.id)


@pytest.mark.asyncio
async def test_remove_dated_exercise_from_workout_keeps_it_standalone(db):
    template = await make_leg_day(db)
    workout = await workout_service.instantiate(db, template.id, LEG_DAY)
    squat = next(e for e in workout.exercises if e.name == "Squat")

    survivor = await workout_service.remove_exercise(db, workout.id, squat.id)

    assert survivor is squat
    assert squat.workout is None
    assert squat.date == LEG_DAY
    on_day = await exercise_service.exercises_on_day(db, LEG_DAY)
    assert squat in on_day
    assert [e.name for e in workout.exercises] == ["Lunge"]


@pytest.mark.asyncio
async def test_remove_exercise_not_in_workout_is_not_found(db):
    template = await make_leg_day(db)
    other = await workout_service.create_workout(db, "Push")
    squat = next(e for e in template.exercises if e.name == "Squat")

    with pytest.raises(NotFound):
        await workout_service.remove_exercise(db, other.id, squat.id)


@pytest.mark.asyncio
async def test_exercise_added_to_scheduled_workout_takes_its_date(db):
    template = await make_leg_day(db)
    workout = await workout_service.instantiate(db, template.id, LEG_DAY)

    calf = await workout_service.add_exercise(db, workout.id, name="Calf Raise")

    assert calf.date == LEG_DAY
    assert calf.workout is workout


@pytest.mark.asyncio
async def test_exercise_date_must_match_workout(db):
    template = await make_leg_day(db)
    workout = await workout_service.instantiate(db, template.id, LEG_DAY)

    with pytest.raises(InvalidInput):
        await exercise_service.create_exercise(
            db, name="Calf Raise", day=date(2025, 9, 6), workout=workout
        )


@pytest.mark.asyncio
async def test_rename_workout(db):
    workout = await workout_service.create_workout(db)
    assert workout.name is None

    await workout_service.rename_workout(db, workout.id, "  Pull Day ")

    assert (await workout_service.get_workout(db, workout.id)).name == "Pull Day"


@pytest.mark.asyncio
async def test_exercise_datetime_on_workout_day_is_accepted(db):
    template = await make_leg_day(db)
    workout = await workout_service.instantiate(db, template.id, LEG_DAY)

    calf = await workout_service.add_exercise(
        db, workout.id, name="Calf Raise", day=datetime(2025, 9, 5, 8, 0)
    )

    assert calf.date == LEG_DAY
    assert calf.workout is workout


@pytest.mark.asyncio
async def test_add_exercise_with_other_day_is_rejected(db):
    template = await make_leg_day(db)
    workout = await workout_service.instantiate(db, template.id, LEG_DAY)

    with pytest.raises(InvalidInput):
        await workout_service.add_exercise(db, workout.id, name="Calf Raise", day=date(2025, 9, 6))
    assert sorted(e.name for e in workout.exercises) == ["Lunge", "Squat"]


@pytest.mark.asyncio
async def test_rename_workout_is_logged(db, caplog):
    workout = await workout_service.create_workout(db, "Push")

    with caplog.at_level(logging.INFO, logger="nextset.services.workouts"):
        await workout_service.rename_workout(db, workout.id, "Push Day")

    assert any("Renamed workout" in r.getMessage() for r in caplog.records)
