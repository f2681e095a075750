import datetime as dt
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from nextset import rules
from nextset.core.db import save
from nextset.core.errors import InvalidInput, NotFound
from nextset.models.exercise import Exercise
from nextset.models.workout import Workout
from nextset.services import exercises as exercise_service

logger = logging.getLogger(__name__)


async def get_workout(db: AsyncSession, workout_id: int) -> Workout:
    workout = await db.get(Workout, workout_id)
    if not workout:
        raise NotFound("Workout not found")
    return workout


async def list_workout_templates(db: AsyncSession) -> list[Workout]:
    res = await db.execute(
        select(Workout)
        .where(Workout.date.is_(None))
        .order_by(Workout.name.asc(), Workout.id.asc())
    )
    return list(res.scalars().all())


async def workouts_on_day(db: AsyncSession, day: dt.date | dt.datetime) -> list[Workout]:
    start, end = rules.day_bounds(day)
    res = await db.execute(
        select(Workout)
        .where(Workout.date >= start, Workout.date < end)
        .order_by(Workout.name.asc(), Workout.id.asc())
    )
    return list(res.scalars().all())


async def create_workout(db: AsyncSession, name: str | None = None) -> Workout:
    workout = Workout(name=rules.normalize_name(name) or None, date=None, exercises=[])
    db.add(workout)
    await save(db, "create workout")
    logger.info("Created workout template %s", workout.id)
    return workout


async def rename_workout(db: AsyncSession, workout_id: int, name: str | None) -> Workout:
    workout = await get_workout(db, workout_id)
    workout.name = rules.normalize_name(name) or None
    await save(db, "rename workout")
    logger.info("Renamed workout %s to %r", workout_id, workout.name)
    return workout


async def instantiate(db: AsyncSession, template_id: int, day: dt.date | dt.datetime) -> Workout:
    """Copy a template workout onto ``day``.

    The copy gets the template's name, the date, and one fresh exercise per
    template exercise stamped with the same date. The template is untouched.
    """
    template = await get_workout(db, template_id)
    if not template.is_template:
        raise InvalidInput("Only a workout without a date can be used as a template")

    if day is None:
        raise InvalidInput("A date is required to schedule a workout")

    day = rules.start_of_day(day)
    workout = Workout(name=template.name, date=day, exercises=[])
    for template_exercise in template.exercises:
        Exercise(name=template_exercise.name, date=day, workout=workout, sets=[])

    db.add(workout)
    await save(db, "add workout from template")
    logger.info(
        "Instantiated workout %s from template %s on %s with %d exercises",
        workout.id,
        template_id,
        day,
        len(workout.exercises),
    )
    return workout


async def delete_workout(db: AsyncSession, workout_id: int) -> None:
    workout = await get_workout(db, workout_id)

    # Owned exercises go regardless of their own date
    for exercise in list(workout.exercises):
        await db.delete(exercise)
    await db.delete(workout)

    await save(db, "delete workout")
    logger.info("Deleted workout %s", workout_id)


async def add_exercise(
    db: AsyncSession,
    workout_id: int,
    *,
    name: str | None = None,
    template_id: int | None = None,
    day: dt.date | dt.datetime | None = None,
) -> Exercise:
    workout = await get_workout(db, workout_id)
    return await exercise_service.create_exercise(
        db, name=name, template_id=template_id, day=day, workout=workout
    )


async def remove_exercise(db: AsyncSession, workout_id: int, exercise_id: int) -> Exercise | None:
    """Detach an exercise from its workout.

    Returns the surviving standalone exercise, or None when it had no date
    of its own and was deleted.
    """
    workout = await get_workout(db, workout_id)
    exercise = next((e for e in workout.exercises if e.id == exercise_id), None)
    if not exercise:
        raise NotFound("Exercise not found in workout")

    workout.exercises.remove(exercise)
    survivor = exercise
    if rules.is_orphan(exercise):
        await db.delete(exercise)
        survivor = None

    await save(db, "remove exercise from workout")
    logger.info("Removed exercise %s from workout %s (kept=%s)", exercise_id, workout_id, survivor is not None)
    return survivor
