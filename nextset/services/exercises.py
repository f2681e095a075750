import datetime as dt
import logging

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from nextset import rules
from nextset.core.db import save
from nextset.core.errors import InvalidInput, NotFound
from nextset.models.exercise import Exercise
from nextset.models.workout import Workout
from nextset.services.templates import get_template, register_if_new

logger = logging.getLogger(__name__)


async def get_exercise(db: AsyncSession, exercise_id: int) -> Exercise:
    exercise = await db.get(Exercise, exercise_id)
    if not exercise:
        raise NotFound("Exercise not found")
    return exercise


async def list_exercises(db: AsyncSession) -> list[Exercise]:
    res = await db.execute(select(Exercise).order_by(Exercise.name.asc(), Exercise.id.asc()))
    return list(res.scalars().all())


async def exercises_on_day(db: AsyncSession, day: dt.date | dt.datetime) -> list[Exercise]:
    """Exercises dated on ``day`` directly or through their workout.

    Same predicate as ``rules.exercises_on_day``; the outer join is
    many-to-one so each exercise comes back once.
    """
    start, end = rules.day_bounds(day)
    res = await db.execute(
        select(Exercise)
        .outerjoin(Workout, Exercise.workout_id == Workout.id)
        .where(
            or_(
                and_(Exercise.date >= start, Exercise.date < end),
                and_(Workout.date >= start, Workout.date < end),
            )
        )
        .order_by(Exercise.name.asc(), Exercise.id.asc())
    )
    return list(res.scalars().all())


async def create_exercise(
    db: AsyncSession,
    *,
    name: str | None = None,
    template_id: int | None = None,
    day: dt.date | dt.datetime | None = None,
    workout: Workout | None = None,
) -> Exercise:
    """Create an exercise by typed name or from a catalog entry.

    A workout-owned exercise takes the workout's date (none for a template
    workout). Typed names are registered in the catalog when new.
    """
    if template_id is not None:
        template = await get_template(db, template_id)
        exercise_name = template.name
    else:
        exercise_name = rules.normalize_name(name)
        if not exercise_name:
            raise InvalidInput("Exercise name must not be blank")

    if day is not None:
        day = rules.start_of_day(day)
    if workout is not None:
        if day is not None and day != workout.date:
            raise InvalidInput("Exercise date must match its workout's date")
        day = workout.date

    if day is None and workout is None:
        # Would never be shown anywhere
        raise InvalidInput("Exercise needs a date or a workout")

    if template_id is None:
        await register_if_new(db, exercise_name)

    exercise = Exercise(name=exercise_name, date=day, workout=workout, sets=[])
    db.add(exercise)
    await save(db, "add exercise")
    logger.info("Created exercise %s %r on %s", exercise.id, exercise.name, day)
    return exercise


async def delete_exercise(db: AsyncSession, exercise_id: int) -> None:
    exercise = await get_exercise(db, exercise_id)

    exercise.date = None
    exercise.workout = None
    if rules.is_orphan(exercise):
        await db.delete(exercise)

    await save(db, "delete exercise")
    logger.info("Deleted exercise %s", exercise_id)
