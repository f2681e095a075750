import logging

from sqlalchemy.ext.asyncio import AsyncSession

from nextset import rules
from nextset.core.db import save
from nextset.core.errors import InvalidInput, NotFound
from nextset.models.exercise_set import ExerciseSet
from nextset.services.exercises import get_exercise

logger = logging.getLogger(__name__)


async def list_sets(db: AsyncSession, exercise_id: int) -> list[ExerciseSet]:
    exercise = await get_exercise(db, exercise_id)
    # Loaded in creation order; new sets are appended at the end
    return list(exercise.sets)


async def add_set(db: AsyncSession, exercise_id: int, weight: float, reps: int) -> ExerciseSet:
    if not rules.is_valid_set(weight, reps):
        raise InvalidInput("Weight and reps must both be greater than zero")

    exercise = await get_exercise(db, exercise_id)
    s = ExerciseSet(weight=weight, reps=reps)
    exercise.sets.append(s)

    await save(db, "add set")
    logger.info("Added set %s to exercise %s: %s x %s", s.id, exercise_id, weight, reps)
    return s


async def delete_set(db: AsyncSession, exercise_id: int, set_id: int) -> None:
    exercise = await get_exercise(db, exercise_id)
    s_obj = next((s for s in exercise.sets if s.id == set_id), None)
    if not s_obj:
        raise NotFound("Set not found")

    # delete-orphan removes the row; the exercise itself is untouched
    exercise.sets.remove(s_obj)
    await save(db, "delete set")
    logger.info("Deleted set %s from exercise %s", set_id, exercise_id)
