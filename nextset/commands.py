"""User intents and the controller that carries them out.

Triggers (toolbar buttons, API calls) build a ``Command`` and hand it to
``dispatch``; nothing subscribes or listens.
"""
import datetime as dt
import logging
from enum import Enum

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from nextset.core.errors import InvalidInput
from nextset.models.exercise import Exercise
from nextset.models.workout import Workout
from nextset.services import exercises as exercise_service
from nextset.services import workouts as workout_service

logger = logging.getLogger(__name__)


class Intent(str, Enum):
    ADD_EXERCISE = "add_exercise"
    ADD_WORKOUT = "add_workout"
    CREATE_WORKOUT = "create_workout"


class Command(BaseModel):
    intent: Intent
    day: dt.date | None = None
    name: str | None = None
    # ADD_EXERCISE: catalog entry to reuse instead of a typed name
    template_id: int | None = None
    # ADD_EXERCISE: workout to attach to; ADD_WORKOUT: template to copy
    workout_id: int | None = None


async def _add_exercise(db: AsyncSession, command: Command) -> Exercise:
    if command.workout_id is not None:
        return await workout_service.add_exercise(
            db,
            command.workout_id,
            name=command.name,
            template_id=command.template_id,
            day=command.day,
        )
    return await exercise_service.create_exercise(
        db, name=command.name, template_id=command.template_id, day=command.day
    )


async def _add_workout(db: AsyncSession, command: Command) -> Workout:
    if command.workout_id is None:
        raise InvalidInput("add_workout needs the template workout_id")
    if command.day is None:
        raise InvalidInput("add_workout needs a day")
    return await workout_service.instantiate(db, command.workout_id, command.day)


async def _create_workout(db: AsyncSession, command: Command) -> Workout:
    return await workout_service.create_workout(db, command.name)


HANDLERS = {
    Intent.ADD_EXERCISE: _add_exercise,
    Intent.ADD_WORKOUT: _add_workout,
    Intent.CREATE_WORKOUT: _create_workout,
}


async def dispatch(db: AsyncSession, command: Command) -> Exercise | Workout:
    logger.info("Dispatching %s", command.intent.value)
    handler = HANDLERS[command.intent]
    return await handler(db, command)
