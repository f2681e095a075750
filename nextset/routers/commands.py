from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from nextset.commands import Command, dispatch
from nextset.core.db import get_db
from nextset.models.exercise import Exercise
from nextset.schemas.exercises import exercise_out
from nextset.schemas.workouts import workout_out

router = APIRouter(prefix="/commands", tags=["commands"])


@router.post("", status_code=201)
async def run_command(
    command: Command,
    db: AsyncSession = Depends(get_db),
):
    result = await dispatch(db, command)
    if isinstance(result, Exercise):
        return {"intent": command.intent, "exercise": exercise_out(result)}
    return {"intent": command.intent, "workout": workout_out(result)}
