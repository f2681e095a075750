from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from nextset.core.db import get_db
from nextset.schemas.exercises import exercise_out
from nextset.schemas.workouts import DayOut, workout_out
from nextset.services import exercises as exercise_service
from nextset.services import workouts as workout_service

router = APIRouter(prefix="/days", tags=["days"])


@router.get("/{day}", response_model=DayOut)
async def get_day(
    day: date,
    db: AsyncSession = Depends(get_db),
):
    exercises = await exercise_service.exercises_on_day(db, day)
    workouts = await workout_service.workouts_on_day(db, day)
    return DayOut(
        date=day,
        exercises=[exercise_out(e) for e in exercises],
        workouts=[workout_out(w) for w in workouts],
    )
