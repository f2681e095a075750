from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from nextset.core.db import get_db
from nextset.schemas.exercises import AddSetIn, CreateExerciseIn, ExerciseOut, SetOut, exercise_out, set_out
from nextset.services import exercises as exercise_service
from nextset.services import sets as set_service
from nextset.services import workouts as workout_service

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.post("", response_model=ExerciseOut, status_code=201)
async def create_exercise(
    payload: CreateExerciseIn,
    db: AsyncSession = Depends(get_db),
):
    if payload.workout_id is not None:
        ex = await workout_service.add_exercise(
            db,
            payload.workout_id,
            name=payload.name,
            template_id=payload.template_id,
            day=payload.date,
        )
    else:
        ex = await exercise_service.create_exercise(
            db, name=payload.name, template_id=payload.template_id, day=payload.date
        )
    return exercise_out(ex)


@router.get("/{exercise_id}", response_model=ExerciseOut)
async def get_exercise(
    exercise_id: int,
    db: AsyncSession = Depends(get_db),
):
    ex = await exercise_service.get_exercise(db, exercise_id)
    return exercise_out(ex)


@router.delete("/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_exercise(
    exercise_id: int,
    db: AsyncSession = Depends(get_db),
):
    await exercise_service.delete_exercise(db, exercise_id)


@router.get("/{exercise_id}/sets", response_model=list[SetOut])
async def list_sets(
    exercise_id: int,
    db: AsyncSession = Depends(get_db),
):
    sets = await set_service.list_sets(db, exercise_id)
    return [set_out(s) for s in sets]


@router.post("/{exercise_id}/sets", response_model=SetOut, status_code=201)
async def add_set(
    exercise_id: int,
    payload: AddSetIn,
    db: AsyncSession = Depends(get_db),
):
    s = await set_service.add_set(db, exercise_id, payload.weight, payload.reps)
    return set_out(s)


@router.delete("/{exercise_id}/sets/{set_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_set(
    exercise_id: int,
    set_id: int,
    db: AsyncSession = Depends(get_db),
):
    await set_service.delete_set(db, exercise_id, set_id)
