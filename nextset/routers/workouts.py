from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from nextset.core.db import get_db
from nextset.schemas.exercises import ExerciseOut, exercise_out
from nextset.schemas.workouts import (
    AddWorkoutExerciseIn,
    CreateWorkoutIn,
    InstantiateWorkoutIn,
    RenameWorkoutIn,
    WorkoutOut,
    workout_out,
)
from nextset.services import workouts as workout_service

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.get("/templates", response_model=list[WorkoutOut])
async def list_workout_templates(
    db: AsyncSession = Depends(get_db),
):
    templates = await workout_service.list_workout_templates(db)
    return [workout_out(w) for w in templates]


@router.post("", response_model=WorkoutOut, status_code=201)
async def create_workout(
    payload: CreateWorkoutIn,
    db: AsyncSession = Depends(get_db),
):
    w = await workout_service.create_workout(db, payload.name)
    return workout_out(w)


@router.get("/{workout_id}", response_model=WorkoutOut)
async def get_workout(
    workout_id: int,
    db: AsyncSession = Depends(get_db),
):
    w = await workout_service.get_workout(db, workout_id)
    return workout_out(w)


@router.patch("/{workout_id}", response_model=WorkoutOut)
async def rename_workout(
    workout_id: int,
    payload: RenameWorkoutIn,
    db: AsyncSession = Depends(get_db),
):
    w = await workout_service.rename_workout(db, workout_id, payload.name)
    return workout_out(w)


@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workout(
    workout_id: int,
    db: AsyncSession = Depends(get_db),
):
    await workout_service.delete_workout(db, workout_id)


@router.post("/{workout_id}/instantiate", response_model=WorkoutOut, status_code=201)
async def instantiate_workout(
    workout_id: int,
    payload: InstantiateWorkoutIn,
    db: AsyncSession = Depends(get_db),
):
    w = await workout_service.instantiate(db, workout_id, payload.date)
    return workout_out(w)


@router.post("/{workout_id}/exercises", response_model=ExerciseOut, status_code=201)
async def add_exercise_to_workout(
    workout_id: int,
    payload: AddWorkoutExerciseIn,
    db: AsyncSession = Depends(get_db),
):
    ex = await workout_service.add_exercise(
        db, workout_id, name=payload.name, template_id=payload.template_id
    )
    return exercise_out(ex)


@router.delete("/{workout_id}/exercises/{exercise_id}")
async def remove_exercise_from_workout(
    workout_id: int,
    exercise_id: int,
    db: AsyncSession = Depends(get_db),
):
    survivor = await workout_service.remove_exercise(db, workout_id, exercise_id)
    if survivor is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return exercise_out(survivor)
