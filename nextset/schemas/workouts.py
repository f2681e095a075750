import datetime as dt

from pydantic import BaseModel

from nextset.schemas.exercises import ExerciseOut, exercise_out


class CreateWorkoutIn(BaseModel):
    name: str | None = None

class RenameWorkoutIn(BaseModel):
    name: str | None = None

class InstantiateWorkoutIn(BaseModel):
    date: dt.date

class AddWorkoutExerciseIn(BaseModel):
    name: str | None = None
    template_id: int | None = None

class WorkoutOut(BaseModel):
    id: int
    name: str | None
    date: dt.date | None
    is_template: bool
    exercises: list[ExerciseOut]

class DayOut(BaseModel):
    date: dt.date
    exercises: list[ExerciseOut]
    workouts: list[WorkoutOut]


def workout_out(workout) -> WorkoutOut:
    return WorkoutOut(
        id=workout.id,
        name=workout.name,
        date=workout.date,
        is_template=workout.is_template,
        exercises=[exercise_out(e) for e in sorted(workout.exercises, key=lambda e: (e.name, e.id))],
    )
