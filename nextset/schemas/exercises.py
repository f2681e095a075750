import datetime as dt

from pydantic import BaseModel, Field, model_validator


class CreateExerciseIn(BaseModel):
    name: str | None = None
    template_id: int | None = None
    date: dt.date | None = None
    workout_id: int | None = None

    @model_validator(mode="after")
    def name_or_template(self):
        if self.template_id is None and not (self.name or "").strip():
            raise ValueError("Either a non-blank name or a template_id is required")
        return self

class AddSetIn(BaseModel):
    weight: float = Field(gt=0)
    reps: int = Field(gt=0)

class SetOut(BaseModel):
    id: int
    exercise_id: int
    weight: float
    reps: int
    created_at: dt.datetime

class ExerciseOut(BaseModel):
    id: int
    name: str
    date: dt.date | None
    workout_id: int | None
    workout_name: str | None
    sets: list[SetOut]


def set_out(s) -> SetOut:
    return SetOut(
        id=s.id,
        exercise_id=s.exercise_id,
        weight=s.weight,
        reps=s.reps,
        created_at=s.created_at,
    )

def exercise_out(exercise) -> ExerciseOut:
    workout = exercise.workout
    return ExerciseOut(
        id=exercise.id,
        name=exercise.name,
        date=exercise.date,
        workout_id=workout.id if workout else None,
        workout_name=workout.name if workout else None,
        sets=[set_out(s) for s in exercise.sets],
    )
