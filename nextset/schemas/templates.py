from pydantic import BaseModel


class ExerciseTemplateOut(BaseModel):
    id: int
    name: str

class ExerciseTemplateList(BaseModel):
    items: list[ExerciseTemplateOut]
