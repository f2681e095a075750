from nextset.models.exercise import Exercise
from nextset.models.exercise_set import ExerciseSet
from nextset.models.exercise_template import ExerciseTemplate
from nextset.models.workout import Workout

__all__ = ["Exercise", "ExerciseSet", "ExerciseTemplate", "Workout"]
