"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.custom_exercise import CustomExercise
from app.models.workout import Workout, WorkoutExercise, WorkoutSet

__all__ = [
    "CustomExercise",
    "Workout",
    "WorkoutExercise",
    "WorkoutSet",
]
