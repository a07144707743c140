"""Workout session snapshots consumed by the analytics and catalog services."""

from datetime import date, datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class SetEntry(BaseModel):
    """One set. Values are taken literally (no clamping of negatives)."""

    model_config = ConfigDict(frozen=True)

    reps: int
    weight: float


class ExerciseEntry(BaseModel):
    """One exercise performed in a session, with its sets in logged order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    muscle_group: str = Field(validation_alias=AliasChoices("muscle_group", "muscleGroup"))
    exercise_name: str = Field(validation_alias=AliasChoices("exercise_name", "exercise", "exerciseName"))
    sets: tuple[SetEntry, ...] = ()


class WorkoutSession(BaseModel):
    """A logged session. Only the calendar day matters; time-of-day is dropped."""

    model_config = ConfigDict(frozen=True)

    date: date
    exercises: tuple[ExerciseEntry, ...] = ()

    @field_validator("date", mode="before")
    @classmethod
    def _strip_time_of_day(cls, value):
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str):
            # "2024-01-01T18:30:00Z" and "2024-01-01 18:30:00" both keep the day only
            day = value.strip()
            for sep in ("T", " "):
                day = day.split(sep, 1)[0]
            return day
        return value
