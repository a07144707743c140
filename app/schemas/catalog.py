"""Exercise catalog schemas."""

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import OptionSource
from app.schemas.session import SetEntry


class CatalogOptionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    name: str
    source: OptionSource


class ExerciseOptionsRead(BaseModel):
    muscle_group: str
    options: list[CatalogOptionRead]


class CustomExerciseCreate(BaseModel):
    muscle_group: str = Field(..., min_length=1, max_length=100)
    exercise_name: str = Field(..., min_length=1, max_length=255)


class CustomExerciseRead(CustomExerciseCreate):
    created: bool


class PrefilledExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    muscle_group: str
    exercise_name: str
    sets: list[SetEntry]
    options: list[CatalogOptionRead]
