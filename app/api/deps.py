"""Shared FastAPI dependencies: stores, catalog client, options loader."""

from datetime import date
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.session import get_db
from app.services.custom_exercise_store import CustomExerciseStore
from app.services.exercise_catalog import ExerciseCatalogClient
from app.services.exercise_options import ExerciseOptionsLoader
from app.services.session_store import SessionStore


def get_session_store(db: AsyncSession = Depends(get_db)) -> SessionStore:
    return SessionStore(db)


def get_custom_exercise_store(db: AsyncSession = Depends(get_db)) -> CustomExerciseStore:
    return CustomExerciseStore(db)


@lru_cache
def get_exercise_catalog() -> ExerciseCatalogClient:
    settings = get_settings()
    return ExerciseCatalogClient(
        base_url=settings.exercise_catalog_url,
        api_key=settings.exercise_catalog_api_key,
        timeout=settings.exercise_catalog_timeout_seconds,
    )


def get_options_loader(
    catalog: ExerciseCatalogClient = Depends(get_exercise_catalog),
    custom_store: CustomExerciseStore = Depends(get_custom_exercise_store),
) -> ExerciseOptionsLoader:
    return ExerciseOptionsLoader(catalog, custom_store)


def get_today() -> date:
    """Reference day for date range presets (overridable in tests)."""
    return date.today()
