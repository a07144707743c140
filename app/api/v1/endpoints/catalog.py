"""Exercise catalog: muscle groups, merged exercise options, custom exercises."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.deps import get_custom_exercise_store, get_options_loader
from app.core.constants import MUSCLE_GROUPS
from app.schemas.catalog import (
    CatalogOptionRead,
    CustomExerciseCreate,
    CustomExerciseRead,
    ExerciseOptionsRead,
    PrefilledExerciseRead,
)
from app.schemas.session import WorkoutSession
from app.services.custom_exercise_store import CustomExerciseStore
from app.services.exercise_options import ExerciseOptionsLoader

router = APIRouter()


def _options_read(options) -> list[CatalogOptionRead]:
    return [CatalogOptionRead(name=o.name, source=o.source) for o in options]


@router.get("/muscle-groups", response_model=list[str])
async def list_muscle_groups():
    """Muscle groups for the logging form; "Other" last."""
    return list(MUSCLE_GROUPS)


@router.get("/exercises", response_model=ExerciseOptionsRead)
async def exercise_options(
    muscle_group: str,
    pinned: str | None = None,
    loader: ExerciseOptionsLoader = Depends(get_options_loader),
):
    """
    Remote catalog + custom exercises for a muscle group, deduplicated.
    Order: pinned (e.g. the exercise being re-logged), catalog, custom.
    "Other" has no list. Unreachable sources are skipped, never an error.
    """
    options = await loader.fetch(muscle_group, pinned)
    return ExerciseOptionsRead(muscle_group=muscle_group, options=_options_read(options))


@router.get("/custom-exercises", response_model=dict[str, list[str]])
async def list_custom_exercises(
    store: CustomExerciseStore = Depends(get_custom_exercise_store),
):
    """Saved custom exercise names keyed by muscle group."""
    return await store.grouped()


@router.post("/custom-exercises", response_model=CustomExerciseRead, status_code=201)
async def create_custom_exercise(
    payload: CustomExerciseCreate,
    response: Response,
    store: CustomExerciseStore = Depends(get_custom_exercise_store),
):
    """Save a custom exercise under a muscle group (idempotent: 200 if it already exists)."""
    if payload.muscle_group not in MUSCLE_GROUPS:
        raise HTTPException(status_code=400, detail=f"Unknown muscle group: {payload.muscle_group}")
    name = payload.exercise_name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Exercise name must not be blank")
    created = await store.add(payload.muscle_group, name)
    if not created:
        response.status_code = 200
    return CustomExerciseRead(muscle_group=payload.muscle_group, exercise_name=name, created=created)


@router.post("/prefill", response_model=list[PrefilledExerciseRead])
async def prefill_from_session(
    session: WorkoutSession,
    loader: ExerciseOptionsLoader = Depends(get_options_loader),
):
    """Form rows for repeating a past session, each with its exercise pinned in the options."""
    rows = await loader.prefill(session)
    return [
        PrefilledExerciseRead(
            muscle_group=row.muscle_group,
            exercise_name=row.exercise_name,
            sets=list(row.sets),
            options=_options_read(row.options),
        )
        for row in rows
    ]
