"""Session store: loads logged workouts as immutable snapshots."""

from __future__ import annotations

from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.workout import Workout, WorkoutExercise
from app.schemas.session import ExerciseEntry, SetEntry, WorkoutSession


def to_snapshot(workout: Workout) -> WorkoutSession:
    return WorkoutSession(
        date=workout.performed_on,
        exercises=tuple(
            ExerciseEntry(
                muscle_group=ex.muscle_group,
                exercise_name=ex.exercise_name,
                sets=tuple(SetEntry(reps=s.reps, weight=float(s.weight)) for s in ex.sets),
            )
            for ex in workout.exercises
        ),
    )


class SessionStore:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_sessions(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[WorkoutSession]:
        """All workouts (optionally pre-filtered by day), oldest first."""
        stmt = select(Workout).options(
            selectinload(Workout.exercises).selectinload(WorkoutExercise.sets)
        )
        if start_date is not None:
            stmt = stmt.where(Workout.performed_on >= start_date)
        if end_date is not None:
            stmt = stmt.where(Workout.performed_on <= end_date)
        result = await self.db.execute(stmt.order_by(Workout.performed_on, Workout.created_at))
        return [to_snapshot(w) for w in result.scalars().all()]
