"""Custom exercise store: names the user added under a muscle group."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.custom_exercise import CustomExercise

logger = logging.getLogger(__name__)


class CustomExerciseStore:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def names_for(self, muscle_group: str) -> list[str]:
        """Saved names for one group, oldest first."""
        result = await self.db.execute(
            select(CustomExercise.name)
            .where(CustomExercise.muscle_group == muscle_group)
            .order_by(CustomExercise.created_at, CustomExercise.name)
        )
        return list(result.scalars().all())

    async def grouped(self) -> dict[str, list[str]]:
        """muscle group -> saved names, oldest first within each group."""
        result = await self.db.execute(
            select(CustomExercise.muscle_group, CustomExercise.name).order_by(
                CustomExercise.created_at, CustomExercise.name
            )
        )
        out: dict[str, list[str]] = {}
        for row in result.all():
            out.setdefault(row.muscle_group, []).append(row.name)
        return out

    async def add(self, muscle_group: str, name: str) -> bool:
        """Save a custom exercise. Returns False if it already existed."""
        existing = await self.db.execute(
            select(CustomExercise.id).where(
                CustomExercise.muscle_group == muscle_group,
                CustomExercise.name == name,
            )
        )
        if existing.scalar_one_or_none() is not None:
            return False
        self.db.add(CustomExercise(muscle_group=muscle_group, name=name))
        try:
            await self.db.flush()
        except IntegrityError:
            # saved concurrently between the lookup and the insert
            await self.db.rollback()
            logger.info("Custom exercise %r under %s already saved", name, muscle_group)
            return False
        logger.info("Saved custom exercise %r under %s", name, muscle_group)
        return True
