"""Exercise option lookups for the logging form.

Fetches the remote catalog and the custom exercise store concurrently, waits for
both to resolve or fail, and hands the results to the catalog resolver. A failed
source contributes nothing; the lookup as a whole never fails.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any

from app.schemas.session import ExerciseEntry, SetEntry, WorkoutSession
from app.services.catalog_resolver import CatalogOption, is_other, resolve
from app.services.custom_exercise_store import CustomExerciseStore
from app.services.exercise_catalog import ExerciseCatalogClient
from app.services.request_gate import RequestGate

logger = logging.getLogger(__name__)


@dataclass
class PrefilledExercise:
    """A form row rebuilt from a past session entry."""

    muscle_group: str
    exercise_name: str
    sets: tuple[SetEntry, ...]
    options: list[CatalogOption] = field(default_factory=list)


def _or_empty(result: Any, source: str, muscle_group: str | None = None) -> Any:
    """Pass a gathered result through; a failure becomes None (logged)."""
    if isinstance(result, asyncio.CancelledError):
        raise result
    if isinstance(result, BaseException):
        logger.warning("%s lookup failed for %s: %r", source, muscle_group or "all groups", result)
        return None
    return result


class ExerciseOptionsLoader:
    def __init__(
        self,
        catalog: ExerciseCatalogClient,
        custom_store: CustomExerciseStore,
        gate: RequestGate | None = None,
    ) -> None:
        self.catalog = catalog
        self.custom_store = custom_store
        self.gate = gate or RequestGate()

    async def fetch(self, muscle_group: str | None, pinned_name: str | None = None) -> list[CatalogOption]:
        """Options for one muscle group, pinned name first."""
        if not muscle_group or is_other(muscle_group):
            return []
        remote, custom = await asyncio.gather(
            self.catalog.exercise_names(muscle_group),
            self.custom_store.names_for(muscle_group),
            return_exceptions=True,
        )
        return resolve(
            muscle_group,
            _or_empty(remote, "Exercise catalog", muscle_group),
            _or_empty(custom, "Custom exercise", muscle_group),
            pinned_name,
        )

    async def fetch_latest(
        self,
        slot: Hashable,
        muscle_group: str | None,
        pinned_name: str | None = None,
    ) -> list[CatalogOption] | None:
        """
        Like fetch(), but only the newest request per slot gets a result.
        Returns None when a later request for the same slot started meanwhile.
        For in-process callers that keep one loader (and its gate) alive across
        lookups; the HTTP endpoints build a loader per request and use fetch().
        """
        token = self.gate.begin(slot)
        options = await self.fetch(muscle_group, pinned_name)
        if not self.gate.is_current(token):
            logger.debug("Discarding stale options for slot %s (%s)", slot, muscle_group)
            return None
        return options

    async def prefill(self, session: WorkoutSession) -> list[PrefilledExercise]:
        """
        Rebuild form rows from a past session. Each row pins its own exercise name so
        it stays selectable even if it left the catalog or the custom list.
        Custom names are loaded once; the catalog is queried once per distinct group.
        """
        groups = list(dict.fromkeys(
            e.muscle_group for e in session.exercises if e.muscle_group and not is_other(e.muscle_group)
        ))
        if not groups:
            return [self._prefilled(entry, []) for entry in session.exercises]

        results = await asyncio.gather(
            self.custom_store.grouped(),
            *(self.catalog.exercise_names(g) for g in groups),
            return_exceptions=True,
        )
        custom_by_group = _or_empty(results[0], "Custom exercise") or {}
        remote_by_group = {
            g: _or_empty(r, "Exercise catalog", g) for g, r in zip(groups, results[1:])
        }

        rows = []
        for entry in session.exercises:
            options = resolve(
                entry.muscle_group,
                remote_by_group.get(entry.muscle_group),
                custom_by_group.get(entry.muscle_group),
                entry.exercise_name,
            )
            rows.append(self._prefilled(entry, options))
        return rows

    @staticmethod
    def _prefilled(entry: ExerciseEntry, options: list[CatalogOption]) -> PrefilledExercise:
        return PrefilledExercise(
            muscle_group=entry.muscle_group,
            exercise_name=entry.exercise_name,
            sets=entry.sets,
            options=options,
        )
