"""Progress analytics: daily training volume per exercise or muscle group.

Volume = sum over sets of (reps * weight). Everything here is a pure function
over session snapshots; loading the sessions is the caller's job.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date
from typing import Any

from app.core.constants import CHART_LABEL_SUFFIX
from app.core.enums import Dimension
from app.schemas.session import ExerciseEntry, SetEntry, WorkoutSession

VolumePoint = tuple[date, float]


def set_volume(s: SetEntry) -> float:
    """reps * weight, negatives included as-is."""
    return s.reps * s.weight


def entry_volume(entry: ExerciseEntry) -> float:
    """Sum of set volumes; an entry without sets is 0."""
    return sum((set_volume(s) for s in entry.sets), 0.0)


def in_range(day: date, start_date: date | None, end_date: date | None) -> bool:
    """Inclusive on both ends; a missing bound is open."""
    if start_date is not None and day < start_date:
        return False
    if end_date is not None and day > end_date:
        return False
    return True


def _field(entry: ExerciseEntry, dimension: Dimension) -> str:
    if dimension == Dimension.EXERCISE:
        return entry.exercise_name
    return entry.muscle_group


def _sessions_in_range(
    sessions: Iterable[WorkoutSession], start_date: date | None, end_date: date | None
) -> Iterable[WorkoutSession]:
    return (s for s in sessions if in_range(s.date, start_date, end_date))


def compute_series(
    sessions: Sequence[WorkoutSession],
    dimension: Dimension,
    item: str | None,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[VolumePoint]:
    """
    Daily volume for `item` (exact, case-sensitive match on the dimension's field)
    across sessions dated within [start_date, end_date].
    Returns (date, volume) pairs in ascending date order; days without a matching
    entry are absent. An empty item means nothing is selected and yields [].
    """
    if not item:
        return []

    grouped: dict[date, float] = {}
    for session in _sessions_in_range(sessions, start_date, end_date):
        for entry in session.exercises:
            if _field(entry, dimension) != item:
                continue
            grouped[session.date] = grouped.get(session.date, 0.0) + entry_volume(entry)

    return sorted(grouped.items())


def list_options(
    sessions: Sequence[WorkoutSession],
    dimension: Dimension,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[str]:
    """Distinct exercise names (or muscle groups) logged within the window, sorted."""
    items: set[str] = set()
    for session in _sessions_in_range(sessions, start_date, end_date):
        for entry in session.exercises:
            value = _field(entry, dimension)
            if value:
                items.add(value)
    return sorted(items)


def reconcile_selection(item: str | None, options: Sequence[str]) -> str | None:
    """Drop a selection that is no longer among the offered options."""
    if item and item in options:
        return item
    return None


def chart_label(day: date) -> str:
    """Short axis label, e.g. 1/5 for January 5th."""
    return f"{day.month}/{day.day}"


def build_chart(series: Sequence[VolumePoint], item: str) -> dict[str, Any]:
    """Line chart payload: M/D labels and one total-volume dataset."""
    return {
        "labels": [chart_label(d) for d, _ in series],
        "datasets": [
            {
                "label": f"{item} {CHART_LABEL_SUFFIX}",
                "data": [round(v, 2) for _, v in series],
            }
        ],
    }
