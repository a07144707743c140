"""Progress analytics: daily volume per exercise or muscle group for charting."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError

from app.api.deps import get_session_store, get_today
from app.core.config import get_settings
from app.core.enums import Dimension, RangePreset
from app.schemas.progress import ChartData, ProgressOptionsRead, ProgressSeriesRead, VolumePointRead
from app.schemas.session import WorkoutSession
from app.services.date_ranges import resolve_bounds
from app.services.session_store import SessionStore
from app.services.volume_aggregation import (
    build_chart,
    compute_series,
    list_options,
    reconcile_selection,
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def _load_sessions(
    store: SessionStore, start_date: date | None, end_date: date | None
) -> list[WorkoutSession]:
    """Session history for the window; a store failure means no history, never partial data."""
    try:
        return await store.list_sessions(start_date, end_date)
    except SQLAlchemyError as e:
        logger.exception("Loading sessions failed: %s", e)
        return []


@router.get("/options", response_model=ProgressOptionsRead)
async def progress_options(
    dimension: Dimension = Dimension.EXERCISE,
    preset: RangePreset | None = Query(None, alias="range"),
    start_date: date | None = None,
    end_date: date | None = None,
    store: SessionStore = Depends(get_session_store),
    today: date = Depends(get_today),
):
    """Exercises (or muscle groups) logged within the window, sorted, for the selector."""
    preset = preset or get_settings().default_range_preset
    start, end = resolve_bounds(preset, today, start_date, end_date)
    sessions = await _load_sessions(store, start, end)
    return ProgressOptionsRead(
        dimension=dimension,
        start_date=start,
        end_date=end,
        options=list_options(sessions, dimension, start, end),
    )


@router.get("/series", response_model=ProgressSeriesRead)
async def progress_series(
    dimension: Dimension = Dimension.EXERCISE,
    item: str | None = None,
    preset: RangePreset | None = Query(None, alias="range"),
    start_date: date | None = None,
    end_date: date | None = None,
    store: SessionStore = Depends(get_session_store),
    today: date = Depends(get_today),
):
    """
    Total volume per day for the selected item within the window.
    A selection that is not among the window's options (e.g. after switching
    dimension) is cleared and the series is empty.
    """
    preset = preset or get_settings().default_range_preset
    start, end = resolve_bounds(preset, today, start_date, end_date)
    sessions = await _load_sessions(store, start, end)

    options = list_options(sessions, dimension, start, end)
    selected = reconcile_selection(item, options)
    series = compute_series(sessions, dimension, selected, start, end)

    return ProgressSeriesRead(
        dimension=dimension,
        start_date=start,
        end_date=end,
        options=options,
        item=selected,
        points=[VolumePointRead(date=d, volume=round(v, 2)) for d, v in series],
        chart=ChartData(**build_chart(series, selected)) if selected else None,
    )
