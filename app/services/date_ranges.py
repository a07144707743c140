"""Date window presets for the progress page. `today` is always passed in."""

from __future__ import annotations

from datetime import date, timedelta

from app.core.enums import RangePreset


def _one_year_before(day: date) -> date:
    try:
        return day.replace(year=day.year - 1)
    except ValueError:
        # Feb 29 -> Feb 28
        return day.replace(year=day.year - 1, day=28)


def preset_bounds(preset: RangePreset, today: date) -> tuple[date | None, date]:
    """(start, end) for a preset; ALL has an open start."""
    if preset == RangePreset.WEEK:
        return today - timedelta(days=7), today
    if preset == RangePreset.MONTH:
        return today - timedelta(days=30), today
    if preset == RangePreset.YEAR:
        return _one_year_before(today), today
    if preset == RangePreset.YTD:
        return date(today.year, 1, 1), today
    return None, today


def resolve_bounds(
    preset: RangePreset,
    today: date,
    start_date: date | None = None,
    end_date: date | None = None,
) -> tuple[date | None, date | None]:
    """Preset window with explicit start/end overriding each side independently."""
    preset_start, preset_end = preset_bounds(preset, today)
    return (
        start_date if start_date is not None else preset_start,
        end_date if end_date is not None else preset_end,
    )
