"""Shared enums for services and API."""

from enum import Enum


class Dimension(str, Enum):
    """Axis a progress series is aggregated on."""

    EXERCISE = "exercise"  # match on exercise name
    MUSCLE_GROUP = "muscle"  # match on muscle group


class RangePreset(str, Enum):
    """Date window presets offered on the progress page."""

    WEEK = "week"  # Last 7 days
    MONTH = "month"  # Last 30 days
    YEAR = "year"  # Last year
    YTD = "ytd"  # Year to date
    ALL = "all"  # All time (unbounded start)


class OptionSource(str, Enum):
    """Where an exercise option in the catalog list came from."""

    PINNED = "pinned"  # Previously selected, found in neither source
    CATALOG = "catalog"  # Remote exercise catalog
    CUSTOM = "custom"  # User-defined custom exercise
