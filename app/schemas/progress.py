"""Progress page schemas: option lists and volume series."""

from datetime import date

from pydantic import BaseModel

from app.core.enums import Dimension


class VolumePointRead(BaseModel):
    date: date
    volume: float


class ChartDataset(BaseModel):
    label: str
    data: list[float]


class ChartData(BaseModel):
    labels: list[str]
    datasets: list[ChartDataset]


class ProgressOptionsRead(BaseModel):
    dimension: Dimension
    start_date: date | None = None
    end_date: date | None = None
    options: list[str]


class ProgressSeriesRead(ProgressOptionsRead):
    """Series for the selected item. item is None when nothing (valid) is selected."""

    item: str | None = None
    points: list[VolumePointRead] = []
    chart: ChartData | None = None
