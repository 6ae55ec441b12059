from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastDay:
    """One day of weather forecast, as delivered by the forecast source."""
    date: str
    temp_max: float
    temp_min: float
    precip_mm: float


@dataclass(frozen=True)
class DailyPlanEntry:
    date: str
    planned_volume_l: float
