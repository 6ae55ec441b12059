import os

import django
import pytest

from irrigation_service.irrigation_service.utils.plan_types import ForecastDay
from irrigation_service.irrigation_service.utils.planner_config import PlannerConfig


os.environ.setdefault("DJANGO_SETTINGS_MODULE", "irrigation_service.irrigation_service.settings")
django.setup()


@pytest.fixture
def flat_config() -> PlannerConfig:
    """No evapotranspiration or rain; moisture only moves with irrigation."""
    return PlannerConfig(
        soil_optimal_min=20,
        soil_optimal_max=30,
        max_irrigation_per_day=1.0,
        base_et=0.0,
        temp_factor=0.0,
        rain_conversion=0.0,
        adc_to_moisture=1.0,
        cost_w1=1.0,
        cost_w2=1.0,
        cost_w3=0.0,
    )


@pytest.fixture
def dry_day() -> ForecastDay:
    return ForecastDay(date="2026-06-01", temp_max=31.0, temp_min=17.0, precip_mm=0.0)


@pytest.fixture
def week_forecast():
    weather = [
        (28.0, 16.0, 0.0),
        (31.0, 18.0, 0.0),
        (33.0, 20.0, 0.0),
        (24.0, 15.0, 12.5),
        (22.0, 14.0, 4.0),
        (27.0, 15.0, 0.0),
        (30.0, 17.0, 0.0),
    ]
    return [
        ForecastDay(date=f"2026-06-{day:02d}", temp_max=tmax, temp_min=tmin, precip_mm=rain)
        for day, (tmax, tmin, rain) in enumerate(weather, start=1)
    ]
