from __future__ import annotations

from typing import Sequence

import pandas as pd

from .plan_types import DailyPlanEntry

# Local hour at which a planned irrigation is scheduled
IRRIGATION_HOUR = 8


def response_wrapper(
        plan: Sequence[DailyPlanEntry],
        soil_series: Sequence[float],
        timezone: str = "UTC",
) -> dict:
    """Dashboard format: one soil-moisture forecast series plus watering actions."""

    def add_time_delta(date: str) -> str:
        timestamp = pd.to_datetime(date, errors="coerce")
        if pd.isna(timestamp):
            return str(date)
        if timestamp.tzinfo is None:
            timestamp = timestamp.tz_localize(timezone)
        timestamp = timestamp + pd.Timedelta(hours=IRRIGATION_HOUR)
        timestamp = timestamp.tz_convert("UTC")
        return timestamp.strftime("%Y-%m-%d %H:%M:%S")

    moisture_points = [
        {"timestamp": add_time_delta(entry.date), "value": float(moisture)}
        for entry, moisture in zip(plan, soil_series)
    ]

    action_points = [
        {
            "timestamp": add_time_delta(entry.date),
            "value": float(entry.planned_volume_l),
            "action": "watering",
        }
        for entry in plan
        if entry.planned_volume_l > 0.0
    ]

    forecasts = [
        {
            "name": "soil-moisture",
            "values": [{"name": "planned", "value": moisture_points}],
        },
    ]

    actions = [{"name": "planned", "value": action_points}]

    return {"forecasts": forecasts, "actions": actions}
