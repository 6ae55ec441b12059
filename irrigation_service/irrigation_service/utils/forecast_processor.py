from typing import List, Sequence

import pandas as pd

from .plan_types import DailyPlanEntry, ForecastDay

FORECAST_COLUMNS = ["date", "temp_max", "temp_min", "precip_mm"]


def format_date(value) -> str:
    return value.strftime("%Y-%m-%d") if hasattr(value, "strftime") else str(value)


def forecast_days_from_frame(df_forecast: pd.DataFrame) -> List[ForecastDay]:
    """
    Convert a daily forecast DataFrame into planner input, keeping row order.

    Missing precipitation counts as a dry day; missing dates or temperatures
    are an error.
    """
    missing = [c for c in FORECAST_COLUMNS if c not in df_forecast.columns]
    if missing:
        raise ValueError(f"Forecast is missing columns: {', '.join(missing)}")

    df = df_forecast[FORECAST_COLUMNS].copy()
    df["precip_mm"] = df["precip_mm"].fillna(0.0)
    if df["date"].isna().any():
        raise ValueError("Forecast contains days without a date")
    if df[["temp_max", "temp_min"]].isna().any().any():
        raise ValueError("Forecast contains days without temperature data")

    return [
        ForecastDay(
            date=format_date(row.date),
            temp_max=float(row.temp_max),
            temp_min=float(row.temp_min),
            precip_mm=float(row.precip_mm),
        )
        for row in df.itertuples(index=False)
    ]


def plan_to_frame(plan: Sequence[DailyPlanEntry], moisture: Sequence[float] = ()) -> pd.DataFrame:
    df_plan = pd.DataFrame(
        {
            "date": [entry.date for entry in plan],
            "planned_volume_l": [entry.planned_volume_l for entry in plan],
        }
    )
    if len(moisture) == len(plan) and len(plan) > 0:
        df_plan["soil_moisture"] = list(moisture)
    return df_plan
