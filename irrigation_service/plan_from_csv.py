"""
Offline irrigation planning from a forecast CSV.

Reads a daily forecast (date, temp_max, temp_min, precip_mm), runs the DP
planner with the default parameters (or overrides given on the command line)
and prints the plan next to the simulated soil moisture.

Usage:
    python -m irrigation_service.plan_from_csv forecast.csv --moisture 1500
"""
import argparse
from pathlib import Path
from typing import List, Optional

import pandas as pd

from irrigation_service.irrigation_service.utils.dp_planner import IrrigationPlanner
from irrigation_service.irrigation_service.utils.forecast_processor import forecast_days_from_frame, plan_to_frame
from irrigation_service.irrigation_service.utils.planner_config import PlannerConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute an irrigation plan from a forecast CSV")
    parser.add_argument("forecast_csv", type=Path, help="CSV with date,temp_max,temp_min,precip_mm")
    parser.add_argument("--moisture", type=int, required=True, help="Initial raw soil moisture reading")
    parser.add_argument("--set", dest="overrides", action="append", default=[], metavar="NAME=VALUE",
                        help="Override a planner parameter, e.g. --set cost_w3=0")
    parser.add_argument("--output", type=Path, default=None, help="Optional CSV path for the plan")
    return parser


def run(argv: Optional[List[str]] = None) -> pd.DataFrame:
    args = build_parser().parse_args(argv)

    overrides = {}
    for item in args.overrides:
        name, _, value = item.partition("=")
        overrides[name.strip()] = value.strip()
    config = PlannerConfig.from_mapping(overrides)

    df_forecast = pd.read_csv(args.forecast_csv)
    forecasts = forecast_days_from_frame(df_forecast)

    planner = IrrigationPlanner(config)
    plan = planner.compute_plan(args.moisture, forecasts)
    soil_series = planner.model.simulate(args.moisture, forecasts, [e.planned_volume_l for e in plan])

    df_plan = plan_to_frame(plan, soil_series)

    print("=" * 70)
    print(f"IRRIGATION PLAN - {len(df_plan)} days, initial moisture {args.moisture}")
    print("=" * 70)
    print(df_plan.to_string(index=False))
    print(f"\nTotal irrigation: {df_plan['planned_volume_l'].sum():.1f} L")

    if args.output is not None:
        df_plan.to_csv(args.output, index=False)
        print(f"Saved plan to {args.output}")

    return df_plan


if __name__ == "__main__":
    run()
