import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional, Sequence, Tuple

from django.conf import settings

from ..utils.dp_planner import IrrigationPlanner
from ..utils.plan_types import DailyPlanEntry, ForecastDay
from ..utils.planner_config import PlannerConfig

logger = logging.getLogger(__name__)

SOIL_DRY = "dry"
SOIL_OPTIMAL = "optimal"
SOIL_WET = "wet"


@lru_cache(maxsize=1)
def get_planner() -> IrrigationPlanner:
    """Planner built once from settings.IRRIGATION_PLANNER."""
    config = PlannerConfig.from_mapping(getattr(settings, "IRRIGATION_PLANNER", {}))
    logger.info("Irrigation planner configured: %s", config.to_dict())
    return IrrigationPlanner(config)


def soil_status(moisture: float, config: PlannerConfig) -> str:
    if moisture < config.soil_optimal_min:
        return SOIL_DRY
    if moisture > config.soil_optimal_max:
        return SOIL_WET
    return SOIL_OPTIMAL


def summarize_plan(
        plan: Sequence[DailyPlanEntry],
        soil_series: Sequence[float],
        config: PlannerConfig,
) -> Dict[str, Any]:
    statuses = [soil_status(m, config) for m in soil_series]
    return {
        "total_irrigation_l": float(sum(entry.planned_volume_l for entry in plan)),
        "irrigation_days": sum(1 for entry in plan if entry.planned_volume_l > 0.0),
        "days_below_optimal": statuses.count(SOIL_DRY),
        "days_above_optimal": statuses.count(SOIL_WET),
        "optimal_min": config.soil_optimal_min,
        "optimal_max": config.soil_optimal_max,
    }


def compute_irrigation_plan(
        initial_moisture: int,
        forecasts: Sequence[ForecastDay],
        planner: Optional[IrrigationPlanner] = None,
) -> Tuple[List[DailyPlanEntry], List[float]]:
    """
    Compute the plan for one device and replay it through the water balance.

    Returns:
        (plan, end-of-day soil moisture per forecast day)
    """
    planner = planner or get_planner()

    plan = planner.compute_plan(initial_moisture, forecasts)
    soil_series = planner.model.simulate(
        initial_moisture, forecasts, [entry.planned_volume_l for entry in plan]
    )

    logger.info("Irrigation plan recomputed for %d days", len(plan))
    return plan, soil_series
