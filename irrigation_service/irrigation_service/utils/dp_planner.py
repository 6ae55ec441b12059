"""
Dynamic-programming optimizer for daily irrigation planning.

Replaces threshold-based watering with an exact finite-horizon search over a
discretized soil-moisture grid.
"""
import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from .config import IRRIGATION_QUANTUM, MAX_MOISTURE, MOISTURE_STEP
from .physics_model import SoilWaterBalance
from .plan_types import DailyPlanEntry, ForecastDay
from .planner_config import ConfigurationError, PlannerConfig
from .state_space import (
    bin_to_moisture,
    clamp_moisture,
    irrigation_options,
    moisture_bin_count,
    moisture_to_bin,
)

logger = logging.getLogger(__name__)


class PlanningCancelled(RuntimeError):
    """Raised when a caller-supplied cancel check fires between days."""


@dataclass(frozen=True)
class InitialState:
    """Where the search starts for a given sensor reading."""
    reading: int
    moisture: float
    bin_index: int
    clamped: bool


@dataclass
class DPTable:
    """
    Dense (day, bin) arena.

    cost[d, b]: minimal accumulated cost to reach bin b after d transitions
    prev_bin[d, b]: bin on day d-1 the optimal transition came from
    volume[d, b]: irrigation volume chosen on that transition
    """
    cost: np.ndarray
    prev_bin: np.ndarray
    volume: np.ndarray

    @classmethod
    def allocate(cls, days: int, n_bins: int) -> "DPTable":
        shape = (days + 1, n_bins)
        return cls(
            cost=np.full(shape, np.inf),
            prev_bin=np.zeros(shape, dtype=np.int64),
            volume=np.zeros(shape, dtype=float),
        )


class IrrigationPlanner:
    """
    Cost-minimizing irrigation planner.

    Features:
    - Fixed moisture grid (MOISTURE_STEP wide bins over [0, MAX_MOISTURE])
    - Irrigation options in IRRIGATION_QUANTUM increments
    - Deterministic tie-breaking: smallest volume, then lowest terminal bin
    """

    def __init__(
        self,
        config: PlannerConfig,
        max_moisture: int = MAX_MOISTURE,
        moisture_step: int = MOISTURE_STEP,
        quantum: float = IRRIGATION_QUANTUM,
    ):
        if not isinstance(config, PlannerConfig):
            raise ConfigurationError(f"Expected PlannerConfig, got {type(config).__name__}")
        self.config = config
        self.max_moisture = max_moisture
        self.moisture_step = moisture_step
        self.quantum = quantum
        self.model = SoilWaterBalance(config, max_moisture=max_moisture)

    @property
    def n_bins(self) -> int:
        return moisture_bin_count(self.max_moisture, self.moisture_step)

    def options(self) -> np.ndarray:
        return irrigation_options(self.config.max_irrigation_per_day, self.quantum)

    def bin_of(self, moisture: float) -> int:
        return moisture_to_bin(moisture, self.max_moisture, self.moisture_step)

    def initial_state(self, initial_moisture: int) -> InitialState:
        moisture = clamp_moisture(initial_moisture, self.max_moisture)
        clamped = moisture != initial_moisture
        if clamped:
            logger.warning(
                "Initial soil moisture %s outside [0, %s], clamped to %s",
                initial_moisture, self.max_moisture, moisture,
            )
        return InitialState(
            reading=initial_moisture,
            moisture=moisture,
            bin_index=self.bin_of(moisture),
            clamped=clamped,
        )

    def compute_plan(
        self,
        initial_moisture: int,
        forecasts: Sequence[ForecastDay],
        cancel_check: Optional[Callable[[], bool]] = None,
    ) -> List[DailyPlanEntry]:
        """
        Compute the optimal irrigation plan.

        Args:
            initial_moisture: Latest raw soil moisture reading
            forecasts: Forecast days in chronological order
            cancel_check: Optional callable polled before each day; a truthy
                result aborts with PlanningCancelled

        Returns:
            One plan entry per forecast day, in forecast order
        """
        days = len(forecasts)
        if days == 0:
            return []

        start = self.initial_state(initial_moisture)
        options = [float(v) for v in self.options()]
        table = self.fill(start, forecasts, options, cancel_check)

        terminal = self.best_terminal_bin(table)
        volumes = self.backtrace(table, terminal)

        logger.debug(
            "Planned %d days over %d bins x %d options, cost %.4f",
            days, self.n_bins, len(options), table.cost[days, terminal],
        )

        return [
            DailyPlanEntry(date=forecast.date, planned_volume_l=volume)
            for forecast, volume in zip(forecasts, volumes)
        ]

    def fill(
        self,
        start: InitialState,
        forecasts: Sequence[ForecastDay],
        options: Sequence[float],
        cancel_check: Optional[Callable[[], bool]] = None,
    ) -> DPTable:
        """Forward pass over all days, relaxing only on strict improvement."""
        days = len(forecasts)
        table = DPTable.allocate(days, self.n_bins)
        table.cost[0, start.bin_index] = 0.0
        table.prev_bin[0, start.bin_index] = start.bin_index

        for day in range(days):
            if cancel_check is not None and cancel_check():
                raise PlanningCancelled(f"Planning cancelled before day {day}")

            terms = self.model.day_terms(forecasts[day])
            cost_today = table.cost[day]
            cost_next = table.cost[day + 1]

            for curr_idx in np.flatnonzero(np.isfinite(cost_today)):
                curr_idx = int(curr_idx)
                if day == 0:
                    current = start.moisture
                else:
                    current = bin_to_moisture(curr_idx, self.moisture_step)
                base_cost = float(cost_today[curr_idx])
                previous_irrigation = float(table.volume[day, curr_idx])

                for irrigation in options:
                    new_moisture = self.model.next_moisture(current, irrigation, terms)
                    new_idx = self.bin_of(new_moisture)
                    total = base_cost + self.model.step_cost(new_moisture, irrigation, previous_irrigation)

                    if total < cost_next[new_idx]:
                        cost_next[new_idx] = total
                        table.prev_bin[day + 1, new_idx] = curr_idx
                        table.volume[day + 1, new_idx] = irrigation

        return table

    @staticmethod
    def best_terminal_bin(table: DPTable) -> int:
        last = table.cost[-1]
        best_idx = 0
        best_cost = math.inf
        for idx in range(last.shape[0]):
            if last[idx] < best_cost:
                best_cost = float(last[idx])
                best_idx = idx

        if math.isinf(best_cost):
            raise ConfigurationError("No reachable terminal moisture state; check planner parameters")
        return best_idx

    @staticmethod
    def backtrace(table: DPTable, terminal_bin: int) -> List[float]:
        days = table.cost.shape[0] - 1
        volumes = [0.0] * days
        idx = terminal_bin
        for day in range(days, 0, -1):
            volumes[day - 1] = float(table.volume[day, idx])
            idx = int(table.prev_bin[day, idx])
        return volumes
