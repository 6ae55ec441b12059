"""
Water-balance model for soil moisture transitions and their cost.

Moisture is tracked on the raw sensor scale; volumes are in liters.
"""
from dataclasses import dataclass
from typing import List, Sequence

from .config import MAX_MOISTURE, REFERENCE_TEMP_C
from .plan_types import ForecastDay
from .planner_config import PlannerConfig
from .state_space import clamp_moisture


@dataclass(frozen=True)
class DayTerms:
    """Weather-driven terms of one forecast day, independent of the decision."""
    evapotranspiration: float
    rain_replenishment: float


class SoilWaterBalance:
    """
    Bucket-style soil moisture model with a quadratic tracking cost.

    Physics equation:
        moisture_new = moisture_prev - ET * adc + irrigation * adc + rain_replenishment

    Cost of a single day:
        w1 * (moisture_new - optimal_center)^2 + w2 * irrigation + w3 * |irrigation - irrigation_prev|
    """

    def __init__(self, config: PlannerConfig, max_moisture: int = MAX_MOISTURE):
        self.config = config
        self.max_moisture = max_moisture
        self.optimal_center = config.optimal_center

    def day_terms(self, forecast: ForecastDay) -> DayTerms:
        """
        Args:
            forecast: Weather of the day

        Returns:
            Evapotranspiration (liters) and rain replenishment (raw moisture units)
        """
        cfg = self.config
        avg_temp = (forecast.temp_max + forecast.temp_min) / 2.0
        et = cfg.base_et + cfg.temp_factor * (avg_temp - REFERENCE_TEMP_C)
        rain = forecast.precip_mm * cfg.rain_conversion * cfg.adc_to_moisture
        return DayTerms(evapotranspiration=et, rain_replenishment=rain)

    def next_moisture(self, current: float, irrigation: float, terms: DayTerms) -> float:
        adc = self.config.adc_to_moisture
        moisture = current - terms.evapotranspiration * adc + irrigation * adc + terms.rain_replenishment
        return clamp_moisture(moisture, self.max_moisture)

    def step_cost(self, next_moisture: float, irrigation: float, previous_irrigation: float) -> float:
        cfg = self.config
        deviation = abs(next_moisture - self.optimal_center)
        change = abs(irrigation - previous_irrigation)
        return cfg.cost_w1 * deviation * deviation + cfg.cost_w2 * irrigation + cfg.cost_w3 * change

    def simulate(
        self,
        initial_moisture: float,
        forecasts: Sequence[ForecastDay],
        volumes: Sequence[float],
    ) -> List[float]:
        """
        Replay a volume sequence against the forecast on the continuous scale.

        Returns:
            End-of-day moisture for every forecast day
        """
        moisture = clamp_moisture(initial_moisture, self.max_moisture)
        series: List[float] = []
        for forecast, volume in zip(forecasts, volumes):
            moisture = self.next_moisture(moisture, volume, self.day_terms(forecast))
            series.append(moisture)
        return series
