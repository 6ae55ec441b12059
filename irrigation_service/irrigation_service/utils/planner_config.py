"""
Validated parameter set for the irrigation planner.
"""
import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

from .config import (
    COST_W1,
    COST_W2,
    COST_W3,
    DEFAULT_ADC_TO_MOISTURE,
    DEFAULT_BASE_ET,
    DEFAULT_MAX_IRRIGATION_PER_DAY,
    DEFAULT_RAIN_CONVERSION,
    DEFAULT_SOIL_OPTIMAL_MAX,
    DEFAULT_SOIL_OPTIMAL_MIN,
    DEFAULT_TEMP_FACTOR,
)


class ConfigurationError(ValueError):
    """Raised when planner parameters violate their invariants."""


INT_FIELDS = ("soil_optimal_min", "soil_optimal_max")

FLOAT_FIELDS = (
    "max_irrigation_per_day",
    "base_et",
    "temp_factor",
    "rain_conversion",
    "adc_to_moisture",
    "cost_w1",
    "cost_w2",
    "cost_w3",
)


@dataclass(frozen=True)
class PlannerConfig:
    """
    Immutable planner parameters, checked once at construction.

    Attributes:
        soil_optimal_min: Lower bound of the optimal moisture band (raw scale)
        soil_optimal_max: Upper bound of the optimal moisture band (raw scale)
        max_irrigation_per_day: Largest daily irrigation volume in liters
        base_et: Evapotranspiration at the reference temperature
        temp_factor: Evapotranspiration change per degree Celsius
        rain_conversion: Liters of root-zone water per mm of precipitation
        adc_to_moisture: Raw moisture units per liter
        cost_w1: Weight of the squared deviation from the optimal center
        cost_w2: Weight of the irrigation volume
        cost_w3: Weight of the day-to-day irrigation change
    """
    soil_optimal_min: int = DEFAULT_SOIL_OPTIMAL_MIN
    soil_optimal_max: int = DEFAULT_SOIL_OPTIMAL_MAX
    max_irrigation_per_day: float = DEFAULT_MAX_IRRIGATION_PER_DAY
    base_et: float = DEFAULT_BASE_ET
    temp_factor: float = DEFAULT_TEMP_FACTOR
    rain_conversion: float = DEFAULT_RAIN_CONVERSION
    adc_to_moisture: float = DEFAULT_ADC_TO_MOISTURE
    cost_w1: float = COST_W1
    cost_w2: float = COST_W2
    cost_w3: float = COST_W3

    def __post_init__(self):
        for name in INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")

        for name in FLOAT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigurationError(f"{name} must be finite, got {value!r}")

        if self.soil_optimal_min > self.soil_optimal_max:
            raise ConfigurationError(
                f"soil_optimal_min ({self.soil_optimal_min}) must not exceed "
                f"soil_optimal_max ({self.soil_optimal_max})"
            )
        if self.max_irrigation_per_day <= 0:
            raise ConfigurationError("max_irrigation_per_day must be greater than 0")
        if self.adc_to_moisture <= 0:
            raise ConfigurationError("adc_to_moisture must be greater than 0")
        for name in ("cost_w1", "cost_w2", "cost_w3"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must not be negative")

    @property
    def optimal_center(self) -> float:
        return (self.soil_optimal_min + self.soil_optimal_max) / 2.0

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "PlannerConfig":
        """
        Build a config from a settings-style mapping.

        Keys are matched case-insensitively against the field names; missing
        keys keep their defaults. String values (e.g. from environment
        variables) are converted to the field's type.
        """
        known = set(INT_FIELDS) | set(FLOAT_FIELDS)
        kwargs: Dict[str, Any] = {}

        for key, raw in values.items():
            name = str(key).lower()
            if name not in known:
                raise ConfigurationError(f"Unknown planner parameter: {key}")
            if raw is None:
                continue
            try:
                if name in INT_FIELDS:
                    kwargs[name] = int(raw)
                else:
                    kwargs[name] = float(raw)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid value for {name}: {raw!r}") from e

        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
