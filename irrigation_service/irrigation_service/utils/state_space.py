"""
Discretization of the moisture scale and the irrigation volume range.
"""
import numpy as np

from .config import IRRIGATION_QUANTUM, MAX_MOISTURE, MOISTURE_STEP


def irrigation_options(max_irrigation_per_day: float, quantum: float = IRRIGATION_QUANTUM) -> np.ndarray:
    """
    Ascending irrigation volumes {0, quantum, 2*quantum, ...} up to the
    largest multiple of quantum not exceeding max_irrigation_per_day.
    """
    steps = int(max(0.0, max_irrigation_per_day) // quantum)
    return np.arange(steps + 1, dtype=float) * quantum


def moisture_bin_count(max_moisture: int = MAX_MOISTURE, step: int = MOISTURE_STEP) -> int:
    return max_moisture // step + 1


def clamp_moisture(moisture: float, max_moisture: int = MAX_MOISTURE) -> float:
    return max(0.0, min(float(max_moisture), float(moisture)))


def moisture_to_bin(
        moisture: float,
        max_moisture: int = MAX_MOISTURE,
        step: int = MOISTURE_STEP,
) -> int:
    """Bin index of a moisture value; out-of-range values land in the edge bins."""
    idx = int(clamp_moisture(moisture, max_moisture)) // step
    return max(0, min(moisture_bin_count(max_moisture, step) - 1, idx))


def bin_to_moisture(idx: int, step: int = MOISTURE_STEP) -> int:
    return idx * step
