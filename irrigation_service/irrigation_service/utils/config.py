"""
Configuration constants for irrigation planning.

Centralized configuration for the state-space grid, the water-balance model
and the default planner parameters.
"""

# =============================================================================
# State-Space Configuration
# =============================================================================

# Upper bound of the raw soil moisture scale (12-bit ADC)
MAX_MOISTURE = 4095

# Width of one moisture bin on the raw scale
MOISTURE_STEP = 10

# Increment between adjacent irrigation options in liters
IRRIGATION_QUANTUM = 0.5


# =============================================================================
# Water Balance Configuration
# =============================================================================

# Temperature at which evapotranspiration equals BASE_ET
REFERENCE_TEMP_C = 20.0


# =============================================================================
# Default Planner Parameters
# =============================================================================

# Optimal soil moisture band (raw ADC values, inclusive)
DEFAULT_SOIL_OPTIMAL_MIN = 1800
DEFAULT_SOIL_OPTIMAL_MAX = 2600

# Maximum irrigation per day in liters
DEFAULT_MAX_IRRIGATION_PER_DAY = 5.0

# Base evapotranspiration in liters/day and its temperature sensitivity
DEFAULT_BASE_ET = 2.0
DEFAULT_TEMP_FACTOR = 0.1

# Share of 1 mm precipitation that reaches the root zone (liters equivalent)
DEFAULT_RAIN_CONVERSION = 0.8

# ADC units per liter of water in the root zone
DEFAULT_ADC_TO_MOISTURE = 40.0


# =============================================================================
# Cost Configuration
# =============================================================================

COST_W1 = 0.001  # Weight for squared moisture deviation from optimal center
COST_W2 = 1.0    # Weight for water usage
COST_W3 = 0.5    # Weight for day-to-day irrigation change
