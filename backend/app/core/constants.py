"""Shared calculator constants.

Centralizes the unit conversions and per-activity coefficients used by the
calorie formulas so we can document and adjust them in one place.
"""

# Average step length in meters
LEN_STEP = 0.65

# Meters in a kilometer
M_IN_KM = 1000

# Minutes in an hour
MIN_IN_H = 60

# km/h -> m/s
KMH_IN_MSEC = 0.278

# Centimeters in a meter
CM_IN_M = 100

# Running: mean speed multiplier and shift
RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER = 18
RUNNING_CALORIES_MEAN_SPEED_SHIFT = 1.79

# Walking: body weight and speed/height multipliers
WALKING_CALORIES_WEIGHT_MULTIPLIER = 0.035
WALKING_SPEED_HEIGHT_MULTIPLIER = 0.029

# Swimming: speed shift and weight multiplier
SWIMMING_CALORIES_MEAN_SPEED_SHIFT = 1.1
SWIMMING_CALORIES_WEIGHT_MULTIPLIER = 2
