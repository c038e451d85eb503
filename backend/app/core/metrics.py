from app.core.constants import (
    CM_IN_M,
    KMH_IN_MSEC,
    LEN_STEP,
    M_IN_KM,
    MIN_IN_H,
    RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER,
    RUNNING_CALORIES_MEAN_SPEED_SHIFT,
    SWIMMING_CALORIES_MEAN_SPEED_SHIFT,
    SWIMMING_CALORIES_WEIGHT_MULTIPLIER,
    WALKING_CALORIES_WEIGHT_MULTIPLIER,
    WALKING_SPEED_HEIGHT_MULTIPLIER,
)


def distance(action: int) -> float:
    """
    Distance covered in km.
    Example: 1000 steps -> 0.65
    """
    return action * LEN_STEP / M_IN_KM


def mean_speed(action: int, duration: float) -> float:
    """
    Average speed in km/h over the whole session.
    Returns 0 for a zero duration.
    """
    if duration == 0:
        return 0
    return distance(action) / duration


def running_calories(action: int, weight: float, duration: float) -> float:
    """Calories burned while running."""
    scaled_speed = (
        RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER
        * mean_speed(action, duration)
        * RUNNING_CALORIES_MEAN_SPEED_SHIFT
    )
    return scaled_speed * weight * duration * MIN_IN_H / M_IN_KM


def walking_calories(
    action: int, duration: float, weight: float, height: float
) -> float:
    """
    Calories burned while walking.

    Speed is converted to m/s and height (cm) to meters before the
    speed^2 / height term is applied.
    """
    walk_speed = (mean_speed(action, duration) * KMH_IN_MSEC) ** 2
    height_m = height / CM_IN_M
    return (
        WALKING_CALORIES_WEIGHT_MULTIPLIER * weight
        + (walk_speed / height_m) * WALKING_SPEED_HEIGHT_MULTIPLIER * weight
    ) * duration * MIN_IN_H


def swimming_mean_speed(length_pool: int, count_pool: int, duration: float) -> float:
    """
    Average swimming speed in km/h from pool length (m) and lengths swum.
    Returns 0 for a zero duration.
    """
    if duration == 0:
        return 0
    return length_pool * count_pool / M_IN_KM / duration


def swimming_calories(
    length_pool: int, count_pool: int, duration: float, weight: float
) -> float:
    shifted_speed = (
        swimming_mean_speed(length_pool, count_pool, duration)
        + SWIMMING_CALORIES_MEAN_SPEED_SHIFT
    )
    return shifted_speed * SWIMMING_CALORIES_WEIGHT_MULTIPLIER * weight * duration
