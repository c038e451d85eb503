"""Text summary of a training session.

Dispatches on the activity kind, runs the matching formulas from
`app.core.metrics` and fills the fixed five-line template below. Existing
consumers parse this layout, so the wording and precision must not change.
"""

import logging
from typing import Optional, Union

from app.core import metrics
from app.schemas.training import ActivityKind

logger = logging.getLogger(__name__)

UNKNOWN_TRAINING_MESSAGE = "неизвестный тип тренировки"

REPORT_TEMPLATE = (
    "Тип тренировки: {training_type}\n"
    "Длительность: {duration:.2f} ч.\n"
    "Дистанция: {distance:.2f} км.\n"
    "Скорость: {speed:.2f} км/ч\n"
    "Сожгли калорий: {calories:.2f}\n"
)


def to_activity_kind(training_type: Union[ActivityKind, str]) -> Optional[ActivityKind]:
    """Return the ActivityKind for a label, or None if it is not recognized."""
    try:
        return ActivityKind(training_type)
    except ValueError:
        return None


def _running(action, duration, weight, height, length_pool, count_pool):
    return (
        metrics.mean_speed(action, duration),
        metrics.running_calories(action, weight, duration),
    )


def _walking(action, duration, weight, height, length_pool, count_pool):
    return (
        metrics.mean_speed(action, duration),
        metrics.walking_calories(action, duration, weight, height),
    )


def _swimming(action, duration, weight, height, length_pool, count_pool):
    return (
        metrics.swimming_mean_speed(length_pool, count_pool, duration),
        metrics.swimming_calories(length_pool, count_pool, duration, weight),
    )


# (speed, calories) per kind; every ActivityKind member has an entry
_CALCULATORS = {
    ActivityKind.running: _running,
    ActivityKind.walking: _walking,
    ActivityKind.swimming: _swimming,
}


def training_metrics(
    kind: ActivityKind,
    action: int,
    duration: float,
    weight: float,
    height: float,
    length_pool: int,
    count_pool: int,
) -> tuple[float, float, float]:
    """
    Compute (distance km, speed km/h, calories) for one session.

    Swimming distance still comes from the action count (strokes);
    only its speed and calories use the pool figures.
    """
    speed, calories = _CALCULATORS[kind](
        action, duration, weight, height, length_pool, count_pool
    )
    return metrics.distance(action), speed, calories


def show_training_info(
    action: int,
    training_type: Union[ActivityKind, str],
    duration: float,
    weight: float,
    height: float,
    length_pool: int,
    count_pool: int,
) -> str:
    """
    Build the text summary for a training session.

    Returns UNKNOWN_TRAINING_MESSAGE without running any formula when
    `training_type` is not one of the ActivityKind labels.
    """
    kind = to_activity_kind(training_type)
    if kind is None:
        logger.warning("Unknown training type: %r", training_type)
        return UNKNOWN_TRAINING_MESSAGE

    distance, speed, calories = training_metrics(
        kind, action, duration, weight, height, length_pool, count_pool
    )
    return REPORT_TEMPLATE.format(
        training_type=kind.value,
        duration=duration,
        distance=distance,
        speed=speed,
        calories=calories,
    )
