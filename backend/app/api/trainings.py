import logging
import math
from typing import NoReturn, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from app.core.report import (
    UNKNOWN_TRAINING_MESSAGE,
    show_training_info,
    to_activity_kind,
    training_metrics,
)
from app.core.time_utils import hhmmss_to_hours, hours_to_hhmmss
from app.schemas.training import ActivityKind, TrainingCreate, TrainingSummary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trainings", tags=["trainings"])


def _reject(detail: str) -> NoReturn:
    logger.info("Rejected training payload: %s", detail)
    raise HTTPException(status_code=422, detail=detail)


def resolve_duration(payload: TrainingCreate) -> float:
    """Duration in hours, from duration_hours or the 'HH:MM:SS' string."""
    if payload.duration_hours is None:
        if not payload.duration:
            _reject("duration_hours or duration is required")
        try:
            return hhmmss_to_hours(payload.duration)
        except ValueError as e:
            _reject(str(e))

    if not math.isfinite(payload.duration_hours) or payload.duration_hours < 0:
        _reject("duration must be a finite number >= 0")
    return payload.duration_hours


def validate_payload(payload: TrainingCreate, kind: Optional[ActivityKind]) -> float:
    """Check inputs the formulas do not guard themselves; return duration in hours."""
    for name in ("weight", "height"):
        if not math.isfinite(getattr(payload, name)):
            _reject(f"{name} must be a finite number")
    duration = resolve_duration(payload)

    if payload.weight <= 0:
        _reject("weight must be > 0")
    if payload.action < 0:
        _reject("action must be >= 0")

    if kind is ActivityKind.walking and payload.height <= 0:
        _reject("height must be > 0 for walking")
    if kind is ActivityKind.swimming:
        if payload.length_pool <= 0:
            _reject("length_pool must be > 0 for swimming")
        if payload.count_pool < 0:
            _reject("count_pool must be >= 0")
    return duration


@router.get("/types", response_model=list[str])
def list_training_types():
    return [kind.value for kind in ActivityKind]


@router.post("/summary", response_model=TrainingSummary)
def training_summary(payload: TrainingCreate):
    kind = to_activity_kind(payload.training_type)
    if kind is None:
        _reject(f"Unknown training type: {payload.training_type}")

    duration = validate_payload(payload, kind)
    distance, speed, calories = training_metrics(
        kind,
        payload.action,
        duration,
        payload.weight,
        payload.height,
        payload.length_pool,
        payload.count_pool,
    )

    return TrainingSummary(
        training_type=kind,
        duration_hours=round(duration, 2),
        duration=hours_to_hhmmss(duration),
        distance_km=round(distance, 2),
        speed_kmh=round(speed, 2),
        calories=round(calories, 2),
    )


@router.post("/report", response_class=PlainTextResponse)
def training_report(payload: TrainingCreate):
    """
    Plain-text report in the fixed five-line layout.

    Unknown training types are not an error here: the body is the
    fallback message, whatever the other fields hold.
    """
    kind = to_activity_kind(payload.training_type)
    if kind is None:
        logger.info("Unknown training type: %r", payload.training_type)
        return UNKNOWN_TRAINING_MESSAGE

    duration = validate_payload(payload, kind)
    return show_training_info(
        payload.action,
        kind,
        duration,
        payload.weight,
        payload.height,
        payload.length_pool,
        payload.count_pool,
    )
