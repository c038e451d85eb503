from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ActivityKind(str, Enum):
    running = "Бег"
    walking = "Ходьба"
    swimming = "Плавание"


class TrainingCreate(BaseModel):
    """Schema for a training session submitted for calculation."""

    # Free text so unknown types reach the report fallback instead of a 422
    training_type: str

    action: int = 0  # steps, or strokes when swimming

    duration_hours: Optional[float] = None
    duration: Optional[str] = None  # "HH:MM:SS", used when duration_hours is missing

    weight: float  # kg
    height: float = 0  # cm, walking only

    length_pool: int = 0  # m, swimming only
    count_pool: int = 0

    model_config = ConfigDict(extra="ignore")


class TrainingSummary(BaseModel):
    """Computed metrics returned to the client."""

    training_type: ActivityKind
    duration_hours: float
    duration: str  # "HH:MM:SS"
    distance_km: float
    speed_kmh: float
    calories: float
