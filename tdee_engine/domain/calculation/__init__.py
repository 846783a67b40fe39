"""Calculation services for daily energy expenditure."""

from .bmr_service import (
    BMRFormula,
    BMRService,
    KatchMcArdle,
    MifflinStJeor,
    calculate_bmr,
    select_bmr_formula,
)
from .heart_rate_service import (
    HeartRateZoneService,
    average_heart_rate,
    calories_from_heart_rate,
    max_heart_rate,
    zone_calories,
)
from .lifting_service import LiftingService, lifting_calories
from .neat_service import (
    NEATService,
    cardio_intensity_for_zone,
    cardio_steps_for_activities,
    estimate_cardio_steps,
    neat_from_steps,
    net_steps,
)
from .tdee_service import TDEEService, calculate_tdee, tef_multiplier

__all__ = [
    "BMRService",
    "HeartRateZoneService",
    "LiftingService",
    "NEATService",
    "TDEEService",
    "BMRFormula",
    "KatchMcArdle",
    "MifflinStJeor",
    "select_bmr_formula",
    "calculate_bmr",
    "max_heart_rate",
    "average_heart_rate",
    "calories_from_heart_rate",
    "zone_calories",
    "lifting_calories",
    "estimate_cardio_steps",
    "cardio_intensity_for_zone",
    "cardio_steps_for_activities",
    "net_steps",
    "neat_from_steps",
    "tef_multiplier",
    "calculate_tdee",
]
