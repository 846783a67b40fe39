"""NEATService - non-exercise movement energy from daily steps."""

from typing import Iterable

from ..core.ports.calculators import INEATCalculator
from ..core.value_objects.activity import ZoneActivity
from ..core.value_objects.cardio_intensity import CardioIntensity
from ..core.value_objects.heart_rate_zone import HeartRateZone
from ..core.value_objects.profile import Profile

STRIDE_TO_HEIGHT_RATIO = 0.413
WALKING_SPEED_KMH = 4.8
WALKING_MET = 3.5
CM_PER_KM = 100000


def estimate_cardio_steps(duration_minutes: float, intensity: CardioIntensity) -> float:
    """Estimate steps taken during a cardio activity.

    Args:
        duration_minutes: Activity duration
        intensity: Cadence bucket (low 100, moderate 140, high 180 steps/min)

    Returns:
        float: Estimated step count

    Example:
        >>> estimate_cardio_steps(30, CardioIntensity.HIGH)
        5400
    """
    return duration_minutes * CardioIntensity(intensity).steps_per_minute()


def cardio_intensity_for_zone(zone: HeartRateZone) -> CardioIntensity:
    """Map a heart-rate zone to its step cadence bucket."""
    return HeartRateZone(zone).cardio_intensity()


def cardio_steps_for_activities(activities: Iterable[ZoneActivity]) -> float:
    """Sum steps attributable to logged cardio activities."""
    return sum(
        estimate_cardio_steps(activity.duration_minutes, cardio_intensity_for_zone(activity.zone))
        for activity in activities
    )


def net_steps(total_steps: float, cardio_steps: float) -> float:
    """Daily steps not already counted as cardio, floored at zero."""
    return max(0, total_steps - cardio_steps)


def neat_from_steps(
    total_steps: float,
    cardio_steps: float,
    height_cm: float,
    weight_kg: float,
) -> float:
    """Calculate NEAT (Non-Exercise Activity Thermogenesis) from steps.

    Cardio steps are subtracted first so movement already counted as
    exercise is not counted twice.

    Formula:
        stride(cm)   = height(cm) × 0.413
        distance(km) = net steps × stride / 100000
        time(h)      = distance / 4.8
        NEAT         = 3.5 MET × weight(kg) × time

    Args:
        total_steps: Raw daily step count
        cardio_steps: Steps attributed to logged cardio
        height_cm: Height in centimeters
        weight_kg: Body mass in kilograms

    Returns:
        float: NEAT energy in kcal
    """
    stride_length_cm = height_cm * STRIDE_TO_HEIGHT_RATIO
    distance_km = (net_steps(total_steps, cardio_steps) * stride_length_cm) / CM_PER_KM
    time_hours = distance_km / WALKING_SPEED_KMH
    return WALKING_MET * weight_kg * time_hours


class NEATService(INEATCalculator):
    """Calculate incidental movement energy for a profile."""

    def calculate(
        self,
        profile: Profile,
        total_steps: float,
        cardio_steps: float,
    ) -> float:
        return neat_from_steps(total_steps, cardio_steps, profile.height_cm, profile.weight_kg)
