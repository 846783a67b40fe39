"""LiftingService - resistance training energy with recovery overhead."""

from ..core.ports.calculators import ILiftingEnergyCalculator
from ..core.value_objects.activity import LiftingSession
from ..core.value_objects.lifting_intensity import LiftingIntensity
from ..core.value_objects.profile import Profile

# Afterburn (EPOC) adds ~10% on top of the session cost
RECOVERY_OVERHEAD = 0.10


def lifting_calories(
    weight_kg: float,
    intensity: LiftingIntensity,
    duration_minutes: float,
) -> float:
    """Estimate weight lifting energy including afterburn.

    Formula:
        base  = MET × weight(kg) × hours
        total = base × 1.10

    Args:
        weight_kg: Body mass in kilograms
        intensity: Moderate (3.5 MET) or vigorous (6.0 MET)
        duration_minutes: Session length; zero yields zero

    Returns:
        float: Energy in kcal

    Example:
        >>> lifting_calories(80, LiftingIntensity.VIGOROUS, 60)
        528.0
    """
    base = LiftingIntensity(intensity).met() * weight_kg * (duration_minutes / 60)
    return base * (1 + RECOVERY_OVERHEAD)


class LiftingService(ILiftingEnergyCalculator):
    """Calculate resistance training energy for a profile."""

    def calculate(self, profile: Profile, session: LiftingSession) -> float:
        if not session.is_logged():
            return 0.0
        return lifting_calories(profile.weight_kg, session.intensity, session.duration_minutes)
