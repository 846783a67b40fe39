"""CardioIntensity value object - step cadence bucket for cardio."""

from enum import Enum
from types import MappingProxyType


class CardioIntensity(str, Enum):
    """Cadence bucket used to estimate steps taken during cardio.

    Not to be confused with LiftingIntensity: this bucket only drives the
    cardio step attribution that keeps NEAT from double-counting movement.
    """

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    def steps_per_minute(self) -> int:
        """Get estimated cadence for this bucket.

        Returns:
            int: Steps per minute (walking, jogging, running)

        Example:
            >>> CardioIntensity.MODERATE.steps_per_minute()
            140
        """
        return _STEPS_PER_MINUTE[self]


_STEPS_PER_MINUTE = MappingProxyType(
    {
        CardioIntensity.LOW: 100,  # Walking pace
        CardioIntensity.MODERATE: 140,  # Jogging
        CardioIntensity.HIGH: 180,  # Running
    }
)
