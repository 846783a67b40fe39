"""Activity value objects - logged cardio and lifting sessions."""

from dataclasses import dataclass
from typing import Optional

from .heart_rate_zone import HeartRateZone
from .lifting_intensity import LiftingIntensity


@dataclass(frozen=True)
class ZoneActivity:
    """A cardio activity logged by heart-rate zone.

    Attributes:
        zone: Heart-rate zone the activity was performed in
        duration_minutes: Duration in minutes
        name: Optional label (e.g. "Morning run")
    """

    zone: HeartRateZone
    duration_minutes: float
    name: Optional[str] = None


@dataclass(frozen=True)
class LiftingSession:
    """A resistance training session.

    A zero-duration session is the "no lifting logged" case.

    Attributes:
        intensity: Training intensity
        duration_minutes: Duration in minutes (>= 0)
    """

    intensity: LiftingIntensity = LiftingIntensity.MODERATE
    duration_minutes: float = 0.0

    def is_logged(self) -> bool:
        """Check whether any lifting time was recorded."""
        return self.duration_minutes > 0
