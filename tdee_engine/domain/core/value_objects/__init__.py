"""Value objects for the daily energy expenditure domain."""

from .activity import LiftingSession, ZoneActivity
from .cardio_intensity import CardioIntensity
from .energy import BMR, TDEE, ActivityEnergy, EnergyBreakdown
from .heart_rate_zone import HeartRateZone
from .height import FeetInches
from .lifting_intensity import LiftingIntensity
from .profile import Profile
from .sex import Sex
from .tef_level import TEFLevel
from .unit_system import UnitSystem

__all__ = [
    "Sex",
    "HeartRateZone",
    "CardioIntensity",
    "LiftingIntensity",
    "TEFLevel",
    "UnitSystem",
    "Profile",
    "ZoneActivity",
    "LiftingSession",
    "FeetInches",
    "BMR",
    "TDEE",
    "ActivityEnergy",
    "EnergyBreakdown",
]
