"""HeartRateZoneService - cardio energy from heart-rate zones."""

from ..core.ports.calculators import IZoneEnergyCalculator
from ..core.value_objects.activity import ZoneActivity
from ..core.value_objects.heart_rate_zone import HeartRateZone
from ..core.value_objects.profile import Profile
from ..core.value_objects.sex import Sex

KJ_PER_KCAL = 4.184


def max_heart_rate(age_years: float) -> float:
    """Estimate maximum heart rate as 220 - age.

    No clamping: ages outside 15-100 give non-physiological values.
    """
    return 220 - age_years


def average_heart_rate(zone: HeartRateZone, age_years: float) -> float:
    """Convert a heart-rate zone to a representative average heart rate.

    Args:
        zone: Heart-rate zone (1-5)
        age_years: Age in years

    Returns:
        float: Average heart rate in bpm

    Example:
        >>> average_heart_rate(HeartRateZone.ZONE_3, 30)
        142.5
    """
    return max_heart_rate(age_years) * HeartRateZone(zone).midpoint()


def calories_from_heart_rate(
    sex: Sex,
    age_years: float,
    weight_kg: float,
    heart_rate_bpm: float,
    duration_minutes: float,
) -> float:
    """Estimate energy expended from average heart rate.

    Sex-specific regression producing kJ/min, converted to kcal:
        Men:   d × (0.6309 × HR + 0.1988 × w + 0.2017 × age - 55.0969) / 4.184
        Women: d × (0.4472 × HR - 0.1263 × w + 0.074 × age - 20.4022) / 4.184

    Results can be negative for very low heart rates; they are returned
    unchanged.

    References:
        Keytel LR, Goedecke JH, Noakes TD, et al. Prediction of energy
        expenditure from heart rate monitoring during submaximal exercise.
        J Sports Sci. 2005;23(3):289-297.
    """
    if Sex(sex) == Sex.MALE:
        kj_per_minute = (
            0.6309 * heart_rate_bpm + 0.1988 * weight_kg + 0.2017 * age_years - 55.0969
        )
    else:
        kj_per_minute = (
            0.4472 * heart_rate_bpm - 0.1263 * weight_kg + 0.074 * age_years - 20.4022
        )
    return (duration_minutes * kj_per_minute) / KJ_PER_KCAL


def zone_calories(
    sex: Sex,
    age_years: float,
    weight_kg: float,
    zone: HeartRateZone,
    duration_minutes: float,
) -> float:
    """Estimate energy of a cardio activity performed in a heart-rate zone."""
    heart_rate = average_heart_rate(zone, age_years)
    return calories_from_heart_rate(sex, age_years, weight_kg, heart_rate, duration_minutes)


class HeartRateZoneService(IZoneEnergyCalculator):
    """Calculate cardio energy via estimated average heart rate."""

    def calculate(self, profile: Profile, activity: ZoneActivity) -> float:
        return zone_calories(
            profile.sex,
            profile.age_years,
            profile.weight_kg,
            activity.zone,
            activity.duration_minutes,
        )
