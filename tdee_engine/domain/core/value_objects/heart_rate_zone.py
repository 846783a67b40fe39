"""HeartRateZone value object - ordinal exercise intensity bucket."""

from enum import IntEnum
from types import MappingProxyType

from .cardio_intensity import CardioIntensity


class HeartRateZone(IntEnum):
    """Heart-rate training zone (1-5) relative to maximum heart rate.

    A zone is an ordinal bucket, not a measurement. Each zone maps to a
    representative midpoint fraction of max HR:
    - ZONE_1: 50-60% -> 0.55
    - ZONE_2: 60-70% -> 0.65
    - ZONE_3: 70-80% -> 0.75
    - ZONE_4: 80-90% -> 0.85
    - ZONE_5: 90%+   -> 0.95
    """

    ZONE_1 = 1
    ZONE_2 = 2
    ZONE_3 = 3
    ZONE_4 = 4
    ZONE_5 = 5

    def midpoint(self) -> float:
        """Get representative fraction of maximum heart rate.

        Returns:
            float: Midpoint fraction of max HR

        Example:
            >>> HeartRateZone.ZONE_3.midpoint()
            0.75
        """
        return _ZONE_MIDPOINTS[self]

    def cardio_intensity(self) -> CardioIntensity:
        """Get the step cadence bucket for this zone.

        Zones 1-2 are walking pace, zone 3 jogging, zones 4-5 running.
        """
        return _ZONE_CADENCE[self]

    def description(self) -> str:
        """Get human-readable description.

        Returns:
            str: Zone label with heart-rate range
        """
        return _ZONE_DESCRIPTIONS[self]


_ZONE_MIDPOINTS = MappingProxyType(
    {
        HeartRateZone.ZONE_1: 0.55,
        HeartRateZone.ZONE_2: 0.65,
        HeartRateZone.ZONE_3: 0.75,
        HeartRateZone.ZONE_4: 0.85,
        HeartRateZone.ZONE_5: 0.95,
    }
)

_ZONE_CADENCE = MappingProxyType(
    {
        HeartRateZone.ZONE_1: CardioIntensity.LOW,
        HeartRateZone.ZONE_2: CardioIntensity.LOW,
        HeartRateZone.ZONE_3: CardioIntensity.MODERATE,
        HeartRateZone.ZONE_4: CardioIntensity.HIGH,
        HeartRateZone.ZONE_5: CardioIntensity.HIGH,
    }
)

_ZONE_DESCRIPTIONS = MappingProxyType(
    {
        HeartRateZone.ZONE_1: "Zone 1 (50-60% max HR) - Very Light",
        HeartRateZone.ZONE_2: "Zone 2 (60-70% max HR) - Light",
        HeartRateZone.ZONE_3: "Zone 3 (70-80% max HR) - Moderate",
        HeartRateZone.ZONE_4: "Zone 4 (80-90% max HR) - Hard",
        HeartRateZone.ZONE_5: "Zone 5 (90%+ max HR) - Maximum",
    }
)
