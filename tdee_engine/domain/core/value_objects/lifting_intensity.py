"""LiftingIntensity value object - resistance training effort."""

from enum import Enum
from types import MappingProxyType


class LiftingIntensity(str, Enum):
    """Resistance training intensity.

    - MODERATE: general weight training, 3.5 MET
    - VIGOROUS: heavy compound lifting / circuits, 6.0 MET
    """

    MODERATE = "moderate"
    VIGOROUS = "vigorous"

    def met(self) -> float:
        """Get Metabolic Equivalent of Task for this intensity.

        Example:
            >>> LiftingIntensity.VIGOROUS.met()
            6.0
        """
        return _LIFTING_MET[self]


_LIFTING_MET = MappingProxyType(
    {
        LiftingIntensity.MODERATE: 3.5,
        LiftingIntensity.VIGOROUS: 6.0,
    }
)
