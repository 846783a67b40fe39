"""TEFLevel value object - thermic effect of food by diet type."""

from enum import Enum
from types import MappingProxyType


class TEFLevel(str, Enum):
    """Thermic Effect of Food level for TDEE calculation.

    Energy spent digesting, absorbing and processing nutrients:
    - LOW: low protein / high fat diets (keto), 8%
    - BALANCED: mixed macronutrients, 10% (default)
    - HIGH: high protein diets (150g+ daily), 15%
    """

    LOW = "low"
    BALANCED = "balanced"
    HIGH = "high"

    def multiplier(self) -> float:
        """Get TEF multiplier applied to base TDEE.

        Returns:
            float: Multiplier (1 + TEF fraction)

        Example:
            >>> TEFLevel.BALANCED.multiplier()
            1.1
        """
        return _TEF_MULTIPLIERS[self]

    def description(self) -> str:
        """Get human-readable description.

        Returns:
            str: Diet type label
        """
        return _TEF_DESCRIPTIONS[self]


_TEF_MULTIPLIERS = MappingProxyType(
    {
        TEFLevel.LOW: 1.08,
        TEFLevel.BALANCED: 1.10,
        TEFLevel.HIGH: 1.15,
    }
)

_TEF_DESCRIPTIONS = MappingProxyType(
    {
        TEFLevel.LOW: "Low Protein / High Fat - 8% TEF",
        TEFLevel.BALANCED: "Balanced Diet - 10% TEF",
        TEFLevel.HIGH: "High Protein - 15% TEF",
    }
)
