"""TDEEService - Total Daily Energy Expenditure composition."""

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.energy import BMR, TDEE
from ..core.value_objects.tef_level import TEFLevel

DEFAULT_CALIBRATION_FACTOR = 1.0


def tef_multiplier(level: TEFLevel = TEFLevel.BALANCED) -> float:
    """Get Thermic Effect of Food multiplier for a diet type.

    Example:
        >>> tef_multiplier(TEFLevel.HIGH)
        1.15
    """
    return TEFLevel(level).multiplier()


def calculate_tdee(
    bmr_kcal: float,
    exercise_kcal: float,
    neat_kcal: float,
    tef_level: TEFLevel = TEFLevel.BALANCED,
    calibration_factor: float = DEFAULT_CALIBRATION_FACTOR,
) -> float:
    """Calculate final TDEE from all components.

    Formula:
        TDEE = (BMR + exercise + NEAT) × TEF × calibration

    Negative components are summed as-is. The result is linear in
    calibration_factor.

    Args:
        bmr_kcal: Basal metabolic rate
        exercise_kcal: Zone activities plus lifting
        neat_kcal: Non-exercise movement energy
        tef_level: Diet type (default balanced, 10%)
        calibration_factor: Personal adjustment, nominally 0.85-1.15

    Returns:
        float: TDEE in kcal/day

    Example:
        >>> round(calculate_tdee(1787.5, 0, 351.9, TEFLevel.BALANCED, 1.0), 2)
        2353.34
    """
    base = bmr_kcal + exercise_kcal + neat_kcal
    return base * tef_multiplier(tef_level) * calibration_factor


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    TDEE is the sum of basal, exercise and incidental movement energy,
    scaled by the thermic effect of food and a personal calibration.

    TEF multipliers:
        - Low (keto / high fat): 1.08
        - Balanced (default): 1.10
        - High protein: 1.15
    """

    def calculate(
        self,
        bmr: BMR,
        exercise_kcal: float,
        neat_kcal: float,
        tef_level: TEFLevel = TEFLevel.BALANCED,
        calibration_factor: float = DEFAULT_CALIBRATION_FACTOR,
    ) -> TDEE:
        """Calculate TDEE from BMR and activity components.

        Args:
            bmr: Basal metabolic rate
            exercise_kcal: Zone activities plus lifting
            neat_kcal: Non-exercise movement energy
            tef_level: Thermic effect of food level
            calibration_factor: Personal metabolic adjustment

        Returns:
            TDEE: Total daily energy expenditure in kcal/day
        """
        return TDEE(
            value=calculate_tdee(
                bmr.value, exercise_kcal, neat_kcal, tef_level, calibration_factor
            )
        )
