"""Energy value objects - BMR, TDEE and the full daily breakdown."""

from dataclasses import dataclass
from typing import Dict, Tuple

from .tef_level import TEFLevel


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Minimum energy needed for basic bodily functions at rest.
    Any real value is accepted: formulas are total over their inputs.

    Attributes:
        value: BMR in kcal/day
        formula: Name of the formula that produced the value
    """

    value: float
    formula: str = "mifflin_st_jeor"

    def __str__(self) -> str:
        """String representation.

        Returns:
            str: BMR with unit
        """
        return f"{self.value:.0f} kcal/day"


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as:
        TDEE = (BMR + exercise + NEAT) × TEF multiplier × calibration

    Attributes:
        value: TDEE in kcal/day
    """

    value: float

    def __str__(self) -> str:
        """String representation.

        Returns:
            str: TDEE with unit
        """
        return f"{self.value:.0f} kcal/day"


@dataclass(frozen=True)
class ActivityEnergy:
    """Energy cost of one logged cardio activity.

    Attributes:
        zone: Heart-rate zone number (1-5)
        duration_minutes: Duration in minutes
        kcal: Estimated energy cost (may be negative for extreme inputs)
        cardio_steps: Steps attributed to the activity
        name: Optional activity label
    """

    zone: int
    duration_minutes: float
    kcal: float
    cardio_steps: float
    name: str = ""


@dataclass(frozen=True)
class EnergyBreakdown:
    """Complete result of a daily energy calculation.

    Every component is kept raw and signed; rounding is a display concern.

    Attributes:
        bmr: Basal metabolic rate
        activities: Per-activity cardio energy
        lifting_kcal: Resistance training energy (0 when not logged)
        neat_kcal: Non-exercise movement energy
        cardio_steps: Steps attributed to cardio and removed from NEAT
        tef_level: Thermic effect level applied
        calibration_factor: Personal calibration scalar applied
        tdee: Final total daily energy expenditure
    """

    bmr: BMR
    activities: Tuple[ActivityEnergy, ...]
    lifting_kcal: float
    neat_kcal: float
    cardio_steps: float
    tef_level: TEFLevel
    calibration_factor: float
    tdee: TDEE

    @property
    def zone_kcal(self) -> float:
        """Sum of heart-rate zone activity energy."""
        return sum(activity.kcal for activity in self.activities)

    @property
    def exercise_kcal(self) -> float:
        """Total exercise energy: zone activities plus lifting."""
        return self.zone_kcal + self.lifting_kcal

    @property
    def base_kcal(self) -> float:
        """BMR + exercise + NEAT, before TEF and calibration."""
        return self.bmr.value + self.exercise_kcal + self.neat_kcal

    @property
    def tef_multiplier(self) -> float:
        """Thermic effect multiplier applied to base energy."""
        return self.tef_level.multiplier()

    @property
    def tef_kcal(self) -> float:
        """Energy added on top of base by TEF and calibration."""
        return self.tdee.value - self.base_kcal

    @property
    def rounded_tdee(self) -> int:
        """TDEE rounded to the nearest whole kcal for display."""
        return int(round(self.tdee.value))

    def component_shares(self) -> Dict[str, float]:
        """Get percentage of base energy contributed by each component.

        Returns:
            Dict[str, float]: Percent share for "bmr", "exercise" and "neat";
                all zero when base energy is not positive
        """
        total = self.base_kcal
        if total <= 0:
            return {"bmr": 0.0, "exercise": 0.0, "neat": 0.0}
        return {
            "bmr": self.bmr.value / total * 100,
            "exercise": self.exercise_kcal / total * 100,
            "neat": self.neat_kcal / total * 100,
        }

    def to_dict(self) -> Dict[str, object]:
        """Serialize breakdown to plain types (JSON friendly)."""
        return {
            "bmr": self.bmr.value,
            "bmr_formula": self.bmr.formula,
            "activities": [
                {
                    "name": activity.name,
                    "zone": activity.zone,
                    "duration_minutes": activity.duration_minutes,
                    "kcal": activity.kcal,
                    "cardio_steps": activity.cardio_steps,
                }
                for activity in self.activities
            ],
            "zone_kcal": self.zone_kcal,
            "lifting_kcal": self.lifting_kcal,
            "exercise_kcal": self.exercise_kcal,
            "neat_kcal": self.neat_kcal,
            "cardio_steps": self.cardio_steps,
            "base_kcal": self.base_kcal,
            "tef_level": self.tef_level.value,
            "tef_multiplier": self.tef_multiplier,
            "tef_kcal": self.tef_kcal,
            "calibration_factor": self.calibration_factor,
            "tdee": self.tdee.value,
            "component_shares": self.component_shares(),
        }
