"""BMRService - Basal Metabolic Rate calculation."""

from dataclasses import dataclass
from typing import Optional, Union

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.energy import BMR
from ..core.value_objects.profile import Profile
from ..core.value_objects.sex import Sex


@dataclass(frozen=True)
class KatchMcArdle:
    """Katch-McArdle formula, driven by lean body mass.

    Formula:
        BMR = 370 + 21.6 × lean mass(kg)

    References:
        McArdle WD, Katch FI, Katch VL. Exercise Physiology:
        Energy, Nutrition, and Human Performance.
    """

    lean_mass_kg: float

    name = "katch_mcardle"

    @classmethod
    def from_body_fat(cls, weight_kg: float, body_fat_percent: float) -> "KatchMcArdle":
        """Derive lean mass from total mass and body-fat percentage."""
        return cls(lean_mass_kg=weight_kg * (1 - body_fat_percent / 100))

    def estimate(self) -> float:
        """Estimate BMR in kcal/day."""
        return 370 + 21.6 * self.lean_mass_kg


@dataclass(frozen=True)
class MifflinStJeor:
    """Mifflin-St Jeor equation, for when body composition is unknown.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    sex: Sex
    age_years: float
    height_cm: float
    weight_kg: float

    name = "mifflin_st_jeor"

    def estimate(self) -> float:
        """Estimate BMR in kcal/day."""
        base = 10 * self.weight_kg + 6.25 * self.height_cm - 5 * self.age_years
        if self.sex == Sex.MALE:
            return base + 5
        return base - 161


BMRFormula = Union[KatchMcArdle, MifflinStJeor]


def select_bmr_formula(
    sex: Sex,
    age_years: float,
    height_cm: float,
    weight_kg: float,
    body_fat_percent: Optional[float] = None,
) -> BMRFormula:
    """Pick the BMR formula supported by the available data.

    Katch-McArdle is used only when a strictly positive body-fat
    percentage is supplied; otherwise Mifflin-St Jeor. A missing body-fat
    value is a normal case, not an error.
    """
    if body_fat_percent is not None and body_fat_percent > 0:
        return KatchMcArdle.from_body_fat(weight_kg, body_fat_percent)
    return MifflinStJeor(
        sex=Sex(sex),
        age_years=age_years,
        height_cm=height_cm,
        weight_kg=weight_kg,
    )


def calculate_bmr(
    sex: Sex,
    age_years: float,
    height_cm: float,
    weight_kg: float,
    body_fat_percent: Optional[float] = None,
) -> float:
    """Calculate BMR choosing the best formula for the available data.

    Args:
        sex: Biological sex
        age_years: Age in years
        height_cm: Height in centimeters
        weight_kg: Body mass in kilograms
        body_fat_percent: Optional body-fat percentage

    Returns:
        float: BMR in kcal/day

    Example:
        >>> calculate_bmr(Sex.MALE, 30, 178, 82)
        1787.5
        >>> calculate_bmr(Sex.MALE, 30, 178, 80, body_fat_percent=20)
        1752.4
    """
    formula = select_bmr_formula(sex, age_years, height_cm, weight_kg, body_fat_percent)
    return formula.estimate()


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate from a profile.

    Katch-McArdle when body fat is known, Mifflin-St Jeor otherwise.
    """

    def calculate(self, profile: Profile) -> BMR:
        """Calculate BMR from profile biometric data.

        Args:
            profile: User biometric data

        Returns:
            BMR: Basal metabolic rate with the formula used
        """
        formula = select_bmr_formula(
            profile.sex,
            profile.age_years,
            profile.height_cm,
            profile.weight_kg,
            profile.body_fat_percent,
        )
        return BMR(value=formula.estimate(), formula=formula.name)
