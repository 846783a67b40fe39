"""Profile value object - biometric data for energy calculations."""

from dataclasses import dataclass
from typing import Optional

from .sex import Sex


@dataclass(frozen=True)
class Profile:
    """User biometric data for BMR and activity energy calculations.

    Immutable value object. Mass and height are always metric; unit
    conversion happens at the input boundary, never inside formulas.

    Ranges are not enforced here (see domain.validation): formulas
    produce a numeric result for any real input.

    Attributes:
        sex: Biological sex
        age_years: Age in years (valid range 15-100)
        height_cm: Height in centimeters
        weight_kg: Body mass in kilograms
        body_fat_percent: Optional body-fat percentage (0-99)
    """

    sex: Sex
    age_years: float
    height_cm: float
    weight_kg: float
    body_fat_percent: Optional[float] = None

