"""Sex value object - selects sex-specific regression coefficients."""

from enum import Enum


class Sex(str, Enum):
    """Biological sex used by BMR and heart-rate energy formulas."""

    MALE = "male"
    FEMALE = "female"
