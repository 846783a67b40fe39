"""Input range validators for the energy engine."""

from .validators import (
    RANGES,
    RangeIssue,
    collect_range_issues,
    is_valid_age,
    is_valid_body_fat,
    is_valid_calibration,
    is_valid_duration,
    is_valid_heart_rate,
    is_valid_height_cm,
    is_valid_steps,
    is_valid_weight_kg,
    validation,
)

__all__ = [
    "RANGES",
    "RangeIssue",
    "collect_range_issues",
    "validation",
    "is_valid_age",
    "is_valid_height_cm",
    "is_valid_weight_kg",
    "is_valid_body_fat",
    "is_valid_steps",
    "is_valid_duration",
    "is_valid_heart_rate",
    "is_valid_calibration",
]
