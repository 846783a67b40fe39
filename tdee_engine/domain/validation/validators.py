"""Input range validators.

Pure predicates used at the input boundary. Formula functions never call
them: out-of-range input still produces a (possibly non-physiological)
number when passed to the engine directly.
"""

from dataclasses import dataclass
from types import MappingProxyType, SimpleNamespace
from typing import Iterable, Optional, Tuple

# Inclusive (minimum, maximum) per input field
RANGES = MappingProxyType(
    {
        "age": (15, 100),
        "height_cm": (120, 230),
        "weight_kg": (35, 225),
        "body_fat": (5, 50),
        "steps": (0, 50000),
        "duration": (0, 240),
        "heart_rate": (40, 220),
        "calibration": (0.85, 1.15),
    }
)


def _in_range(field_name: str, value: float) -> bool:
    minimum, maximum = RANGES[field_name]
    return minimum <= value <= maximum


def is_valid_age(age_years: float) -> bool:
    return _in_range("age", age_years)


def is_valid_height_cm(height_cm: float) -> bool:
    return _in_range("height_cm", height_cm)


def is_valid_weight_kg(weight_kg: float) -> bool:
    return _in_range("weight_kg", weight_kg)


def is_valid_body_fat(percent: float) -> bool:
    return _in_range("body_fat", percent)


def is_valid_steps(steps: float) -> bool:
    return _in_range("steps", steps)


def is_valid_duration(minutes: float) -> bool:
    return _in_range("duration", minutes)


def is_valid_heart_rate(bpm: float) -> bool:
    return _in_range("heart_rate", bpm)


def is_valid_calibration(factor: float) -> bool:
    return _in_range("calibration", factor)


validation = SimpleNamespace(
    age=is_valid_age,
    height_cm=is_valid_height_cm,
    weight_kg=is_valid_weight_kg,
    body_fat=is_valid_body_fat,
    steps=is_valid_steps,
    duration=is_valid_duration,
    heart_rate=is_valid_heart_rate,
    calibration=is_valid_calibration,
)


@dataclass(frozen=True)
class RangeIssue:
    """An input that falls outside its accepted range.

    Advisory only: the caller decides whether to reject or proceed.

    Attributes:
        field: Input name (e.g. "age", "activities[0].duration")
        value: Offending value
        minimum: Inclusive lower bound
        maximum: Inclusive upper bound
    """

    field: str
    value: float
    minimum: float
    maximum: float

    def __str__(self) -> str:
        return f"{self.field}={self.value} not in [{self.minimum}, {self.maximum}]"


def collect_range_issues(
    age_years: float,
    height_cm: float,
    weight_kg: float,
    body_fat_percent: Optional[float] = None,
    daily_steps: float = 0,
    activity_durations: Iterable[float] = (),
    lifting_minutes: float = 0,
    calibration_factor: float = 1.0,
) -> Tuple[RangeIssue, ...]:
    """Check every caller input against its accepted range.

    A missing or zero body fat is not an issue: it selects Mifflin-St Jeor.

    Returns:
        Tuple[RangeIssue, ...]: Issues in input order; empty when all valid
    """
    checks = [
        ("age", "age", age_years),
        ("height_cm", "height_cm", height_cm),
        ("weight_kg", "weight_kg", weight_kg),
    ]
    if body_fat_percent is not None and body_fat_percent > 0:
        checks.append(("body_fat", "body_fat", body_fat_percent))
    checks.append(("steps", "steps", daily_steps))
    for index, minutes in enumerate(activity_durations):
        checks.append((f"activities[{index}].duration", "duration", minutes))
    checks.append(("lifting.duration", "duration", lifting_minutes))
    checks.append(("calibration", "calibration", calibration_factor))

    issues = []
    for label, range_key, value in checks:
        if not _in_range(range_key, value):
            minimum, maximum = RANGES[range_key]
            issues.append(RangeIssue(field=label, value=value, minimum=minimum, maximum=maximum))
    return tuple(issues)
