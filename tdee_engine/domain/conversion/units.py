"""Unit conversion between imperial and metric.

Conversions are exact: rounding for display is the caller's concern.
Formulas downstream only ever receive metric values.
"""

import math
from types import SimpleNamespace

from ..core.value_objects.height import FeetInches

KG_PER_LB = 0.453592
LB_PER_KG = 2.20462
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms."""
    return lbs * KG_PER_LB


def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg * LB_PER_KG


def inches_to_cm(inches: float) -> float:
    """Convert inches to centimeters."""
    return inches * CM_PER_INCH


def cm_to_inches(cm: float) -> float:
    """Convert centimeters to inches."""
    return cm / CM_PER_INCH


def feet_inches_to_cm(feet: float, inches: float) -> float:
    """Convert a feet + inches height to centimeters.

    Example:
        >>> feet_inches_to_cm(5, 10)
        177.8
    """
    return (feet * INCHES_PER_FOOT + inches) * CM_PER_INCH


def cm_to_feet_inches(cm: float) -> FeetInches:
    """Convert centimeters to whole feet and rounded inches.

    Inches are rounded half-up. A remainder that rounds up to 12 carries
    into feet, so the returned inches are always in [0, 11].

    Args:
        cm: Height in centimeters

    Returns:
        FeetInches: Imperial height

    Example:
        >>> cm_to_feet_inches(178)
        FeetInches(feet=5, inches=10)
        >>> cm_to_feet_inches(182.6)  # 71.89 in -> 5'12" without carry
        FeetInches(feet=6, inches=0)
    """
    total_inches = cm / CM_PER_INCH
    feet = math.floor(total_inches / INCHES_PER_FOOT)
    inches = math.floor(total_inches % INCHES_PER_FOOT + 0.5)
    if inches >= INCHES_PER_FOOT:
        feet += 1
        inches -= INCHES_PER_FOOT
    return FeetInches(feet=int(feet), inches=int(inches))


convert_units = SimpleNamespace(
    lbs_to_kg=lbs_to_kg,
    kg_to_lbs=kg_to_lbs,
    inches_to_cm=inches_to_cm,
    cm_to_inches=cm_to_inches,
    feet_inches_to_cm=feet_inches_to_cm,
    cm_to_feet_inches=cm_to_feet_inches,
)
