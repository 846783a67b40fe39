"""Unit conversion helpers (imperial <-> metric)."""

from .units import (
    cm_to_feet_inches,
    cm_to_inches,
    convert_units,
    feet_inches_to_cm,
    inches_to_cm,
    kg_to_lbs,
    lbs_to_kg,
)

__all__ = [
    "convert_units",
    "lbs_to_kg",
    "kg_to_lbs",
    "inches_to_cm",
    "cm_to_inches",
    "feet_inches_to_cm",
    "cm_to_feet_inches",
]
