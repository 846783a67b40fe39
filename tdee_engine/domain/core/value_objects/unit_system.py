"""UnitSystem value object - measurement system of caller input."""

from enum import Enum


class UnitSystem(str, Enum):
    """Measurement system used at the input boundary.

    The engine itself only ever sees metric values.
    """

    IMPERIAL = "imperial"
    METRIC = "metric"
