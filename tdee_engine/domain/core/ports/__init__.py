"""Ports (interfaces) for energy calculations."""

from .calculators import (
    IBMRCalculator,
    ILiftingEnergyCalculator,
    INEATCalculator,
    ITDEECalculator,
    IZoneEnergyCalculator,
)

__all__ = [
    "IBMRCalculator",
    "IZoneEnergyCalculator",
    "ILiftingEnergyCalculator",
    "INEATCalculator",
    "ITDEECalculator",
]
