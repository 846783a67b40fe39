"""Domain exceptions for daily energy expenditure."""

from .domain_errors import (
    EnergyDomainError,
    InputOutOfRangeError,
    InvalidEnergyInputError,
)

__all__ = [
    "EnergyDomainError",
    "InvalidEnergyInputError",
    "InputOutOfRangeError",
]
