"""Domain exceptions for daily energy expenditure."""

from typing import Sequence


class EnergyDomainError(Exception):
    """Base exception for energy expenditure domain errors."""

    pass


class InvalidEnergyInputError(EnergyDomainError):
    """Raised when caller input cannot be turned into engine arguments.

    Covers malformed values (non-numeric text) and unknown categorical
    keys such as a zone outside 1-5.
    """

    pass


class InputOutOfRangeError(InvalidEnergyInputError):
    """Raised in strict mode when inputs fall outside accepted ranges."""

    def __init__(self, issues: Sequence[object]):
        details = "; ".join(str(issue) for issue in issues)
        super().__init__(f"Input out of range: {details}")
        self.issues = tuple(issues)
