"""FeetInches value object - imperial height."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FeetInches:
    """Height expressed in whole feet and inches.

    Attributes:
        feet: Whole feet
        inches: Remaining inches (0-11 when produced by conversion)
    """

    feet: int
    inches: int

    def __str__(self) -> str:
        """String representation.

        Returns:
            str: Height as 5'10"
        """
        return f"{self.feet}'{self.inches}\""
