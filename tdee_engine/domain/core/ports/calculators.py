"""Calculator ports - interfaces for the daily energy components."""

from abc import ABC, abstractmethod

from ..value_objects.activity import LiftingSession, ZoneActivity
from ..value_objects.energy import BMR, TDEE
from ..value_objects.profile import Profile
from ..value_objects.tef_level import TEFLevel


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Chooses between Katch-McArdle and Mifflin-St Jeor.
    """

    @abstractmethod
    def calculate(self, profile: Profile) -> BMR:
        """Calculate BMR from profile.

        Args:
            profile: User biometric data

        Returns:
            BMR: Calculated basal metabolic rate
        """
        pass


class IZoneEnergyCalculator(ABC):
    """Port for heart-rate zone activity energy."""

    @abstractmethod
    def calculate(self, profile: Profile, activity: ZoneActivity) -> float:
        """Calculate energy cost of a zone activity in kcal.

        Args:
            profile: User biometric data
            activity: Logged cardio activity

        Returns:
            float: Energy cost in kcal (signed)
        """
        pass


class ILiftingEnergyCalculator(ABC):
    """Port for resistance training energy."""

    @abstractmethod
    def calculate(self, profile: Profile, session: LiftingSession) -> float:
        """Calculate energy cost of a lifting session in kcal.

        Args:
            profile: User biometric data
            session: Lifting session

        Returns:
            float: Energy cost including recovery overhead
        """
        pass


class INEATCalculator(ABC):
    """Port for non-exercise movement energy."""

    @abstractmethod
    def calculate(
        self,
        profile: Profile,
        total_steps: float,
        cardio_steps: float,
    ) -> float:
        """Calculate NEAT energy from daily steps net of cardio steps.

        Args:
            profile: User biometric data
            total_steps: Raw daily step count
            cardio_steps: Steps attributed to logged cardio

        Returns:
            float: NEAT energy in kcal
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE composition.

    Sums components, applies TEF and calibration.
    """

    @abstractmethod
    def calculate(
        self,
        bmr: BMR,
        exercise_kcal: float,
        neat_kcal: float,
        tef_level: TEFLevel,
        calibration_factor: float,
    ) -> TDEE:
        """Calculate TDEE from its components.

        Args:
            bmr: Basal metabolic rate
            exercise_kcal: Zone activities plus lifting energy
            neat_kcal: Non-exercise movement energy
            tef_level: Thermic effect of food level
            calibration_factor: Personal metabolic adjustment

        Returns:
            TDEE: Total daily energy expenditure
        """
        pass
