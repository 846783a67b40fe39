"""DailyEnergyOrchestrator - coordinates the energy calculation services."""

from dataclasses import dataclass, field
from typing import Tuple

import structlog

from ...domain.calculation.bmr_service import BMRService
from ...domain.calculation.heart_rate_service import HeartRateZoneService
from ...domain.calculation.lifting_service import LiftingService
from ...domain.calculation.neat_service import (
    NEATService,
    cardio_intensity_for_zone,
    cardio_steps_for_activities,
    estimate_cardio_steps,
)
from ...domain.calculation.tdee_service import DEFAULT_CALIBRATION_FACTOR, TDEEService
from ...domain.core.ports.calculators import (
    IBMRCalculator,
    ILiftingEnergyCalculator,
    INEATCalculator,
    ITDEECalculator,
    IZoneEnergyCalculator,
)
from ...domain.core.value_objects.activity import LiftingSession, ZoneActivity
from ...domain.core.value_objects.energy import ActivityEnergy, EnergyBreakdown
from ...domain.core.value_objects.profile import Profile
from ...domain.core.value_objects.tef_level import TEFLevel

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DailyEnergyInput:
    """Everything needed for one daily energy calculation (metric units).

    Attributes:
        profile: User biometric data
        daily_steps: Raw step count for the day
        activities: Logged heart-rate zone activities
        lifting: Resistance training session (zero duration if none)
        tef_level: Diet type
        calibration_factor: Personal metabolic adjustment
    """

    profile: Profile
    daily_steps: float = 0
    activities: Tuple[ZoneActivity, ...] = ()
    lifting: LiftingSession = field(default_factory=LiftingSession)
    tef_level: TEFLevel = TEFLevel.BALANCED
    calibration_factor: float = DEFAULT_CALIBRATION_FACTOR

    def __post_init__(self):
        object.__setattr__(self, "tef_level", TEFLevel(self.tef_level))


class DailyEnergyOrchestrator:
    """
    Orchestrates calculation services into a full daily breakdown.

    Flow:
    1. Calculate BMR from the profile
    2. Calculate energy and attributed steps for each zone activity
    3. Calculate lifting energy (zero when no lifting logged)
    4. Calculate NEAT from daily steps net of cardio steps
    5. Compose TDEE with TEF and calibration

    Everything is recomputed on every call.
    """

    def __init__(
        self,
        bmr_service: IBMRCalculator,
        zone_service: IZoneEnergyCalculator,
        lifting_service: ILiftingEnergyCalculator,
        neat_service: INEATCalculator,
        tdee_service: ITDEECalculator,
    ):
        self._bmr_service = bmr_service
        self._zone_service = zone_service
        self._lifting_service = lifting_service
        self._neat_service = neat_service
        self._tdee_service = tdee_service

    @classmethod
    def create(cls) -> "DailyEnergyOrchestrator":
        """Build an orchestrator wired with the standard domain services."""
        return cls(
            bmr_service=BMRService(),
            zone_service=HeartRateZoneService(),
            lifting_service=LiftingService(),
            neat_service=NEATService(),
            tdee_service=TDEEService(),
        )

    def calculate(self, energy_input: DailyEnergyInput) -> EnergyBreakdown:
        """
        Calculate the complete daily energy breakdown.

        Args:
            energy_input: Profile, activities, steps and diet settings

        Returns:
            EnergyBreakdown with every component and the final TDEE
        """
        profile = energy_input.profile

        # Step 1: Basal metabolic rate
        bmr = self._bmr_service.calculate(profile)

        # Step 2: Cardio energy plus steps to exclude from NEAT
        activities = tuple(
            self._activity_energy(profile, activity) for activity in energy_input.activities
        )
        cardio_steps = cardio_steps_for_activities(energy_input.activities)
        zone_kcal = sum(activity.kcal for activity in activities)

        # Step 3: Resistance training
        lifting_kcal = self._lifting_service.calculate(profile, energy_input.lifting)

        # Step 4: Incidental movement
        neat_kcal = self._neat_service.calculate(profile, energy_input.daily_steps, cardio_steps)

        # Step 5: Compose
        tdee = self._tdee_service.calculate(
            bmr=bmr,
            exercise_kcal=zone_kcal + lifting_kcal,
            neat_kcal=neat_kcal,
            tef_level=energy_input.tef_level,
            calibration_factor=energy_input.calibration_factor,
        )

        breakdown = EnergyBreakdown(
            bmr=bmr,
            activities=activities,
            lifting_kcal=lifting_kcal,
            neat_kcal=neat_kcal,
            cardio_steps=cardio_steps,
            tef_level=energy_input.tef_level,
            calibration_factor=energy_input.calibration_factor,
            tdee=tdee,
        )

        logger.debug(
            "Daily energy calculated",
            bmr=round(bmr.value, 1),
            bmr_formula=bmr.formula,
            exercise_kcal=round(breakdown.exercise_kcal, 1),
            neat_kcal=round(neat_kcal, 1),
            tdee=breakdown.rounded_tdee,
        )
        return breakdown

    def _activity_energy(self, profile: Profile, activity: ZoneActivity) -> ActivityEnergy:
        kcal = self._zone_service.calculate(profile, activity)
        if kcal < 0:
            logger.info(
                "Negative activity energy kept as-is",
                zone=int(activity.zone),
                duration_minutes=activity.duration_minutes,
                kcal=round(kcal, 1),
            )
        return ActivityEnergy(
            zone=int(activity.zone),
            duration_minutes=activity.duration_minutes,
            kcal=kcal,
            cardio_steps=estimate_cardio_steps(
                activity.duration_minutes, cardio_intensity_for_zone(activity.zone)
            ),
            name=activity.name or "",
        )
