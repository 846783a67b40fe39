"""EstimateTDEECommand - estimate daily energy from caller input."""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

import structlog
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ...domain.conversion.units import feet_inches_to_cm, lbs_to_kg
from ...domain.core.exceptions.domain_errors import (
    InputOutOfRangeError,
    InvalidEnergyInputError,
)
from ...domain.core.value_objects.activity import LiftingSession, ZoneActivity
from ...domain.core.value_objects.energy import EnergyBreakdown
from ...domain.core.value_objects.heart_rate_zone import HeartRateZone
from ...domain.core.value_objects.lifting_intensity import LiftingIntensity
from ...domain.core.value_objects.profile import Profile
from ...domain.core.value_objects.sex import Sex
from ...domain.core.value_objects.tef_level import TEFLevel
from ...domain.core.value_objects.unit_system import UnitSystem
from ...domain.validation.validators import RangeIssue, collect_range_issues
from ...infrastructure.config import EngineSettings
from ..orchestrators.daily_energy_orchestrator import (
    DailyEnergyInput,
    DailyEnergyOrchestrator,
)

logger = structlog.get_logger(__name__)


class ActivityInput(BaseModel):
    """A cardio activity as supplied by the caller."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    zone: HeartRateZone
    duration_minutes: float
    name: Optional[str] = None

    @field_validator("zone", mode="before")
    @classmethod
    def zone_from_text(cls, v: Any) -> Any:
        """Accept zone digits given as text (form fields, CLI)."""
        if isinstance(v, str) and v.strip().isdigit():
            return int(v)
        return v


class EstimateTDEECommand(BaseModel):
    """Command to estimate TDEE from raw caller input.

    Accepts metric (height_cm, weight_kg) or imperial (height_feet +
    height_inches, weight_lbs) measurements according to unit_system.
    Non-numeric values (including NaN and infinity) and unknown categories
    are rejected here, before reaching the engine. TEF level and
    calibration default to the configured values when omitted.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    sex: Sex
    age_years: float
    unit_system: UnitSystem = UnitSystem.METRIC
    height_cm: Optional[float] = None
    height_feet: Optional[float] = None
    height_inches: Optional[float] = None
    weight_kg: Optional[float] = None
    weight_lbs: Optional[float] = None
    body_fat_percent: Optional[float] = None
    daily_steps: float = 0
    activities: List[ActivityInput] = Field(default_factory=list)
    lifting_minutes: float = 0
    lifting_intensity: LiftingIntensity = LiftingIntensity.MODERATE
    tef_level: Optional[TEFLevel] = None
    calibration_factor: Optional[float] = None

    @model_validator(mode="after")
    def measurements_match_unit_system(self) -> "EstimateTDEECommand":
        """Ensure height and weight are given in the selected system."""
        if self.unit_system == UnitSystem.METRIC:
            if self.height_cm is None or self.weight_kg is None:
                raise ValueError("metric input requires height_cm and weight_kg")
        else:
            if self.height_feet is None or self.weight_lbs is None:
                raise ValueError("imperial input requires height_feet and weight_lbs")
        return self

    def metric_height_cm(self) -> float:
        """Height in centimeters, converted at the boundary if imperial."""
        if self.unit_system == UnitSystem.METRIC:
            return float(self.height_cm)
        return feet_inches_to_cm(self.height_feet, self.height_inches or 0)

    def metric_weight_kg(self) -> float:
        """Weight in kilograms, converted at the boundary if imperial."""
        if self.unit_system == UnitSystem.METRIC:
            return float(self.weight_kg)
        return lbs_to_kg(self.weight_lbs)


def parse_command(raw: Mapping[str, Any]) -> EstimateTDEECommand:
    """Build a command from untyped input (form fields, JSON, CLI).

    Raises:
        InvalidEnergyInputError: If any value is malformed or unknown
    """
    try:
        return EstimateTDEECommand.model_validate(dict(raw))
    except ValidationError as e:
        raise InvalidEnergyInputError(str(e)) from e


@dataclass(frozen=True)
class EstimateTDEEResult:
    """Result of a TDEE estimate.

    Attributes:
        breakdown: Full energy breakdown
        issues: Advisory out-of-range inputs (empty when all valid)
        height_cm: Height used by the engine
        weight_kg: Weight used by the engine
    """

    breakdown: EnergyBreakdown
    issues: Tuple[RangeIssue, ...]
    height_cm: float
    weight_kg: float

    @property
    def tdee(self) -> float:
        return self.breakdown.tdee.value

    def has_issues(self) -> bool:
        return bool(self.issues)


class EstimateTDEEHandler:
    """Handler for EstimateTDEECommand.

    Estimates TDEE by:
    1. Converting measurements to metric
    2. Resolving TEF level and calibration defaults from settings
    3. Checking ranges (advisory, or rejecting in strict mode)
    4. Running the daily energy orchestrator
    """

    def __init__(
        self,
        orchestrator: DailyEnergyOrchestrator,
        settings: Optional[EngineSettings] = None,
    ):
        self._orchestrator = orchestrator
        self._settings = settings or EngineSettings()

    def handle(self, command: EstimateTDEECommand) -> EstimateTDEEResult:
        """
        Handle TDEE estimate command.

        Args:
            command: Validated caller input

        Returns:
            EstimateTDEEResult with breakdown and any range issues

        Raises:
            InputOutOfRangeError: If strict validation is on and any input
                is outside its accepted range
        """
        height_cm = command.metric_height_cm()
        weight_kg = command.metric_weight_kg()
        tef_level = command.tef_level or self._settings.default_tef_level
        calibration = (
            command.calibration_factor
            if command.calibration_factor is not None
            else self._settings.default_calibration
        )

        issues = collect_range_issues(
            age_years=command.age_years,
            height_cm=height_cm,
            weight_kg=weight_kg,
            body_fat_percent=command.body_fat_percent,
            daily_steps=command.daily_steps,
            activity_durations=[activity.duration_minutes for activity in command.activities],
            lifting_minutes=command.lifting_minutes,
            calibration_factor=calibration,
        )
        if issues:
            if self._settings.strict_validation:
                raise InputOutOfRangeError(issues)
            logger.warning("Input out of range", issues=[str(issue) for issue in issues])

        energy_input = DailyEnergyInput(
            profile=Profile(
                sex=command.sex,
                age_years=command.age_years,
                height_cm=height_cm,
                weight_kg=weight_kg,
                body_fat_percent=command.body_fat_percent,
            ),
            daily_steps=command.daily_steps,
            activities=tuple(
                ZoneActivity(
                    zone=activity.zone,
                    duration_minutes=activity.duration_minutes,
                    name=activity.name,
                )
                for activity in command.activities
            ),
            lifting=LiftingSession(
                intensity=command.lifting_intensity,
                duration_minutes=command.lifting_minutes,
            ),
            tef_level=tef_level,
            calibration_factor=calibration,
        )
        breakdown = self._orchestrator.calculate(energy_input)

        logger.info(
            "TDEE estimated",
            tdee=breakdown.rounded_tdee,
            unit_system=command.unit_system.value,
            activities=len(command.activities),
            issues=len(issues),
        )
        return EstimateTDEEResult(
            breakdown=breakdown,
            issues=issues,
            height_cm=height_cm,
            weight_kg=weight_kg,
        )
