"""Configuration utilities for the energy engine.

Settings come from environment variables, optionally seeded from a
``.env`` file. Example .env:

    TDEE_DEFAULT_TEF_LEVEL=high
    TDEE_DEFAULT_CALIBRATION=0.95
    TDEE_STRICT_VALIDATION=true
    LOG_LEVEL=DEBUG
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import structlog
from dotenv import load_dotenv

from ..domain.core.value_objects.tef_level import TEFLevel
from ..domain.validation.validators import is_valid_calibration

logger = structlog.get_logger(__name__)

DEFAULT_TEF_LEVEL = TEFLevel.BALANCED
DEFAULT_CALIBRATION = 1.0
DEFAULT_LOG_LEVEL = "INFO"


def load_env_file(path: Optional[Union[str, Path]] = None) -> bool:
    """Load a .env file into the process environment.

    Existing environment variables are not overridden.

    Args:
        path: Explicit .env path; defaults to ./.env

    Returns:
        bool: True if a file was found and loaded
    """
    env_path = Path(path) if path is not None else Path.cwd() / ".env"
    if not env_path.exists():
        return False
    return load_dotenv(env_path)


def get_default_tef_level() -> TEFLevel:
    """
    Get default Thermic Effect of Food level.

    Returns:
        TEFLevel from TDEE_DEFAULT_TEF_LEVEL, defaults to balanced
    """
    raw = os.getenv("TDEE_DEFAULT_TEF_LEVEL", DEFAULT_TEF_LEVEL.value).strip().lower()
    try:
        return TEFLevel(raw)
    except ValueError:
        logger.warning(
            "Invalid TDEE_DEFAULT_TEF_LEVEL, using default",
            value=raw,
            default=DEFAULT_TEF_LEVEL.value,
        )
        return DEFAULT_TEF_LEVEL


def get_default_calibration() -> float:
    """
    Get default calibration factor.

    Values that are not numbers or fall outside 0.85-1.15 are ignored.

    Returns:
        Calibration factor from TDEE_DEFAULT_CALIBRATION, defaults to 1.0
    """
    raw = os.getenv("TDEE_DEFAULT_CALIBRATION")
    if not raw:
        return DEFAULT_CALIBRATION
    try:
        factor = float(raw)
    except ValueError:
        logger.warning(
            "Invalid TDEE_DEFAULT_CALIBRATION, using default",
            value=raw,
            default=DEFAULT_CALIBRATION,
        )
        return DEFAULT_CALIBRATION
    if not is_valid_calibration(factor):
        logger.warning(
            "TDEE_DEFAULT_CALIBRATION outside 0.85-1.15, using default",
            value=factor,
            default=DEFAULT_CALIBRATION,
        )
        return DEFAULT_CALIBRATION
    return factor


def is_strict_validation() -> bool:
    """Whether out-of-range input is rejected instead of flagged."""
    return os.getenv("TDEE_STRICT_VALIDATION", "false").lower() == "true"


def get_log_level() -> str:
    """Get log level name from LOG_LEVEL, defaults to INFO."""
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


@dataclass(frozen=True)
class EngineSettings:
    """Resolved engine settings.

    Attributes:
        default_tef_level: TEF level used when the caller gives none
        default_calibration: Calibration used when the caller gives none
        strict_validation: Reject out-of-range input instead of flagging it
        log_level: Logging level name
    """

    default_tef_level: TEFLevel = DEFAULT_TEF_LEVEL
    default_calibration: float = DEFAULT_CALIBRATION
    strict_validation: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings() -> EngineSettings:
    """Read all settings from the environment."""
    return EngineSettings(
        default_tef_level=get_default_tef_level(),
        default_calibration=get_default_calibration(),
        strict_validation=is_strict_validation(),
        log_level=get_log_level(),
    )
