"""Application commands for energy estimation."""

from .estimate_tdee import (
    ActivityInput,
    EstimateTDEECommand,
    EstimateTDEEHandler,
    EstimateTDEEResult,
    parse_command,
)

__all__ = [
    "ActivityInput",
    "EstimateTDEECommand",
    "EstimateTDEEHandler",
    "EstimateTDEEResult",
    "parse_command",
]
