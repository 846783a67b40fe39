"""Command line TDEE estimate.

Usage:
    tdee-estimate --sex male --age 30 --height-cm 178 --weight-kg 82 \
        --steps 8000 --activity 3:45:Run --lifting-minutes 60

Exit codes:
    0 success
    2 invalid input (malformed, unknown category, or out of range in
      strict mode)
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional, Sequence

from ..domain.conversion.units import cm_to_feet_inches, kg_to_lbs
from ..domain.core.exceptions.domain_errors import InvalidEnergyInputError
from ..infrastructure.config import get_log_level, load_env_file, load_settings
from ..infrastructure.logging_config import configure_logging
from .commands.estimate_tdee import EstimateTDEEHandler, EstimateTDEEResult, parse_command
from .orchestrators.daily_energy_orchestrator import DailyEnergyOrchestrator


def parse_activity(value: str) -> Dict[str, Any]:
    """Parse ZONE:MINUTES[:NAME] into an activity mapping.

    Raises:
        argparse.ArgumentTypeError: If the value has fewer than two parts
    """
    parts = value.split(":", 2)
    if len(parts) < 2:
        raise argparse.ArgumentTypeError(f"expected ZONE:MINUTES[:NAME], got {value!r}")
    activity: Dict[str, Any] = {"zone": parts[0], "duration_minutes": parts[1]}
    if len(parts) == 3 and parts[2]:
        activity["name"] = parts[2]
    return activity


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tdee-estimate",
        description="Estimate Total Daily Energy Expenditure.",
    )
    parser.add_argument("--sex", required=True, choices=["male", "female"])
    parser.add_argument("--age", dest="age_years", required=True)
    parser.add_argument("--height-cm")
    parser.add_argument("--height-ft", dest="height_feet")
    parser.add_argument("--height-in", dest="height_inches")
    parser.add_argument("--weight-kg")
    parser.add_argument("--weight-lbs")
    parser.add_argument("--body-fat", dest="body_fat_percent")
    parser.add_argument("--steps", dest="daily_steps", default=0)
    parser.add_argument(
        "--activity",
        dest="activities",
        action="append",
        type=parse_activity,
        default=[],
        metavar="ZONE:MINUTES[:NAME]",
        help="cardio activity by heart-rate zone (repeatable)",
    )
    parser.add_argument("--lifting-minutes", default=0)
    parser.add_argument("--lifting-intensity", choices=["moderate", "vigorous"], default="moderate")
    parser.add_argument("--tef", dest="tef_level", choices=["low", "balanced", "high"])
    parser.add_argument("--calibration", dest="calibration_factor")
    parser.add_argument("--env-file", help="load settings from this .env file")
    parser.add_argument("--json", action="store_true", help="print breakdown as JSON")
    return parser


def _raw_input(args: argparse.Namespace) -> Dict[str, Any]:
    imperial = args.height_feet is not None or args.weight_lbs is not None
    raw: Dict[str, Any] = {
        "sex": args.sex,
        "age_years": args.age_years,
        "unit_system": "imperial" if imperial else "metric",
        "daily_steps": args.daily_steps,
        "activities": args.activities,
        "lifting_minutes": args.lifting_minutes,
        "lifting_intensity": args.lifting_intensity,
    }
    optional = {
        "height_cm": args.height_cm,
        "height_feet": args.height_feet,
        "height_inches": args.height_inches,
        "weight_kg": args.weight_kg,
        "weight_lbs": args.weight_lbs,
        "body_fat_percent": args.body_fat_percent,
        "tef_level": args.tef_level,
        "calibration_factor": args.calibration_factor,
    }
    raw.update({key: value for key, value in optional.items() if value is not None})
    return raw


def format_result(result: EstimateTDEEResult) -> str:
    """Render a result as a human readable breakdown."""
    breakdown = result.breakdown
    imperial_height = cm_to_feet_inches(result.height_cm)
    lines: List[str] = [
        f"Height: {result.height_cm:.1f} cm ({imperial_height})",
        f"Weight: {result.weight_kg:.1f} kg ({kg_to_lbs(result.weight_kg):.0f} lbs)",
        "",
        f"BMR ({breakdown.bmr.formula}): {breakdown.bmr.value:.0f} kcal",
    ]
    for activity in breakdown.activities:
        label = activity.name or f"Zone {activity.zone}"
        lines.append(
            f"  {label} (zone {activity.zone}, {activity.duration_minutes:g} min): "
            f"{activity.kcal:.0f} kcal"
        )
    if breakdown.lifting_kcal:
        lines.append(f"  Lifting (includes afterburn): {breakdown.lifting_kcal:.0f} kcal")
    lines.extend(
        [
            f"Exercise: {breakdown.exercise_kcal:.0f} kcal",
            f"Steps (NEAT): {breakdown.neat_kcal:.0f} kcal",
            f"TEF ({breakdown.tef_level.description()}): {breakdown.tef_kcal:.0f} kcal",
            f"Calibration: {(breakdown.calibration_factor - 1) * 100:+.0f}%",
            "",
            f"Total TDEE: {breakdown.rounded_tdee} kcal/day",
        ]
    )
    for issue in result.issues:
        lines.append(f"warning: {issue}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.env_file:
        load_env_file(args.env_file)
    else:
        load_env_file()

    configure_logging(get_log_level(), json_output=args.json)
    settings = load_settings()

    handler = EstimateTDEEHandler(DailyEnergyOrchestrator.create(), settings)
    try:
        result = handler.handle(parse_command(_raw_input(args)))
    except InvalidEnergyInputError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    if args.json:
        payload = result.breakdown.to_dict()
        payload["issues"] = [str(issue) for issue in result.issues]
        print(json.dumps(payload, indent=2))
    else:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
