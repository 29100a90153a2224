"""Command-line front end for the estimator.

Usage:
    bodycomp --gender female --weight 62 --height 165 --neck 32 \
        --waist 72 --hip 98 --activity 3-5x --goal recomposition

Options left out take the form's default values.

Exit codes:
    0 success
    2 invalid measurement or goal not permitted
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from typing import List, Optional, TextIO

from bodycomp.application.body_composition.inputs import parse_measurement
from bodycomp.application.body_composition.orchestrators import EstimatorOrchestrator
from bodycomp.domain.body_composition.core.exceptions import BodyCompositionError
from bodycomp.domain.body_composition.core.value_objects import (
    ActivityLevel,
    BaseResult,
    Gender,
    GoalKind,
    GoalResult,
)
from bodycomp.infrastructure.config import get_settings
from bodycomp.infrastructure.logging_config import configure_logging

EXIT_OK = 0
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bodycomp",
        description="Estimate body fat, lean mass and calorie/protein targets.",
    )
    parser.add_argument("--gender", choices=[g.value for g in Gender])
    parser.add_argument("--age", help="years")
    parser.add_argument("--weight", help="kg")
    parser.add_argument("--height", help="cm")
    parser.add_argument("--neck", help="neck circumference, cm")
    parser.add_argument("--waist", help="waist circumference, cm")
    parser.add_argument("--hip", help="hip circumference, cm")
    parser.add_argument(
        "--activity",
        dest="exerciseLevel",
        choices=[a.value for a in ActivityLevel],
        help="exercise frequency",
    )
    parser.add_argument("--goal", choices=[g.value for g in GoalKind])
    parser.add_argument(
        "--strict",
        action="store_true",
        help="reject measurements outside the formula's domain",
    )
    parser.add_argument(
        "--enforce-goals",
        action="store_true",
        help="refuse goals not allowed at the estimated body fat",
    )
    parser.add_argument("--json", action="store_true", help="print JSON")
    return parser


def format_base(base: BaseResult) -> List[str]:
    allowed = ", ".join(g.label() for g in GoalKind if g in base.allowed_goals)
    return [
        f"Body fat:        {base.body_fat_percent:.1f}% ({base.category.label()})",
        f"Lean body mass:  {base.lean_mass_kg:.1f} kg",
        f"BMR:             {base.bmr:.0f} kcal/day",
        f"Base calories:   {base.base_calories:.0f} kcal/day",
        f"Base protein:    {base.base_protein_g:.0f} g/day",
        f"Allowed goals:   {allowed}",
        base.restriction_message,
    ]


def format_delta(delta: float) -> str:
    """Signed rounded difference, with no sign for zero."""
    rounded = round(delta)
    return f"+{rounded}" if rounded > 0 else str(rounded)


def format_goal(goal_result: GoalResult) -> List[str]:
    calorie_delta = format_delta(goal_result.calorie_delta)
    protein_delta = format_delta(goal_result.protein_delta)
    return [
        f"Goal:            {goal_result.goal.label()}",
        goal_result.goal.description(),
        f"Calorie target:  {goal_result.calorie_target:.0f} kcal/day "
        f"({calorie_delta} from base)",
        f"Protein target:  {goal_result.protein_target:.0f} g/day "
        f"({protein_delta}g from base)",
    ]


def main(
    argv: Optional[List[str]] = None,
    stdout: TextIO = sys.stdout,
    stderr: TextIO = sys.stderr,
) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    settings = dataclasses.replace(
        settings,
        strict_validation=settings.strict_validation or args.strict,
        enforce_goals=settings.enforce_goals or args.enforce_goals,
    )
    configure_logging(settings)

    raw = {
        "gender": args.gender,
        "age": args.age,
        "weight": args.weight,
        "height": args.height,
        "neck": args.neck,
        "waist": args.waist,
        "hip": args.hip,
        "exerciseLevel": args.exerciseLevel,
    }

    orchestrator = EstimatorOrchestrator(settings)
    try:
        base = orchestrator.calculate_base(parse_measurement(raw))
        goal_result = orchestrator.select_goal(args.goal) if args.goal else None
    except BodyCompositionError as e:
        print(f"Error: {e}", file=stderr)
        return EXIT_INVALID

    if args.json:
        document = {"base": base.to_dict()}
        if goal_result is not None:
            document["goal"] = goal_result.to_dict()
        print(json.dumps(document, indent=2), file=stdout)
        return EXIT_OK

    lines = format_base(base)
    if goal_result is not None:
        lines.append("")
        lines.extend(format_goal(goal_result))
    print("\n".join(lines), file=stdout)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
