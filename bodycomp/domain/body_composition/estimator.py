"""Pure estimator API: measurement to base stats to goal targets."""

from .calculation.baseline_service import BaselineService
from .calculation.body_fat_service import BodyFatService
from .calculation.category_service import CategoryService
from .calculation.eligibility_service import EligibilityService
from .calculation.goal_adjustment_service import GoalAdjustmentService
from .core.value_objects.goal_kind import GoalKind
from .core.value_objects.measurement import Measurement
from .core.value_objects.results import BaseResult, GoalResult

_category_service = CategoryService()
_eligibility_service = EligibilityService()
_baseline_service = BaselineService()


def compute_base(measurement: Measurement, *, strict: bool = False) -> BaseResult:
    """Compute base stats for a measurement.

    Args:
        measurement: Biometric inputs
        strict: Reject out-of-domain measurements instead of clamping the
            body-fat estimate to 0

    Returns:
        BaseResult with body fat, category, lean mass, baseline targets
        and allowed goals

    Raises:
        InvalidMeasurementError: In strict mode, for out-of-domain input
    """
    body_fat_percent = BodyFatService(strict=strict).calculate(measurement)
    category = _category_service.classify(body_fat_percent, measurement.gender)
    eligibility = _eligibility_service.evaluate(body_fat_percent, measurement.gender)
    lean_mass_kg, base_calories, base_protein_g = _baseline_service.calculate(
        measurement, body_fat_percent
    )

    return BaseResult(
        body_fat_percent=body_fat_percent,
        category=category,
        lean_mass_kg=lean_mass_kg,
        base_calories=base_calories,
        base_protein_g=base_protein_g,
        allowed_goals=eligibility.allowed_goals,
        restriction_message=eligibility.message,
    )


def compute_goal(
    base: BaseResult, goal: GoalKind, *, enforce_allowed: bool = False
) -> GoalResult:
    """Apply a goal's multipliers to base stats.

    Membership of goal in base.allowed_goals is the caller's concern
    unless enforce_allowed is set.

    Raises:
        GoalNotPermittedError: If enforce_allowed and the goal is not allowed
    """
    return GoalAdjustmentService(enforce_allowed=enforce_allowed).calculate(base, goal)
