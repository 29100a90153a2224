"""EstimatorOrchestrator - two-step base stats then goal flow."""

import math
from typing import Optional

import structlog

from bodycomp.domain.body_composition.calculation.body_fat_service import (
    BodyFatService,
)
from bodycomp.domain.body_composition.core.exceptions.domain_errors import (
    BaseResultMissingError,
    GoalNotPermittedError,
)
from bodycomp.domain.body_composition.core.value_objects import (
    BaseResult,
    GoalKind,
    GoalResult,
    Measurement,
)
from bodycomp.domain.body_composition.estimator import compute_base, compute_goal
from bodycomp.infrastructure.config import Settings, get_settings

logger = structlog.get_logger(__name__)


class EstimatorOrchestrator:
    """
    Holds the state of one estimate session.

    Flow:
    1. Calculate base stats from a measurement
    2. Select one of the allowed goals to get adjusted targets

    Recalculating base stats clears any previous goal selection, since
    the allowed goals may have changed.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._measurement: Optional[Measurement] = None
        self._base: Optional[BaseResult] = None
        self._goal_result: Optional[GoalResult] = None

    @property
    def measurement(self) -> Optional[Measurement]:
        return self._measurement

    @property
    def base(self) -> Optional[BaseResult]:
        return self._base

    @property
    def goal_result(self) -> Optional[GoalResult]:
        return self._goal_result

    @property
    def selected_goal(self) -> Optional[GoalKind]:
        return self._goal_result.goal if self._goal_result else None

    def calculate_base(self, measurement: Measurement) -> BaseResult:
        """
        Calculate base stats and reset the goal selection.

        Args:
            measurement: Biometric inputs

        Returns:
            BaseResult

        Raises:
            InvalidMeasurementError: If strict validation is configured and
                the measurement is out of the formula's domain
        """
        base = compute_base(measurement, strict=self._settings.strict_validation)

        body_fat_service = BodyFatService()
        raw_percent = body_fat_service.raw_percent(measurement)
        if not math.isfinite(raw_percent):
            logger.warning(
                "Body fat formula out of domain, clamping",
                gender=measurement.gender.value,
                log_argument=body_fat_service.log_argument(measurement),
                raw_percent=raw_percent,
                body_fat_percent=base.body_fat_percent,
            )

        self._measurement = measurement
        self._base = base
        self._goal_result = None

        logger.info(
            "Base stats calculated",
            gender=measurement.gender.value,
            activity_level=measurement.activity_level.value,
            body_fat_percent=round(base.body_fat_percent, 2),
            category=base.category.value,
            allowed_goals=sorted(g.value for g in base.allowed_goals),
        )
        return base

    def select_goal(self, goal: GoalKind) -> GoalResult:
        """
        Apply a goal to the current base stats.

        Args:
            goal: Chosen goal

        Returns:
            GoalResult

        Raises:
            BaseResultMissingError: If base stats were not calculated
            InvalidGoalError: If goal is not a known goal
            GoalNotPermittedError: If goal enforcement is configured and
                the goal is not allowed
        """
        if self._base is None:
            raise BaseResultMissingError()

        goal = GoalKind.parse(goal)
        if not self._base.is_goal_allowed(goal):
            if self._settings.enforce_goals:
                logger.warning("Goal rejected", goal=goal.value)
                raise GoalNotPermittedError(
                    goal.value, [g.value for g in self._base.allowed_goals]
                )
            logger.warning(
                "Goal outside allowed set",
                goal=goal.value,
                restriction_message=self._base.restriction_message,
            )

        goal_result = compute_goal(self._base, goal)
        self._goal_result = goal_result

        logger.info(
            "Goal targets calculated",
            goal=goal.value,
            calorie_target=round(goal_result.calorie_target),
            protein_target=round(goal_result.protein_target),
            calorie_delta=round(goal_result.calorie_delta),
            protein_delta=round(goal_result.protein_delta),
        )
        return goal_result

    def reset(self) -> None:
        """Forget the measurement, base stats and goal selection."""
        self._measurement = None
        self._base = None
        self._goal_result = None
