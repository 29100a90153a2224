"""GoalAdjustmentService - goal-specific calorie and protein targets."""

from ..core.exceptions.domain_errors import GoalNotPermittedError
from ..core.ports.calculators import IGoalAdjustmentCalculator
from ..core.value_objects.goal_kind import GoalKind
from ..core.value_objects.results import BaseResult, GoalResult


class GoalAdjustmentService(IGoalAdjustmentCalculator):
    """Scale baseline targets by the goal's multiplier pair.

    Calories and protein are scaled independently. By default the goal
    is not checked against the base result's allowed goals; pass
    enforce_allowed=True to reject goals outside that set.
    """

    def __init__(self, enforce_allowed: bool = False) -> None:
        self._enforce_allowed = enforce_allowed

    def calculate(self, base: BaseResult, goal: GoalKind) -> GoalResult:
        """Apply goal adjustment.

        Args:
            base: Base stats to adjust
            goal: Chosen goal

        Returns:
            GoalResult: Adjusted calorie and protein targets

        Raises:
            InvalidGoalError: If goal is not a known goal
            GoalNotPermittedError: If enforcement is on and the goal is
                not allowed for this base result
        """
        goal = GoalKind.parse(goal)
        if self._enforce_allowed and not base.is_goal_allowed(goal):
            raise GoalNotPermittedError(
                goal.value, [g.value for g in base.allowed_goals]
            )

        calorie_target = base.base_calories * goal.calorie_multiplier()
        protein_target = base.base_protein_g * goal.protein_multiplier()

        return GoalResult(
            goal=goal,
            calorie_target=calorie_target,
            protein_target=protein_target,
            calorie_delta=calorie_target - base.base_calories,
            protein_delta=protein_target - base.base_protein_g,
        )
