"""EligibilityService - goals permitted at a body-fat level."""

from typing import Dict

from ..core.ports.calculators import IGoalEligibilityGate
from ..core.value_objects.gender import Gender
from ..core.value_objects.goal_kind import GoalKind
from ..core.value_objects.results import GoalEligibility

# (above-average lower bound, obese lower bound), both exclusive
ELIGIBILITY_BANDS: Dict[Gender, tuple] = {
    Gender.MALE: (20.0, 22.0),
    Gender.FEMALE: (28.0, 33.0),
}

OBESE_GOALS = frozenset({GoalKind.FAT_LOSS})
ABOVE_AVERAGE_GOALS = frozenset(
    {
        GoalKind.MAINTENANCE,
        GoalKind.FAT_LOSS,
        GoalKind.MUSCLE_GAIN,
        GoalKind.RECOMPOSITION,
    }
)
ALL_GOALS = frozenset(GoalKind)

OBESE_MESSAGE = (
    "Due to elevated body fat levels, only Fat Loss goal is recommended for health."
)
ABOVE_AVERAGE_MESSAGE = "Weight Gain is not recommended at current body fat levels."
ALL_GOALS_MESSAGE = "All goals are available based on your current body composition."


class EligibilityService(IGoalEligibilityGate):
    """Decide which goals a body-fat level permits.

    Three mutually exclusive bands:
        - Obese (male > 22, female > 33): fat loss only
        - Above average (male 20-22, female 28-33): everything but
          weight gain
        - Otherwise: all goals

    The result is advisory; callers decide whether to block other goals.
    """

    def evaluate(self, body_fat_percent: float, gender: Gender) -> GoalEligibility:
        above_average_floor, obese_floor = ELIGIBILITY_BANDS[Gender(gender)]

        if body_fat_percent > obese_floor:
            return GoalEligibility(allowed_goals=OBESE_GOALS, message=OBESE_MESSAGE)

        if body_fat_percent > above_average_floor:
            return GoalEligibility(
                allowed_goals=ABOVE_AVERAGE_GOALS, message=ABOVE_AVERAGE_MESSAGE
            )

        return GoalEligibility(allowed_goals=ALL_GOALS, message=ALL_GOALS_MESSAGE)
