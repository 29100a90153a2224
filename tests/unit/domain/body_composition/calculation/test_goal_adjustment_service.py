"""Unit tests for GoalAdjustmentService."""

import pytest

from bodycomp.domain.body_composition.calculation.eligibility_service import (
    OBESE_GOALS,
)
from bodycomp.domain.body_composition.calculation.goal_adjustment_service import (
    GoalAdjustmentService,
)
from bodycomp.domain.body_composition.core.exceptions import (
    GoalNotPermittedError,
    InvalidGoalError,
)
from bodycomp.domain.body_composition.core.value_objects import (
    BaseResult,
    BodyFatCategory,
    GoalKind,
)


def make_base(allowed_goals=frozenset(GoalKind)):
    return BaseResult(
        body_fat_percent=15.0,
        category=BodyFatCategory.GOOD,
        lean_mass_kg=60.0,
        base_calories=2000.0,
        base_protein_g=100.0,
        allowed_goals=allowed_goals,
        restriction_message="",
    )


class TestGoalAdjustmentService:
    """Test goal multipliers applied to baseline targets."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = GoalAdjustmentService()

    @pytest.mark.parametrize(
        "goal, calories, protein",
        [
            (GoalKind.MAINTENANCE, 2000.0, 100.0),
            (GoalKind.FAT_LOSS, 1600.0, 120.0),
            (GoalKind.MUSCLE_GAIN, 2200.0, 125.0),
            (GoalKind.WEIGHT_GAIN, 2400.0, 120.0),
            (GoalKind.RECOMPOSITION, 2000.0, 125.0),
        ],
    )
    def test_goal_targets(self, goal, calories, protein):
        """Test calorie and protein targets for each goal."""
        result = self.service.calculate(make_base(), goal)

        assert result.goal is goal
        assert result.calorie_target == pytest.approx(calories)
        assert result.protein_target == pytest.approx(protein)

    @pytest.mark.parametrize("goal", list(GoalKind))
    def test_multipliers_applied_independently(self, goal):
        """Test target / base equals the table multiplier."""
        base = make_base()

        result = self.service.calculate(base, goal)

        assert result.calorie_target / base.base_calories == pytest.approx(
            goal.calorie_multiplier()
        )
        assert result.protein_target / base.base_protein_g == pytest.approx(
            goal.protein_multiplier()
        )

    def test_disallowed_goal_not_checked_by_default(self):
        """Test the default service leaves eligibility to the caller."""
        result = self.service.calculate(make_base(OBESE_GOALS), GoalKind.WEIGHT_GAIN)

        assert result.calorie_target == pytest.approx(2400.0)

    def test_enforced_disallowed_goal_raises(self):
        """Test enforcement rejects goals outside the allowed set."""
        service = GoalAdjustmentService(enforce_allowed=True)

        with pytest.raises(GoalNotPermittedError) as exc:
            service.calculate(make_base(OBESE_GOALS), GoalKind.MUSCLE_GAIN)

        assert exc.value.goal == "muscle-gain"
        assert exc.value.allowed_goals == ["fat-loss"]

    def test_enforced_allowed_goal_passes(self):
        """Test enforcement accepts allowed goals."""
        service = GoalAdjustmentService(enforce_allowed=True)

        result = service.calculate(make_base(OBESE_GOALS), GoalKind.FAT_LOSS)

        assert result.protein_target == pytest.approx(120.0)

    def test_goal_given_as_string(self):
        """Test goal coerced from its string value."""
        result = self.service.calculate(make_base(), "recomposition")

        assert result.goal is GoalKind.RECOMPOSITION

    def test_unknown_goal_string_raises(self):
        """Test an unknown goal is reported in the domain taxonomy."""
        with pytest.raises(InvalidGoalError):
            self.service.calculate(make_base(), "bulk")

    @pytest.mark.parametrize(
        "goal, calorie_delta, protein_delta",
        [
            (GoalKind.MAINTENANCE, 0.0, 0.0),
            (GoalKind.FAT_LOSS, -400.0, 20.0),
            (GoalKind.MUSCLE_GAIN, 200.0, 25.0),
            (GoalKind.WEIGHT_GAIN, 400.0, 20.0),
            (GoalKind.RECOMPOSITION, 0.0, 25.0),
        ],
    )
    def test_deltas_from_base(self, goal, calorie_delta, protein_delta):
        """Test deltas are the target minus the baseline value."""
        result = self.service.calculate(make_base(), goal)

        assert result.calorie_delta == pytest.approx(calorie_delta)
        assert result.protein_delta == pytest.approx(protein_delta)
