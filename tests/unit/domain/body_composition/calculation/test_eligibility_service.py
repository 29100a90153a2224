"""Unit tests for EligibilityService."""

import pytest

from bodycomp.domain.body_composition.calculation.eligibility_service import (
    ABOVE_AVERAGE_GOALS,
    ALL_GOALS,
    OBESE_GOALS,
    EligibilityService,
)
from bodycomp.domain.body_composition.core.value_objects import Gender, GoalKind


class TestEligibilityService:
    """Test goal eligibility bands."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = EligibilityService()

    def test_obese_male_only_fat_loss(self):
        """Test male above 22% may only choose fat loss."""
        eligibility = self.service.evaluate(22.5, Gender.MALE)

        assert eligibility.allowed_goals == frozenset({GoalKind.FAT_LOSS})
        assert "only Fat Loss" in eligibility.message

    def test_above_average_male_excludes_weight_gain(self):
        """Test male between 20% and 22% cannot choose weight gain."""
        eligibility = self.service.evaluate(21.0, Gender.MALE)

        assert GoalKind.WEIGHT_GAIN not in eligibility.allowed_goals
        assert eligibility.allowed_goals == frozenset(
            {
                GoalKind.MAINTENANCE,
                GoalKind.FAT_LOSS,
                GoalKind.MUSCLE_GAIN,
                GoalKind.RECOMPOSITION,
            }
        )
        assert "Weight Gain is not recommended" in eligibility.message

    def test_band_boundaries_male(self):
        """Test band boundaries are exclusive on the lower side."""
        assert self.service.evaluate(20.0, Gender.MALE).allowed_goals == ALL_GOALS
        assert self.service.evaluate(22.0, Gender.MALE).allowed_goals == (
            ABOVE_AVERAGE_GOALS
        )

    def test_band_boundaries_female(self):
        """Test female bands use 28% and 33%."""
        assert self.service.evaluate(28.0, Gender.FEMALE).allowed_goals == ALL_GOALS
        assert self.service.evaluate(28.5, Gender.FEMALE).allowed_goals == (
            ABOVE_AVERAGE_GOALS
        )
        assert self.service.evaluate(33.0, Gender.FEMALE).allowed_goals == (
            ABOVE_AVERAGE_GOALS
        )
        assert self.service.evaluate(33.1, Gender.FEMALE).allowed_goals == OBESE_GOALS

    def test_lean_all_goals(self):
        """Test that lean users may choose every goal."""
        eligibility = self.service.evaluate(12.0, Gender.MALE)

        assert eligibility.allowed_goals == frozenset(GoalKind)
        assert eligibility.message.startswith("All goals are available")

    @pytest.mark.parametrize("gender", [Gender.MALE, Gender.FEMALE])
    def test_only_three_possible_sets(self, gender):
        """Test allowed goals is always one of the three fixed sets."""
        seen = {
            self.service.evaluate(step * 0.5, gender).allowed_goals
            for step in range(0, 101)
        }

        assert seen == {ALL_GOALS, ABOVE_AVERAGE_GOALS, OBESE_GOALS}
