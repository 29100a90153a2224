"""GoalKind value object - fitness goal applied to baseline targets."""

from enum import Enum


class GoalKind(str, Enum):
    """Fitness goal selected after base stats are known.

    Each goal scales baseline calories and protein independently:

    | Goal           | Calories | Protein |
    |----------------|----------|---------|
    | MAINTENANCE    | 1.00     | 1.00    |
    | FAT_LOSS       | 0.80     | 1.20    |
    | MUSCLE_GAIN    | 1.10     | 1.25    |
    | WEIGHT_GAIN    | 1.20     | 1.20    |
    | RECOMPOSITION  | 1.00     | 1.25    |
    """

    MAINTENANCE = "maintenance"
    FAT_LOSS = "fat-loss"
    MUSCLE_GAIN = "muscle-gain"
    WEIGHT_GAIN = "weight-gain"
    RECOMPOSITION = "recomposition"

    def calorie_multiplier(self) -> float:
        """Get multiplier applied to baseline calories.

        Example:
            >>> GoalKind.FAT_LOSS.calorie_multiplier()
            0.8
        """
        multipliers = {
            GoalKind.MAINTENANCE: 1.0,
            GoalKind.FAT_LOSS: 0.8,
            GoalKind.MUSCLE_GAIN: 1.1,
            GoalKind.WEIGHT_GAIN: 1.2,
            GoalKind.RECOMPOSITION: 1.0,
        }
        return multipliers[self]

    def protein_multiplier(self) -> float:
        """Get multiplier applied to baseline protein.

        Example:
            >>> GoalKind.MUSCLE_GAIN.protein_multiplier()
            1.25
        """
        multipliers = {
            GoalKind.MAINTENANCE: 1.0,
            GoalKind.FAT_LOSS: 1.2,
            GoalKind.MUSCLE_GAIN: 1.25,
            GoalKind.WEIGHT_GAIN: 1.2,
            GoalKind.RECOMPOSITION: 1.25,
        }
        return multipliers[self]

    def label(self) -> str:
        """Get display label."""
        labels = {
            GoalKind.MAINTENANCE: "Maintenance",
            GoalKind.FAT_LOSS: "Fat Loss",
            GoalKind.MUSCLE_GAIN: "Muscle Gain",
            GoalKind.WEIGHT_GAIN: "Weight Gain",
            GoalKind.RECOMPOSITION: "Body Recomposition",
        }
        return labels[self]

    def description(self) -> str:
        """Get human-readable description.

        Returns:
            str: Goal description
        """
        descriptions = {
            GoalKind.MAINTENANCE: "Maintain current weight and composition",
            GoalKind.FAT_LOSS: "Reduce body fat while preserving muscle",
            GoalKind.MUSCLE_GAIN: "Build muscle with minimal fat gain",
            GoalKind.WEIGHT_GAIN: "Increase overall body weight",
            GoalKind.RECOMPOSITION: "Build muscle while losing fat",
        }
        return descriptions[self]

    @classmethod
    def parse(cls, value: str) -> "GoalKind":
        """Coerce a raw goal value.

        Raises:
            InvalidGoalError: If the value is not a known goal
        """
        from ..exceptions.domain_errors import InvalidGoalError

        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(goal.value for goal in cls)
            raise InvalidGoalError(
                f"Goal must be one of {choices}, got {value!r}"
            ) from None
