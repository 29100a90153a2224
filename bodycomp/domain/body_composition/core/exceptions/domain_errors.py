"""Domain exceptions for body composition."""

from typing import Iterable, Optional


class BodyCompositionError(Exception):
    """Base exception for body composition domain errors."""

    pass


class InvalidMeasurementError(BodyCompositionError):
    """Raised when a measurement cannot produce a meaningful estimate.

    Covers both input that cannot be coerced to a number and, in strict
    mode, circumference combinations outside the formula's domain.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class InvalidGoalError(BodyCompositionError):
    """Raised when a goal value is not a known goal."""

    pass


class GoalNotPermittedError(BodyCompositionError):
    """Raised when a goal outside the allowed set is requested."""

    def __init__(self, goal: str, allowed_goals: Iterable[str]):
        allowed = sorted(allowed_goals)
        super().__init__(
            f"Goal not permitted: {goal} (allowed: {', '.join(allowed)})"
        )
        self.goal = goal
        self.allowed_goals = allowed


class BaseResultMissingError(BodyCompositionError):
    """Raised when a goal is selected before base stats are calculated."""

    def __init__(self) -> None:
        super().__init__("Base stats must be calculated before selecting a goal")
