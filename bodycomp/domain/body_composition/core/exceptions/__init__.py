"""Domain exceptions for body composition."""

from .domain_errors import (
    BaseResultMissingError,
    BodyCompositionError,
    GoalNotPermittedError,
    InvalidGoalError,
    InvalidMeasurementError,
)

__all__ = [
    "BodyCompositionError",
    "InvalidMeasurementError",
    "InvalidGoalError",
    "GoalNotPermittedError",
    "BaseResultMissingError",
]
