"""Value objects for body composition domain."""

from .activity_level import ActivityLevel
from .body_fat_category import BodyFatCategory
from .gender import Gender
from .goal_kind import GoalKind
from .measurement import Measurement
from .results import BaseResult, GoalEligibility, GoalResult

__all__ = [
    "Gender",
    "ActivityLevel",
    "GoalKind",
    "BodyFatCategory",
    "Measurement",
    "GoalEligibility",
    "BaseResult",
    "GoalResult",
]
