"""Calculation services for body composition."""

from .baseline_service import BaselineService
from .body_fat_service import BodyFatService
from .category_service import CategoryService
from .eligibility_service import EligibilityService
from .goal_adjustment_service import GoalAdjustmentService

__all__ = [
    "BodyFatService",
    "CategoryService",
    "EligibilityService",
    "BaselineService",
    "GoalAdjustmentService",
]
