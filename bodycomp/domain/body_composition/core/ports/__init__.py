"""Ports for body composition calculations."""

from .calculators import (
    IBaselineCalculator,
    IBodyFatCalculator,
    ICategoryClassifier,
    IGoalAdjustmentCalculator,
    IGoalEligibilityGate,
)

__all__ = [
    "IBodyFatCalculator",
    "ICategoryClassifier",
    "IGoalEligibilityGate",
    "IBaselineCalculator",
    "IGoalAdjustmentCalculator",
]
