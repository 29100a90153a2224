"""Body composition domain.

Measurement -> BaseResult -> GoalResult, each step a pure function.
"""

from .estimator import compute_base, compute_goal

__all__ = ["compute_base", "compute_goal"]
