"""Result value objects derived from a measurement."""

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet

from .body_fat_category import BodyFatCategory
from .goal_kind import GoalKind

KATCH_MCARDLE_INTERCEPT = 370.0
KATCH_MCARDLE_SLOPE = 21.6


@dataclass(frozen=True)
class GoalEligibility:
    """Goals permitted for a body-fat band and the advisory message."""

    allowed_goals: FrozenSet[GoalKind]
    message: str


@dataclass(frozen=True)
class BaseResult:
    """Base stats computed from a measurement.

    Attributes:
        body_fat_percent: Estimated body fat, clamped to [0, 50]
        category: Body-fat category
        lean_mass_kg: Weight minus estimated fat mass
        base_calories: Katch-McArdle BMR scaled by activity factor
        base_protein_g: Weight scaled by activity protein multiplier
        allowed_goals: Goals permitted at this body-fat level
        restriction_message: Advisory message for the allowed goals
    """

    body_fat_percent: float
    category: BodyFatCategory
    lean_mass_kg: float
    base_calories: float
    base_protein_g: float
    allowed_goals: FrozenSet[GoalKind]
    restriction_message: str

    @property
    def bmr(self) -> float:
        """Katch-McArdle basal metabolic rate in kcal/day."""
        return KATCH_MCARDLE_INTERCEPT + KATCH_MCARDLE_SLOPE * self.lean_mass_kg

    def is_goal_allowed(self, goal: GoalKind) -> bool:
        return goal in self.allowed_goals

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation for serialization."""
        return {
            "body_fat_percent": self.body_fat_percent,
            "category": self.category.value,
            "category_label": self.category.label(),
            "lean_mass_kg": self.lean_mass_kg,
            "bmr": self.bmr,
            "base_calories": self.base_calories,
            "base_protein_g": self.base_protein_g,
            "allowed_goals": [g.value for g in GoalKind if g in self.allowed_goals],
            "restriction_message": self.restriction_message,
        }


@dataclass(frozen=True)
class GoalResult:
    """Calorie and protein targets adjusted for a goal.

    Deltas are target minus the base value, so negative for a deficit.
    """

    goal: GoalKind
    calorie_target: float
    protein_target: float
    calorie_delta: float
    protein_delta: float

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation for serialization."""
        return {
            "goal": self.goal.value,
            "goal_label": self.goal.label(),
            "goal_description": self.goal.description(),
            "calorie_target": self.calorie_target,
            "protein_target": self.protein_target,
            "calorie_delta": self.calorie_delta,
            "protein_delta": self.protein_delta,
        }
