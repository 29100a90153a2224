"""Calculator ports - interfaces for each step of the estimate."""

from abc import ABC, abstractmethod
from typing import Tuple

from ..value_objects.body_fat_category import BodyFatCategory
from ..value_objects.gender import Gender
from ..value_objects.goal_kind import GoalKind
from ..value_objects.measurement import Measurement
from ..value_objects.results import BaseResult, GoalEligibility, GoalResult


class IBodyFatCalculator(ABC):
    """Port for body-fat percentage estimation."""

    @abstractmethod
    def calculate(self, measurement: Measurement) -> float:
        """Estimate body fat, clamped to [0, 50].

        Args:
            measurement: Biometric inputs

        Returns:
            float: Body-fat percentage
        """
        pass


class ICategoryClassifier(ABC):
    """Port for body-fat category classification."""

    @abstractmethod
    def classify(self, body_fat_percent: float, gender: Gender) -> BodyFatCategory:
        pass


class IGoalEligibilityGate(ABC):
    """Port for deciding which goals a body-fat level permits."""

    @abstractmethod
    def evaluate(self, body_fat_percent: float, gender: Gender) -> GoalEligibility:
        pass


class IBaselineCalculator(ABC):
    """Port for lean mass and baseline calorie/protein targets."""

    @abstractmethod
    def calculate(
        self, measurement: Measurement, body_fat_percent: float
    ) -> Tuple[float, float, float]:
        """Calculate baseline targets.

        Args:
            measurement: Biometric inputs
            body_fat_percent: Clamped body-fat percentage

        Returns:
            Tuple of (lean_mass_kg, base_calories, base_protein_g)
        """
        pass


class IGoalAdjustmentCalculator(ABC):
    """Port for applying a goal to baseline targets."""

    @abstractmethod
    def calculate(self, base: BaseResult, goal: GoalKind) -> GoalResult:
        pass
