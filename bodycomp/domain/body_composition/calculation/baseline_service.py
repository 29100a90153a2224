"""BaselineService - lean mass and baseline calorie/protein targets."""

from typing import Tuple

from ..core.ports.calculators import IBaselineCalculator
from ..core.value_objects.measurement import Measurement
from ..core.value_objects.results import KATCH_MCARDLE_INTERCEPT, KATCH_MCARDLE_SLOPE


class BaselineService(IBaselineCalculator):
    """Calculate lean body mass and maintenance targets.

    Formula:
        lean mass = weight × (1 - body fat / 100)
        BMR       = 370 + 21.6 × lean mass          (Katch-McArdle)
        calories  = BMR × activity factor
        protein   = weight × activity protein multiplier

    Activity factor and protein multiplier are separate tables keyed by
    the same activity level.
    """

    def lean_mass(self, weight_kg: float, body_fat_percent: float) -> float:
        return weight_kg * (1 - body_fat_percent / 100)

    def bmr(self, lean_mass_kg: float) -> float:
        return KATCH_MCARDLE_INTERCEPT + KATCH_MCARDLE_SLOPE * lean_mass_kg

    def calculate(
        self, measurement: Measurement, body_fat_percent: float
    ) -> Tuple[float, float, float]:
        """Calculate baseline targets.

        Args:
            measurement: Biometric inputs
            body_fat_percent: Clamped body-fat percentage

        Returns:
            Tuple of (lean_mass_kg, base_calories, base_protein_g)

        Example:
            >>> service = BaselineService()
            >>> lean, calories, protein = service.calculate(
            ...     Measurement.default(), body_fat_percent=20.0
            ... )
            >>> round(lean, 2)
            56.0
            >>> protein
            84.0
        """
        lean_mass_kg = self.lean_mass(measurement.weight_kg, body_fat_percent)
        activity = measurement.activity_level

        base_calories = self.bmr(lean_mass_kg) * activity.activity_factor()
        base_protein_g = measurement.weight_kg * activity.protein_multiplier()

        return lean_mass_kg, base_calories, base_protein_g
