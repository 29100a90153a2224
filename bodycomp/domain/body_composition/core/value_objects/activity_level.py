"""ActivityLevel value object - self-reported exercise frequency."""

from enum import Enum


class ActivityLevel(str, Enum):
    """Exercise frequency driving both calorie and protein baselines.

    - SEDENTARY: Little or no exercise
    - LIGHT: Exercise 1-2 times per week
    - MODERATE: Exercise 3-5 times per week
    - DAILY: Exercise every day
    - TWICE_DAILY: Exercise twice a day

    The same five levels key two distinct tables: the activity factor
    that scales BMR into calories, and the protein multiplier in grams
    per kg of body weight.
    """

    SEDENTARY = "sedentary"
    LIGHT = "1-2x"
    MODERATE = "3-5x"
    DAILY = "daily"
    TWICE_DAILY = "twice-daily"

    def activity_factor(self) -> float:
        """Get multiplier scaling BMR to daily energy expenditure.

        Returns:
            float: Activity factor

        Example:
            >>> ActivityLevel.MODERATE.activity_factor()
            1.55
        """
        factors = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHT: 1.375,
            ActivityLevel.MODERATE: 1.55,
            ActivityLevel.DAILY: 1.725,
            ActivityLevel.TWICE_DAILY: 1.9,
        }
        return factors[self]

    def protein_multiplier(self) -> float:
        """Get baseline protein requirement (g/kg body weight).

        Returns:
            float: Protein grams per kg body weight

        Example:
            >>> ActivityLevel.DAILY.protein_multiplier()
            1.95
        """
        multipliers = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHT: 1.5,
            ActivityLevel.MODERATE: 1.7,
            ActivityLevel.DAILY: 1.95,
            ActivityLevel.TWICE_DAILY: 2.2,
        }
        return multipliers[self]

    def description(self) -> str:
        """Get human-readable description.

        Returns:
            str: Activity level description
        """
        descriptions = {
            ActivityLevel.SEDENTARY: "Sedentary (little or no exercise)",
            ActivityLevel.LIGHT: "Exercise 1-2x per week",
            ActivityLevel.MODERATE: "Exercise 3-5x per week",
            ActivityLevel.DAILY: "Daily exercise",
            ActivityLevel.TWICE_DAILY: "Exercise twice daily",
        }
        return descriptions[self]
