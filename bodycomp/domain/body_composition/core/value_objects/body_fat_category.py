"""BodyFatCategory value object - classification of body-fat percentage."""

from enum import Enum


class BodyFatCategory(str, Enum):
    """U.S. Navy body-fat category, ordered from leanest to highest."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    ABOVE_AVERAGE = "AboveAverage"
    OBESE = "Obese"

    def rank(self) -> int:
        """Position in the leanest-to-highest ordering."""
        return list(BodyFatCategory).index(self)

    def label(self) -> str:
        """Get display label.

        Example:
            >>> BodyFatCategory.ABOVE_AVERAGE.label()
            'Above Average'
        """
        if self is BodyFatCategory.ABOVE_AVERAGE:
            return "Above Average"
        return self.value

    def color(self) -> str:
        """Get display color used by presentation layers."""
        colors = {
            BodyFatCategory.EXCELLENT: "green",
            BodyFatCategory.GOOD: "blue",
            BodyFatCategory.AVERAGE: "yellow",
            BodyFatCategory.ABOVE_AVERAGE: "orange",
            BodyFatCategory.OBESE: "red",
        }
        return colors[self]
