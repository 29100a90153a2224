"""CategoryService - body-fat category classification."""

import math
from typing import Dict, List, Tuple

from ..core.ports.calculators import ICategoryClassifier
from ..core.value_objects.body_fat_category import BodyFatCategory
from ..core.value_objects.gender import Gender

# Upper bounds are inclusive, evaluated lowest first
CATEGORY_THRESHOLDS: Dict[Gender, List[Tuple[float, BodyFatCategory]]] = {
    Gender.MALE: [
        (13.0, BodyFatCategory.EXCELLENT),
        (16.0, BodyFatCategory.GOOD),
        (20.0, BodyFatCategory.AVERAGE),
        (22.0, BodyFatCategory.ABOVE_AVERAGE),
        (math.inf, BodyFatCategory.OBESE),
    ],
    Gender.FEMALE: [
        (16.0, BodyFatCategory.EXCELLENT),
        (19.0, BodyFatCategory.GOOD),
        (28.0, BodyFatCategory.AVERAGE),
        (33.0, BodyFatCategory.ABOVE_AVERAGE),
        (math.inf, BodyFatCategory.OBESE),
    ],
}


class CategoryService(ICategoryClassifier):
    """Classify body fat using the U.S. Navy category table.

    | Gender | Excellent | Good | Average | Above Average | Obese |
    |--------|-----------|------|---------|---------------|-------|
    | male   | <= 13     | <= 16| <= 20   | <= 22         | > 22  |
    | female | <= 16     | <= 19| <= 28   | <= 33         | > 33  |

    A value exactly at a threshold belongs to the lower category.
    """

    def classify(self, body_fat_percent: float, gender: Gender) -> BodyFatCategory:
        """Return the first category whose upper bound is not exceeded.

        Example:
            >>> CategoryService().classify(16.0, Gender.MALE)
            <BodyFatCategory.GOOD: 'Good'>
        """
        thresholds = CATEGORY_THRESHOLDS[Gender(gender)]
        for upper_bound, category in thresholds:
            if body_fat_percent <= upper_bound:
                return category
        return thresholds[-1][1]
