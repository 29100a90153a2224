"""Gender value object - selects the body-fat formula and thresholds."""

from enum import Enum


class Gender(str, Enum):
    """Gender used by the U.S. Navy formula and category tables."""

    MALE = "male"
    FEMALE = "female"
