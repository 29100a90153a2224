"""Measurement value object - anthropometric inputs for one estimate."""

import dataclasses
from dataclasses import dataclass
from typing import Tuple, Union

from .activity_level import ActivityLevel
from .gender import Gender


@dataclass(frozen=True)
class Measurement:
    """Biometric inputs collected by the form.

    Immutable value object. Circumferences and height are in centimeters,
    weight in kilograms. Age is collected but does not enter any formula.

    Positive numeric values are required for a physically meaningful
    result, but construction does not enforce it: the body-fat service
    decides how to treat out-of-domain combinations.

    Attributes:
        gender: Male or female
        age: Age in years
        weight_kg: Body weight in kilograms
        height_cm: Height in centimeters
        neck_cm: Neck circumference in centimeters
        waist_cm: Waist circumference in centimeters
        hip_cm: Hip circumference in centimeters (used for females)
        activity_level: Exercise frequency
    """

    gender: Gender
    age: float
    weight_kg: float
    height_cm: float
    neck_cm: float
    waist_cm: float
    hip_cm: float
    activity_level: ActivityLevel

    NUMERIC_FIELDS = (
        "age",
        "weight_kg",
        "height_cm",
        "neck_cm",
        "waist_cm",
        "hip_cm",
    )

    def __post_init__(self) -> None:
        """Coerce enum fields given as raw strings.

        Raises:
            InvalidMeasurementError: If gender or activity level is unknown
        """
        from ..exceptions.domain_errors import InvalidMeasurementError

        try:
            object.__setattr__(self, "gender", Gender(self.gender))
        except ValueError:
            raise InvalidMeasurementError(
                f"Gender must be 'male' or 'female', got {self.gender!r}",
                field="gender",
            ) from None

        try:
            object.__setattr__(
                self, "activity_level", ActivityLevel(self.activity_level)
            )
        except ValueError:
            choices = ", ".join(level.value for level in ActivityLevel)
            raise InvalidMeasurementError(
                f"Activity level must be one of {choices}, "
                f"got {self.activity_level!r}",
                field="activity_level",
            ) from None

    @classmethod
    def default(cls) -> "Measurement":
        """Initial values shown by the form before any user input."""
        return cls(
            gender=Gender.MALE,
            age=25,
            weight_kg=70.0,
            height_cm=175.0,
            neck_cm=35.0,
            waist_cm=80.0,
            hip_cm=95.0,
            activity_level=ActivityLevel.SEDENTARY,
        )

    def replace(self, **changes: Union[float, str]) -> "Measurement":
        """Return a copy with some fields changed."""
        return dataclasses.replace(self, **changes)

    def non_positive_fields(self) -> Tuple[str, ...]:
        """Names of numeric fields that are zero or negative."""
        return tuple(
            name for name in self.NUMERIC_FIELDS if getattr(self, name) <= 0
        )
