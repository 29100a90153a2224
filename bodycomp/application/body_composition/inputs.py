"""MeasurementInput - numeric coercion of raw form values."""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bodycomp.domain.body_composition.core.exceptions.domain_errors import (
    InvalidMeasurementError,
)
from bodycomp.domain.body_composition.core.value_objects import (
    ActivityLevel,
    Gender,
    Measurement,
)

_DEFAULT = Measurement.default()


class MeasurementInput(BaseModel):
    """Raw form values before they become a Measurement.

    Accepts the form's field names (weight, height, neck, waist, hip,
    exerciseLevel) as well as the measurement attribute names. Numbers
    given as strings are coerced; missing fields take the form defaults.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        allow_inf_nan=False,
        str_strip_whitespace=True,
        extra="ignore",
    )

    gender: Gender = _DEFAULT.gender
    age: float = _DEFAULT.age
    weight_kg: float = Field(default=_DEFAULT.weight_kg, alias="weight")
    height_cm: float = Field(default=_DEFAULT.height_cm, alias="height")
    neck_cm: float = Field(default=_DEFAULT.neck_cm, alias="neck")
    waist_cm: float = Field(default=_DEFAULT.waist_cm, alias="waist")
    hip_cm: float = Field(default=_DEFAULT.hip_cm, alias="hip")
    activity_level: ActivityLevel = Field(
        default=_DEFAULT.activity_level, alias="exerciseLevel"
    )

    def to_measurement(self) -> Measurement:
        return Measurement(
            gender=self.gender,
            age=self.age,
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            neck_cm=self.neck_cm,
            waist_cm=self.waist_cm,
            hip_cm=self.hip_cm,
            activity_level=self.activity_level,
        )


def parse_measurement(data: Mapping[str, Any]) -> Measurement:
    """Coerce raw values into a Measurement.

    Args:
        data: Raw values keyed by form or attribute name; None values
            are treated as missing

    Returns:
        Measurement

    Raises:
        InvalidMeasurementError: If a value cannot be coerced

    Example:
        >>> parse_measurement({"weight": "82.5", "gender": "female"}).weight_kg
        82.5
    """
    cleaned = {key: value for key, value in data.items() if value is not None}
    try:
        return MeasurementInput.model_validate(cleaned).to_measurement()
    except ValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else None
        raise InvalidMeasurementError(
            f"Invalid value for {field}: {error['msg']}", field=field
        ) from e
