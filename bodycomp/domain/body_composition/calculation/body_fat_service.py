"""BodyFatService - U.S. Navy body-fat estimate."""

import math

from ..core.exceptions.domain_errors import InvalidMeasurementError
from ..core.ports.calculators import IBodyFatCalculator
from ..core.value_objects.gender import Gender
from ..core.value_objects.measurement import Measurement

CM_PER_INCH = 2.54
MIN_BODY_FAT_PERCENT = 0.0
MAX_BODY_FAT_PERCENT = 50.0


def _log10(x: float) -> float:
    """log10 with IEEE semantics instead of raising on domain errors."""
    if x > 0:
        return math.log10(x)
    if x == 0:
        return -math.inf
    return math.nan


def clamp_body_fat(raw_percent: float) -> float:
    """Clamp a raw estimate to [0, 50]; NaN collapses to 0."""
    if math.isnan(raw_percent):
        return MIN_BODY_FAT_PERCENT
    return max(MIN_BODY_FAT_PERCENT, min(MAX_BODY_FAT_PERCENT, raw_percent))


class BodyFatService(IBodyFatCalculator):
    """Estimate body-fat percentage from circumferences and height.

    All lengths are converted from centimeters to inches before use.

    Formula:
        Men:   86.010 × log10(waist - neck) - 70.041 × log10(height) + 36.76
        Women: 163.205 × log10(waist + hip - neck) - 97.684 × log10(height) - 78.387

    When the logarithm argument is not positive the formula is undefined.
    In permissive mode (default) the arithmetic is allowed to produce NaN
    or infinity and the clamp to [0, 50] absorbs it, so e.g. a waist
    smaller than the neck yields 0. Callers that want to report this can
    check raw_percent() for a non-finite value. In strict mode the measurement is
    rejected with InvalidMeasurementError.

    References:
        Hodgdon JA, Beckett MB. Prediction of percent body fat for U.S. Navy
        men and women from body circumferences and height. Naval Health
        Research Center, 1984.
    """

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def log_argument(self, measurement: Measurement) -> float:
        """Circumference term fed to the first logarithm, in inches."""
        neck_in = measurement.neck_cm / CM_PER_INCH
        waist_in = measurement.waist_cm / CM_PER_INCH
        if measurement.gender is Gender.MALE:
            return waist_in - neck_in
        hip_in = measurement.hip_cm / CM_PER_INCH
        return waist_in + hip_in - neck_in

    def raw_percent(self, measurement: Measurement) -> float:
        """Unclamped formula output; may be NaN or infinite.

        Example:
            >>> service = BodyFatService()
            >>> round(service.raw_percent(Measurement.default()), 2)
            15.38
        """
        height_in = measurement.height_cm / CM_PER_INCH
        argument = self.log_argument(measurement)

        if measurement.gender is Gender.MALE:
            return 86.010 * _log10(argument) - 70.041 * _log10(height_in) + 36.76
        return 163.205 * _log10(argument) - 97.684 * _log10(height_in) - 78.387

    def calculate(self, measurement: Measurement) -> float:
        """Estimate body fat, clamped to [0, 50].

        Args:
            measurement: Biometric inputs

        Returns:
            float: Body-fat percentage

        Raises:
            InvalidMeasurementError: In strict mode, if a numeric field is
                not positive or the logarithm argument is not positive
        """
        if self._strict:
            self._validate(measurement)

        return clamp_body_fat(self.raw_percent(measurement))

    def _validate(self, measurement: Measurement) -> None:
        non_positive = measurement.non_positive_fields()
        if non_positive:
            field = non_positive[0]
            raise InvalidMeasurementError(
                f"{field} must be positive, got {getattr(measurement, field)}",
                field=field,
            )

        if self.log_argument(measurement) <= 0:
            if measurement.gender is Gender.MALE:
                message = "For male, waist must be greater than neck"
            else:
                message = "For female, waist + hip must be greater than neck"
            raise InvalidMeasurementError(message, field="waist_cm")
