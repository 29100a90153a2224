"""Unit tests for MeasurementInput coercion."""

import pytest

from bodycomp.application.body_composition.inputs import (
    MeasurementInput,
    parse_measurement,
)
from bodycomp.domain.body_composition.core.exceptions import InvalidMeasurementError
from bodycomp.domain.body_composition.core.value_objects import (
    ActivityLevel,
    Gender,
    Measurement,
)


class TestParseMeasurement:
    """Test coercion of raw form values."""

    def test_empty_gives_defaults(self):
        """Test missing fields take the form defaults."""
        assert parse_measurement({}) == Measurement.default()

    def test_form_field_names(self):
        """Test the form's field names are accepted."""
        measurement = parse_measurement(
            {
                "gender": "female",
                "age": "31",
                "weight": "62.5",
                "height": "168",
                "neck": "32",
                "waist": "71",
                "hip": "99",
                "exerciseLevel": "3-5x",
            }
        )

        assert measurement.gender is Gender.FEMALE
        assert measurement.age == 31.0
        assert measurement.weight_kg == 62.5
        assert measurement.height_cm == 168.0
        assert measurement.hip_cm == 99.0
        assert measurement.activity_level is ActivityLevel.MODERATE

    def test_attribute_names(self):
        """Test measurement attribute names are accepted too."""
        measurement = parse_measurement({"weight_kg": 90, "activity_level": "daily"})

        assert measurement.weight_kg == 90.0
        assert measurement.activity_level is ActivityLevel.DAILY

    def test_none_values_ignored(self):
        measurement = parse_measurement({"weight": None, "waist": " 85 "})

        assert measurement.weight_kg == 70.0
        assert measurement.waist_cm == 85.0

    def test_non_numeric_raises(self):
        """Test non-numeric input raises InvalidMeasurementError."""
        with pytest.raises(InvalidMeasurementError) as exc:
            parse_measurement({"waist": "abc"})

        assert exc.value.field == "waist"

    def test_nan_rejected(self):
        with pytest.raises(InvalidMeasurementError):
            parse_measurement({"height": "nan"})

    def test_unknown_gender_raises(self):
        with pytest.raises(InvalidMeasurementError) as exc:
            parse_measurement({"gender": "unknown"})

        assert exc.value.field == "gender"

    def test_negative_values_pass_coercion(self):
        """Test coercion does not enforce positive numbers."""
        measurement = parse_measurement({"neck": "-3"})

        assert measurement.neck_cm == -3.0


class TestMeasurementInput:
    """Test the pydantic model directly."""

    def test_to_measurement(self):
        model = MeasurementInput(weight=75.0, gender="male")

        measurement = model.to_measurement()

        assert measurement.weight_kg == 75.0
        assert measurement.gender is Gender.MALE
