"""Application services for body composition estimates."""

from .inputs import MeasurementInput, parse_measurement
from .orchestrators import EstimatorOrchestrator

__all__ = ["MeasurementInput", "parse_measurement", "EstimatorOrchestrator"]
