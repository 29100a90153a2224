"""Orchestrators for body composition estimates."""

from .estimator_orchestrator import EstimatorOrchestrator

__all__ = ["EstimatorOrchestrator"]
