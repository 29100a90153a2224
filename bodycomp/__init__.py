"""Body composition estimator."""

__version__ = "0.1.0"
