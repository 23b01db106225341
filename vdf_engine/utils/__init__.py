"""Utility modules for the VDF engine."""

from .EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .IterationEstimator import IterationEstimator

__all__ = ["EnvironmentManager", "EnvironmentVariables", "IterationEstimator"]
