"""Utility modules for the numeric tower."""

from .SystemSpecs import SystemSpecs
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables

__all__ = ["SystemSpecs", "EnvironmentManager", "EnvironmentVariables"]
