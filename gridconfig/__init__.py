"""
Configuration package for the gift grid planner.

Reads settings from the environment (and an optional .env file) and
validates them before any service is constructed.
"""
from .base import PlannerConfiguration, ConfigurationError

__all__ = [
    'PlannerConfiguration',
    'ConfigurationError'
]
