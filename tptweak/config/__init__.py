"""
Configuration management for tptweak.

This module handles the store location, the build-mode gate, and logging
preferences.
"""

from .settings import Settings
from .defaults import DEFAULT_SETTINGS, DEBUG_ENV_VAR

__all__ = ["Settings", "DEFAULT_SETTINGS", "DEBUG_ENV_VAR"]
