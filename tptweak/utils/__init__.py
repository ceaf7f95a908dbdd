"""
Utility functions for tptweak.
"""

from .logger import TWEAK_LOGGER, get_log_dir, set_tweak_log_level, setup_logging

__all__ = ["setup_logging", "set_tweak_log_level", "get_log_dir", "TWEAK_LOGGER"]
