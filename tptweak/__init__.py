"""
tptweak - runtime developer tweaks backed by persistent storage.
"""

from .core import (
    TweakEntry,
    Switch,
    Action,
    StringChoice,
    NumberChoice,
    TweakStore,
    TweakError,
)
from .config import Settings
from .bootstrap import create_store

__version__ = "1.0.0"

__all__ = [
    "TweakEntry",
    "Switch",
    "Action",
    "StringChoice",
    "NumberChoice",
    "TweakStore",
    "TweakError",
    "Settings",
    "create_store",
]
