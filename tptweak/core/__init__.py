"""
Core tweak functionality for tptweak.

This module provides:
- The tweak entry model and its kinds
- The JSON value codec
- The persistent store and entry registry
"""

from .codec import TweakError, EncodeError, DecodeError, encode, decode
from .entry import (
    TweakEntry,
    TweakKind,
    Switch,
    Action,
    StringChoice,
    NumberChoice,
    make_identifier,
)
from .store import TweakStore

__all__ = [
    "TweakEntry",
    "TweakKind",
    "Switch",
    "Action",
    "StringChoice",
    "NumberChoice",
    "make_identifier",
    "TweakStore",
    "TweakError",
    "EncodeError",
    "DecodeError",
    "encode",
    "decode",
]
