"""
Persistent tweak store.

Values live in a QSettings INI file, one key per entry identifier, each
holding the codec's JSON bytes. The store also keeps the registry of
entries that presentation layers list.
"""

import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from PySide6.QtCore import QByteArray, QSettings

from . import codec
from .codec import DecodeError, EncodeError
from .entry import TweakEntry

logger = logging.getLogger(__name__)


class TweakStore:
    """
    Keyed persistence for tweak values plus the entry registry.

    Create one per process and pass it to whatever needs it. When debug
    is False every read returns None and writes/removes do nothing.

    All public methods are safe to call from any thread.
    """

    def __init__(self, path: Union[str, Path], debug: bool = True):
        self.path = Path(path)
        self.debug = debug
        self._lock = threading.RLock()
        self._entries: List[TweakEntry] = []

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._settings = QSettings(str(self.path), QSettings.Format.IniFormat)

        logger.debug(f"Opened tweak store at {self.path} (debug={self.debug})")

    @classmethod
    def from_settings(cls, settings) -> "TweakStore":
        """Build a store from a tptweak.config.Settings instance."""
        return cls(settings.get_store_file(), debug=settings.is_debug())

    def read(self, value_type: Any, identifier: str) -> Any:
        """
        Read and decode the value stored under identifier.

        Returns:
            Decoded value, or None on a miss, a decode failure, or
            outside debug mode
        """
        if not self.debug:
            return None

        with self._lock:
            raw = self._settings.value(identifier)

        if raw is None:
            return None

        try:
            return codec.decode(self._to_bytes(raw), value_type)
        except DecodeError as e:
            logger.debug(f"Could not read tweak {identifier}: {e}")
            return None

    def set(self, value: Any, identifier: str) -> Any:
        """
        Serialize value and store it under identifier.

        Returns:
            The value on success, None if it could not be serialized or
            written, or outside debug mode
        """
        if not self.debug:
            return None

        try:
            data = codec.encode(value)
        except EncodeError as e:
            logger.warning(f"Not storing tweak {identifier}: {e}")
            return None

        with self._lock:
            self._settings.setValue(identifier, QByteArray(data))
            self._settings.sync()
            status = self._settings.status()

        if status != QSettings.Status.NoError:
            logger.warning(f"Failed to write tweak {identifier} to {self.path}: {status}")
            return None

        return value

    def remove(self, identifier: str) -> None:
        """Delete the value stored under identifier, if any."""
        # QSettings treats an empty key as "everything"
        if not self.debug or not identifier:
            return

        with self._lock:
            self._settings.remove(identifier)
            self._settings.sync()

    def clear(self) -> None:
        """Delete every stored value. Registered entries are kept."""
        if not self.debug:
            return

        with self._lock:
            self._settings.clear()
            self._settings.sync()

        logger.info(f"Cleared all tweak values in {self.path}")

    def add(self, entry: TweakEntry) -> None:
        """Append entry to the registry. Duplicates are kept."""
        with self._lock:
            self._entries.append(entry)
        logger.debug(f"Registered tweak {entry.identifier}")

    def entries(self) -> List[TweakEntry]:
        """Registered entries in registration order."""
        with self._lock:
            return list(self._entries)

    def entry_for(self, identifier: str) -> Optional[TweakEntry]:
        """Most recently registered entry with this identifier, or None."""
        with self._lock:
            for entry in reversed(self._entries):
                if entry.identifier == identifier:
                    return entry
        return None

    def grouped(self) -> Dict[str, Dict[str, List[TweakEntry]]]:
        """
        Registry grouped for display: category -> section -> entries.

        Categories and sections appear in the order they were first
        registered.
        """
        groups: Dict[str, Dict[str, List[TweakEntry]]] = {}
        for entry in self.entries():
            groups.setdefault(entry.category, {}).setdefault(entry.section, []).append(entry)
        return groups

    def sync(self) -> None:
        """Flush pending writes to disk."""
        with self._lock:
            self._settings.sync()

    def close(self) -> None:
        """Flush the store before it is dropped."""
        self.sync()

    def __enter__(self) -> "TweakStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @staticmethod
    def _to_bytes(raw: Any) -> bytes:
        if isinstance(raw, QByteArray):
            return raw.data()
        if isinstance(raw, bytes):
            return raw
        if isinstance(raw, str):
            return raw.encode("utf-8")
        raise DecodeError(f"Unexpected stored value of type {type(raw).__name__}")
