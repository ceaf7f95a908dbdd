"""
Settings management for tptweak.

Handles loading, saving, and accessing the tweak system configuration.
"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional
import logging

from .defaults import DEFAULT_SETTINGS, DEBUG_ENV_VAR

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


class Settings:
    """
    Tweak system settings manager.

    Settings are stored as JSON in the user's config directory.

    Path:
        Linux/macOS: ~/.config/tptweak/settings.json
        Windows: %APPDATA%\\tptweak\\settings.json
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            config_dir: Override for the configuration directory
        """
        self.config_dir = Path(config_dir) if config_dir else self._get_config_dir()
        self.config_file = self.config_dir / "settings.json"
        self._settings: Dict[str, Any] = {}
        self.load()

    @staticmethod
    def _get_config_dir() -> Path:
        """
        Get platform-specific configuration directory.

        Returns:
            Path to configuration directory
        """
        if os.name == 'nt':  # Windows
            base = os.environ.get('APPDATA', os.path.expanduser('~'))
        else:  # Linux/macOS
            base = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))

        return Path(base) / 'tptweak'

    def load(self):
        """
        Load settings from file.

        If file doesn't exist or is invalid, uses default settings.
        """
        self._settings = copy.deepcopy(DEFAULT_SETTINGS)

        if not self.config_file.exists():
            logger.info("No config file found, using defaults")
            return

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                loaded_settings = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.error(f"Failed to load settings: {e}, using defaults")
            return

        if not isinstance(loaded_settings, dict):
            logger.error(f"Settings file {self.config_file} is not a JSON object, using defaults")
            return

        self._deep_update(self._settings, loaded_settings)
        logger.info(f"Loaded settings from {self.config_file}")

    def save(self):
        """
        Save current settings to file.

        Creates parent directories if needed.
        """
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)

            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self._settings, f, indent=2)

            logger.info(f"Saved settings to {self.config_file}")

        except IOError as e:
            logger.error(f"Failed to save settings: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get setting value.

        Supports nested keys with dot notation: "store.file"

        Args:
            key: Setting key (use dots for nested values)
            default: Default value if key not found

        Returns:
            Setting value or default
        """
        value = self._settings

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """
        Set setting value.

        Supports nested keys with dot notation: "store.file"

        Args:
            key: Setting key (use dots for nested values)
            value: Value to set
        """
        keys = key.split('.')
        target = self._settings

        for k in keys[:-1]:
            if k not in target or not isinstance(target[k], dict):
                target[k] = {}
            target = target[k]

        target[keys[-1]] = value

    def is_debug(self) -> bool:
        """
        Resolve the build-mode gate.

        The TPTWEAK_DEBUG environment variable wins, then the "debug"
        setting, then the interpreter's own __debug__ flag.
        """
        env_value = os.environ.get(DEBUG_ENV_VAR)
        if env_value is not None:
            normalized = env_value.strip().lower()
            if normalized in _TRUTHY:
                return True
            if normalized in _FALSY:
                return False
            logger.warning(f"Ignoring unrecognized {DEBUG_ENV_VAR}={env_value!r}")

        configured = self.get("debug")
        if configured is not None:
            return bool(configured)

        return __debug__

    def get_store_file(self) -> Path:
        """
        Get the path of the tweak store file.

        Returns:
            Configured path, or tweaks.ini in the config directory
        """
        path = self.get("store.file", "")
        if path:
            return Path(path).expanduser()
        return self.config_dir / "tweaks.ini"

    @staticmethod
    def _deep_update(base: dict, updates: dict):
        """
        Recursively update base dict with values from updates dict.

        Args:
            base: Dictionary to update
            updates: Dictionary with new values
        """
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                Settings._deep_update(base[key], value)
            else:
                base[key] = value
