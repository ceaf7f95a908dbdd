"""
Process startup for tptweak.

Call create_store() once when the app starts and pass the returned
store to anything that registers or reads tweaks.
"""

import logging
from typing import Optional

from .config import Settings
from .core import TweakStore
from .utils import setup_logging

logger = logging.getLogger(__name__)


def create_store(settings: Optional[Settings] = None, configure_logging: bool = False) -> TweakStore:
    """
    Build the process-wide tweak store from settings.

    Args:
        settings: Loaded settings, or None to load from the config directory
        configure_logging: If True, set up logging from the "logging" settings

    Returns:
        A store using the configured file and build-mode gate
    """
    if settings is None:
        settings = Settings()

    if configure_logging:
        setup_logging(
            log_level=settings.get("logging.level", "INFO"),
            log_file=bool(settings.get("logging.to_file", False)),
            tweak_level=settings.get("logging.tweak_level"),
        )

    store = TweakStore.from_settings(settings)
    if store.debug:
        logger.info(f"Tweaks enabled, values stored in {store.path}")
    else:
        logger.info("Tweaks disabled, all tweak values read as unset")
    return store
