"""
Default settings for tptweak.

These are the values used when no user configuration exists.
"""

DEFAULT_SETTINGS = {
    "version": "1.0.0",

    # Build-mode gate. None means follow the interpreter (__debug__),
    # so tweaks go inert under `python -O`.
    "debug": None,

    # Tweak storage
    "store": {
        "file": "",  # empty means <config dir>/tweaks.ini
    },

    # Logging
    "logging": {
        "level": "INFO",
        "to_file": False,
        # Level for tptweak loggers only, None follows "level"
        "tweak_level": None,
    },
}

# Environment variable that overrides the "debug" setting
DEBUG_ENV_VAR = "TPTWEAK_DEBUG"
