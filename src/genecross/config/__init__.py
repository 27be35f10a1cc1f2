"""Convenience exports for the configuration package.

:mod:`genecross.config.schemas` depends on the operator enums and is imported
explicitly by callers.
"""

from .constants import *  # noqa: F401,F403
from .loader import ConfigError, load_config, save_config
from .logging_conf import JSONFormatter, configure_logging
from .settings import ENV_PREFIX, Settings, get_settings, reset_settings_cache

__all__ = [
    "JSONFormatter",
    "configure_logging",
    "ENV_PREFIX",
    "Settings",
    "get_settings",
    "reset_settings_cache",
    # Loader functions
    "load_config",
    "save_config",
    "ConfigError",
]
