"""Environment-backed configuration for typed accessors."""

from .errors import ConfigurationError
from .runtime import (
    DAYFIRST_ENV,
    YEARFIRST_ENV,
    DateParserSettings,
    env_bool,
    env_str,
    get_date_settings,
    reset_date_settings,
)

__all__ = [
    "ConfigurationError",
    "DAYFIRST_ENV",
    "DateParserSettings",
    "YEARFIRST_ENV",
    "env_bool",
    "env_str",
    "get_date_settings",
    "reset_date_settings",
]
