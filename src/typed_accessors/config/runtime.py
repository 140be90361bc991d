from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration."""


import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

DAYFIRST_ENV = "TYPED_ACCESSORS_DATE_DAYFIRST"
YEARFIRST_ENV = "TYPED_ACCESSORS_DATE_YEARFIRST"

_DATE_SETTINGS: Optional["DateParserSettings"] = None


def env_str(name: str, or_value: str | None = None) -> str | None:
    """Fetch an environment variable as a stripped, non-blank string."""

    value = os.getenv(name)
    if value is None:
        return or_value
    value = value.strip()
    if value == "":
        return or_value
    return value


def env_bool(name: str, or_value: bool | None = None) -> bool | None:
    """Fetch an environment variable and coerce it to ``bool``."""

    raw = env_str(name)
    if raw is None:
        return or_value

    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError.invalid_format(name, raw, "one of " + ", ".join(sorted(_TRUE_VALUES | _FALSE_VALUES)))


@dataclass(frozen=True)
class DateParserSettings:
    """Options handed to ``dateutil`` when text is not ISO formatted."""

    dayfirst: bool = True
    yearfirst: bool = False

    @classmethod
    def from_env(cls) -> "DateParserSettings":
        yearfirst = bool(env_bool(YEARFIRST_ENV, or_value=False))
        # Slash dates read day-first unless year-first parsing is requested.
        dayfirst = bool(env_bool(DAYFIRST_ENV, or_value=not yearfirst))
        if dayfirst and yearfirst:
            raise ConfigurationError.conflicting_values(DAYFIRST_ENV, YEARFIRST_ENV)
        return cls(dayfirst=dayfirst, yearfirst=yearfirst)


def get_date_settings() -> DateParserSettings:
    """Return the cached date parser settings, loading them on first use."""

    global _DATE_SETTINGS
    if _DATE_SETTINGS is None:
        _DATE_SETTINGS = DateParserSettings.from_env()
    return _DATE_SETTINGS


def reset_date_settings() -> None:
    """Drop cached settings so the next lookup re-reads the environment."""

    global _DATE_SETTINGS
    _DATE_SETTINGS = None
