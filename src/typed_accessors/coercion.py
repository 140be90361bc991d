"""Conversion functions applied by generated typed writers.

Each converter takes the name of the field being written (for error messages)
and the raw value, and returns the value to store. Input variants are handled
explicitly: text, ``None``, real numbers, and, for dates, already-typed
values. Booleans are never treated as numbers.
"""

from __future__ import annotations

import numbers
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Dict

from dateutil import parser as dateutil_parser

from .config import get_date_settings
from .exceptions import ArgumentTypeError, DateParseError
from .semantic_types import SemanticType

__all__ = [
    "Converter",
    "coerce_bool_yn",
    "coerce_date",
    "coerce_float",
    "coerce_int",
    "converter_for",
]

Converter = Callable[[str, Any], Any]

_YES_PATTERN = re.compile(r"y(es)?|t(rue)?", re.IGNORECASE)
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:_\d+)*(?:\.\d+(?:_\d+)*)?|\.\d+(?:_\d+)*)(?:[eE][+-]?\d+)?)", re.ASCII)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+(?:_\d+)*)", re.ASCII)


def coerce_bool_yn(field: str, value: Any) -> bool:
    """Map yes/true style text or ``True`` to ``True``; anything else is ``False``."""
    if value is True:
        return True
    if isinstance(value, str):
        return _YES_PATTERN.fullmatch(value) is not None
    return False


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(1).replace("_", ""))


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        return 0
    return int(match.group(1).replace("_", ""))


def coerce_float(field: str, value: Any) -> float:
    """
    Convert a raw value to float.

    Text is read up to the end of its leading number (``"3.5kg"`` is ``3.5``,
    text without a leading number is ``0.0``). ``None`` is ``0.0``. Real
    numbers and ``Decimal`` values are converted with ``float()``.

    Raises:
        ArgumentTypeError: If the value is a bool or not a real number or text
    """
    if isinstance(value, bool):
        raise ArgumentTypeError.for_field(field, "Float", value)
    if isinstance(value, str):
        return _leading_float(value)
    if value is None:
        return 0.0
    if isinstance(value, (numbers.Real, Decimal)):
        return float(value)
    raise ArgumentTypeError.for_field(field, "Float", value)


def coerce_int(field: str, value: Any) -> int:
    """
    Convert a raw value to int, truncating toward zero.

    Text is read up to the end of its leading integer (``"42.9"`` is ``42``,
    text without a leading integer is ``0``). ``None`` is ``0``.

    Raises:
        ArgumentTypeError: If the value is a bool, a non-finite number, or not
            a real number or text
    """
    if isinstance(value, bool):
        raise ArgumentTypeError.for_field(field, "Integer", value)
    if isinstance(value, str):
        return _leading_int(value)
    if value is None:
        return 0
    if isinstance(value, (numbers.Real, Decimal)):
        try:
            return int(value)
        except (ValueError, OverflowError) as exc:
            raise ArgumentTypeError.for_field(field, "Integer", value) from exc
    raise ArgumentTypeError.for_field(field, "Integer", value)


def _parse_date_text(text: str) -> date:
    candidate = text.strip()
    if candidate.endswith("Z"):
        candidate = candidate[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        settings = get_date_settings()
        parsed = dateutil_parser.parse(text, dayfirst=settings.dayfirst, yearfirst=settings.yearfirst)
    return parsed.date()


def coerce_date(field: str, value: Any) -> Any:
    """
    Parse text into a calendar date; other values are stored unchanged.

    Raises:
        DateParseError: If text does not describe a valid date
    """
    if not isinstance(value, str):
        return value
    try:
        return _parse_date_text(value)
    except (ValueError, OverflowError) as exc:
        raise DateParseError.for_field(field, value) from exc


_CONVERTERS: Dict[SemanticType, Converter] = {
    SemanticType.BOOLEAN_YN: coerce_bool_yn,
    SemanticType.FLOAT: coerce_float,
    SemanticType.INTEGER: coerce_int,
    SemanticType.DATE: coerce_date,
}


def converter_for(semantic_type: SemanticType) -> Converter:
    """Return the converter used by writers of *semantic_type*."""
    try:
        return _CONVERTERS[semantic_type]
    except KeyError as exc:
        raise ValueError(f"Unsupported semantic type: {semantic_type!r}") from exc
