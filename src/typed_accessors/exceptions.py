"""Exception classes raised by generated typed writers.

Exception classes support two patterns:
1. No-argument raise: raise TypedAccessorError()
2. Contextual attributes: err = ArgumentTypeError(field="x", expected="Float"); raise err
"""

from typing import Any

__all__ = ["ArgumentTypeError", "DateParseError", "TypedAccessorError"]


class TypedAccessorError(Exception):
    """Base exception for all typed accessor errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Typed accessor error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ArgumentTypeError(TypedAccessorError, ValueError):
    """Value has no supported conversion to the declared type."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Value has no supported conversion to the declared type"
        super().__init__(message, **kwargs)

    @classmethod
    def for_field(cls, field: str, expected: str, value: Any) -> "ArgumentTypeError":
        """Create error for a writer that cannot convert *value*."""
        return cls(f"{field} must be {expected}", field=field, expected=expected, value=value)


class DateParseError(TypedAccessorError, ValueError):
    """Text could not be parsed as a calendar date."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Text could not be parsed as a calendar date"
        super().__init__(message, **kwargs)

    @classmethod
    def for_field(cls, field: str, value: str) -> "DateParseError":
        """Create error for unparseable date text."""
        return cls(f"{field} has invalid date {value!r}", field=field, value=value)
