from __future__ import annotations

"""Exception types for configuration handling."""


class ConfigurationError(RuntimeError):
    """Raised when configuration values are missing or malformed."""

    @classmethod
    def invalid_format(
        cls, param_name: str, received_value: str, expected_format: str = ""
    ) -> "ConfigurationError":
        """Create error for invalid format."""
        msg = f"{param_name} has invalid format (received {received_value!r})"
        if expected_format:
            msg += f". Expected {expected_format}"
        return cls(msg)

    @classmethod
    def conflicting_values(cls, first: str, second: str) -> "ConfigurationError":
        """Create error for two settings that cannot both be enabled."""
        return cls(f"{first} and {second} cannot both be enabled")


__all__ = ["ConfigurationError"]
