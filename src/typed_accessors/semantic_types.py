"""Semantic types and access modes understood by the accessor generator."""

from __future__ import annotations

from enum import Enum

__all__ = ["AccessMode", "SemanticType"]


class SemanticType(Enum):
    """Coercion target of a generated accessor."""

    BOOLEAN_YN = "BooleanYN"
    FLOAT = "Float"
    INTEGER = "Integer"
    DATE = "Date"


class AccessMode(Enum):
    """Which halves of an accessor pair a declaration installs."""

    READER = "reader"
    WRITER = "writer"
    ACCESSOR = "accessor"

    @property
    def readable(self) -> bool:
        return self is not AccessMode.WRITER

    @property
    def writable(self) -> bool:
        return self is not AccessMode.READER

    @classmethod
    def from_flags(cls, *, readable: bool, writable: bool) -> "AccessMode":
        if readable and writable:
            return cls.ACCESSOR
        if writable:
            return cls.WRITER
        if readable:
            return cls.READER
        raise ValueError("An accessor must be readable, writable, or both")
