"""
Typed accessor generation for opt-in classes.

A class inherits from ``TypedAccessors`` and declares which attributes are
typed, either in the class body through ``TypedField`` or after the body
through the registration classmethods::

    class Trip(TypedAccessors):
        distance = TypedField(SemanticType.FLOAT)

    Trip.int_accessor("count")
    Trip.bool_yn_accessor("onfire")
    Trip.date_accessor("day")

Writers convert the raw value with the converter of the declared semantic
type; readers return the stored value, or ``None`` before the first write.
Values live in the instance attribute ``_<name>``.
"""

from __future__ import annotations

import keyword
import logging
from typing import Any, Dict, Iterable, Optional, Union

from .coercion import Converter, converter_for
from .semantic_types import AccessMode, SemanticType

logger = logging.getLogger(__name__)

__all__ = ["TypedAccessors", "TypedField", "typed_fields"]

SemanticTypeLike = Union[SemanticType, str]


def _resolve_type(semantic_type: SemanticTypeLike) -> SemanticType:
    if isinstance(semantic_type, SemanticType):
        return semantic_type
    return SemanticType(semantic_type)


def _validate_name(name: Any) -> str:
    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        raise ValueError(f"Accessor name must be a Python identifier, got {name!r}")
    if name.startswith("_"):
        raise ValueError(f"Accessor name must not start with an underscore, got {name!r}")
    return name


class TypedField:
    """Data descriptor backing one generated reader/writer pair."""

    def __init__(
        self,
        semantic_type: SemanticTypeLike,
        mode: AccessMode = AccessMode.ACCESSOR,
        *,
        name: Optional[str] = None,
    ) -> None:
        self.semantic_type = _resolve_type(semantic_type)
        self.mode = mode
        self.converter: Optional[Converter] = converter_for(self.semantic_type) if mode.writable else None
        self.name: Optional[str] = None if name is None else _validate_name(name)

    def __set_name__(self, owner: type, name: str) -> None:
        if self.name is None:
            self.name = _validate_name(name)

    @property
    def readable(self) -> bool:
        return self.mode.readable

    @property
    def writable(self) -> bool:
        return self.mode.writable

    @property
    def slot(self) -> str:
        if self.name is None:
            raise AttributeError("TypedField is not bound to an attribute name")
        return f"_{self.name}"

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        if not self.readable:
            raise AttributeError(f"{type(instance).__name__!r} object attribute {self.name!r} is write-only")
        return instance.__dict__.get(self.slot)

    def __set__(self, instance: Any, value: Any) -> None:
        if not self.writable or self.converter is None:
            raise AttributeError(f"{type(instance).__name__!r} object attribute {self.name!r} is read-only")
        instance.__dict__[self.slot] = self.converter(self.name, value)

    def __delete__(self, instance: Any) -> None:
        instance.__dict__.pop(self.slot, None)

    def merged_with(self, newer: "TypedField") -> "TypedField":
        """Combine capabilities with a later declaration for the same name.

        The writer conversion comes from *newer* when it installs a writer.
        """
        if newer.writable or not self.writable:
            semantic_type = newer.semantic_type
        else:
            semantic_type = self.semantic_type
        mode = AccessMode.from_flags(
            readable=self.readable or newer.readable,
            writable=self.writable or newer.writable,
        )
        return TypedField(semantic_type, mode, name=newer.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedField):
            return NotImplemented
        return (self.name, self.semantic_type, self.mode) == (other.name, other.semantic_type, other.mode)

    def __hash__(self) -> int:
        return hash((self.name, self.semantic_type, self.mode))

    def __repr__(self) -> str:
        return f"TypedField({self.semantic_type.value}, {self.mode.value}, name={self.name!r})"


def _inherited_field(cls: type, name: str) -> Optional[TypedField]:
    for klass in cls.__mro__:
        if name in klass.__dict__:
            candidate = klass.__dict__[name]
            return candidate if isinstance(candidate, TypedField) else None
    return None


def typed_fields(cls: type) -> Dict[str, TypedField]:
    """Return the typed fields visible on *cls*, base classes first."""
    fields: Dict[str, TypedField] = {}
    for klass in reversed(cls.__mro__):
        for name, value in vars(klass).items():
            if isinstance(value, TypedField):
                fields[name] = value
            elif name in fields:
                del fields[name]
    return fields


def _shortcut(mode: AccessMode, semantic_type: SemanticType) -> classmethod:
    def declare(cls, *names: str) -> None:
        cls.install_fields(mode, semantic_type, names)

    declare.__doc__ = f"Declare {semantic_type.value} {mode.value}s for each of *names*."
    return classmethod(declare)


class TypedAccessors:
    """Opt-in base class providing typed accessor registration."""

    @classmethod
    def install_fields(cls, mode: AccessMode, semantic_type: SemanticTypeLike, names: Iterable[str]) -> None:
        """Install one ``TypedField`` per name, merging with earlier declarations."""
        if isinstance(names, str):
            raise TypeError(f"names must be a collection of attribute names, not the string {names!r}")
        resolved = _resolve_type(semantic_type)
        for name in names:
            field = TypedField(resolved, mode, name=name)
            existing = _inherited_field(cls, name)
            if existing is not None:
                field = existing.merged_with(field)
                logger.debug("Merged %s declaration into %s.%s -> %r", mode.value, cls.__name__, name, field)
            else:
                logger.debug("Installed %r on %s", field, cls.__name__)
            setattr(cls, name, field)

    @classmethod
    def declare_reader(cls, semantic_type: SemanticTypeLike, *names: str) -> None:
        """Install readers only; assigning these attributes raises ``AttributeError``."""
        cls.install_fields(AccessMode.READER, semantic_type, names)

    @classmethod
    def declare_accessor(cls, semantic_type: SemanticTypeLike, *names: str) -> None:
        """Install reader and converting writer for each name."""
        cls.install_fields(AccessMode.ACCESSOR, semantic_type, names)

    @classmethod
    def declare_writer(cls, semantic_type: SemanticTypeLike, *names: str) -> None:
        """Install converting writers only; reading these attributes raises ``AttributeError``."""
        cls.install_fields(AccessMode.WRITER, semantic_type, names)

    bool_yn_reader = _shortcut(AccessMode.READER, SemanticType.BOOLEAN_YN)
    bool_yn_accessor = _shortcut(AccessMode.ACCESSOR, SemanticType.BOOLEAN_YN)
    bool_yn_writer = _shortcut(AccessMode.WRITER, SemanticType.BOOLEAN_YN)

    float_reader = _shortcut(AccessMode.READER, SemanticType.FLOAT)
    float_accessor = _shortcut(AccessMode.ACCESSOR, SemanticType.FLOAT)
    float_writer = _shortcut(AccessMode.WRITER, SemanticType.FLOAT)

    int_reader = _shortcut(AccessMode.READER, SemanticType.INTEGER)
    int_accessor = _shortcut(AccessMode.ACCESSOR, SemanticType.INTEGER)
    int_writer = _shortcut(AccessMode.WRITER, SemanticType.INTEGER)

    date_reader = _shortcut(AccessMode.READER, SemanticType.DATE)
    date_accessor = _shortcut(AccessMode.ACCESSOR, SemanticType.DATE)
    date_writer = _shortcut(AccessMode.WRITER, SemanticType.DATE)
