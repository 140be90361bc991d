"""Typed reader/writer generation for yes-no flags, floats, integers and dates."""

from .accessors import TypedAccessors, TypedField, typed_fields
from .coercion import coerce_bool_yn, coerce_date, coerce_float, coerce_int, converter_for
from .exceptions import ArgumentTypeError, DateParseError, TypedAccessorError
from .population import populate, populate_from_json
from .semantic_types import AccessMode, SemanticType

__all__ = [
    "AccessMode",
    "ArgumentTypeError",
    "DateParseError",
    "SemanticType",
    "TypedAccessorError",
    "TypedAccessors",
    "TypedField",
    "coerce_bool_yn",
    "coerce_date",
    "coerce_float",
    "coerce_int",
    "converter_for",
    "populate",
    "populate_from_json",
    "typed_fields",
]
