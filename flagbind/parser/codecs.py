# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value codecs: per-type conversion between command-line text and typed values.

Each codec decodes a token into a value of its semantic type and renders a
value back to text for help output. Decoding failures raise
`ConversionError` with the underlying diagnostic preserved verbatim.

Built-in codecs:
- BoolCodec: presence flag; decoding always yields True.
- IntCodec: base-10 signed integers, bounded to a fixed bit width.
- FloatCodec: floating point numbers.
- StrCodec: the token itself.
- PathCodec: `pathlib.Path`.
- DateTimeCodec: `datetime.datetime` via `dateutil`.
- EnumCodec: members of an `Enum` subclass, by name or value.

Functions:
- codec_for: Resolve a Python type (or codec instance) to a codec.
- register_codec: Add or replace the codec used for a type.
"""
from __future__ import annotations

import math
import types
from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum, EnumMeta
from pathlib import Path
from typing import Any, Union, get_args, get_origin

from dateutil import parser as date_parser

from flagbind.exceptions import ConversionError, UnsupportedTypeError
from flagbind.parser.parser_types import ParseErrorKind


class ValueCodec(ABC):
    """Converts command-line text to a typed value and back."""

    value_type: Any = object
    is_flag: bool = False

    @abstractmethod
    def decode(self, text: str) -> Any:
        """Convert `text` into a value, raising `ConversionError` on failure."""

    def render(self, value: Any) -> str:
        """Format `value` for display in help text."""
        return str(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BoolCodec(ValueCodec):
    """Boolean flag. Presence is the signal, so any input decodes to True."""

    value_type = bool
    is_flag = True

    def decode(self, text: str) -> bool:
        return True

    def render(self, value: Any) -> str:
        return "true" if value else "false"


class IntCodec(ValueCodec):
    """Signed base-10 integer limited to a `bits` wide two's complement range."""

    value_type = int

    def __init__(self, bits: int = 64) -> None:
        if bits <= 0:
            raise ValueError("bits must be a positive integer")
        self.bits = bits
        self.min_value = -(1 << (bits - 1))
        self.max_value = (1 << (bits - 1)) - 1

    def decode(self, text: str) -> int:
        try:
            value = int(text)
        except ValueError as error:
            # int() refuses very long digit strings before range checking
            kind = (
                ParseErrorKind.OUT_OF_RANGE
                if "Exceeds the limit" in str(error)
                and text.strip().lstrip("+-").isdigit()
                else ParseErrorKind.INVALID_ARGUMENT
            )
            raise ConversionError(kind, text, str(error)) from error
        if not self.min_value <= value <= self.max_value:
            raise ConversionError(
                ParseErrorKind.OUT_OF_RANGE,
                text,
                f"{value} does not fit in a {self.bits}-bit signed integer",
            )
        return value

    def __repr__(self) -> str:
        return f"IntCodec(bits={self.bits})"


class FloatCodec(ValueCodec):
    """Floating point number. Finite literals that overflow are out of range."""

    value_type = float

    def decode(self, text: str) -> float:
        try:
            value = float(text)
        except ValueError as error:
            raise ConversionError(
                ParseErrorKind.INVALID_ARGUMENT, text, str(error)
            ) from error
        if math.isinf(value) and "inf" not in text.lower():
            raise ConversionError(
                ParseErrorKind.OUT_OF_RANGE,
                text,
                f"{text.strip()!r} overflows a double precision float",
            )
        return value

    def render(self, value: Any) -> str:
        return repr(float(value))


class StrCodec(ValueCodec):
    """Text string. Never fails."""

    value_type = str

    def decode(self, text: str) -> str:
        return text


class PathCodec(ValueCodec):
    value_type = Path

    def decode(self, text: str) -> Path:
        return Path(text)


class DateTimeCodec(ValueCodec):
    """Date/time parsed with `dateutil`, rendered in ISO 8601."""

    value_type = datetime

    def decode(self, text: str) -> datetime:
        try:
            return date_parser.parse(text)
        except (ValueError, OverflowError) as error:
            kind = (
                ParseErrorKind.OUT_OF_RANGE
                if isinstance(error, OverflowError)
                else ParseErrorKind.INVALID_ARGUMENT
            )
            raise ConversionError(kind, text, str(error)) from error

    def render(self, value: Any) -> str:
        if isinstance(value, datetime):
            return value.isoformat()
        return str(value)


class EnumCodec(ValueCodec):
    """Enum member looked up by name first, then by value."""

    def __init__(self, enum_type: EnumMeta) -> None:
        self.value_type = enum_type

    def decode(self, text: str) -> Enum:
        enum_type = self.value_type
        try:
            return enum_type[text]
        except KeyError:
            pass

        base_type = type(next(iter(enum_type)).value)
        try:
            return enum_type(base_type(text))
        except (ValueError, TypeError) as error:
            values = ", ".join(member.name for member in enum_type)
            raise ConversionError(
                ParseErrorKind.INVALID_ARGUMENT,
                text,
                f"'{text}' should be one of {{{values}}}",
            ) from error

    def render(self, value: Any) -> str:
        if isinstance(value, Enum):
            return value.name
        return str(value)

    def __repr__(self) -> str:
        return f"EnumCodec({self.value_type.__name__})"


_CODECS: dict[Any, ValueCodec] = {
    bool: BoolCodec(),
    int: IntCodec(),
    float: FloatCodec(),
    str: StrCodec(),
    Path: PathCodec(),
    datetime: DateTimeCodec(),
}


TYPE_NAMES: dict[str, Any] = {
    "bool": bool,
    "int": int,
    "float": float,
    "str": str,
    "path": Path,
    "datetime": datetime,
}


def register_codec(value_type: Any, codec: ValueCodec) -> None:
    """
    Register `codec` as the codec used for `value_type`.

    Args:
        value_type (type): The Python type parameters are annotated with.
        codec (ValueCodec): The codec instance to use for that type.
    """
    if not isinstance(codec, ValueCodec):
        raise TypeError(f"codec must be a ValueCodec instance, got {type(codec)}")
    _CODECS[value_type] = codec


def _unwrap_optional(target_type: Any) -> Any:
    origin = get_origin(target_type)
    if isinstance(target_type, types.UnionType) or origin is Union:
        args = [arg for arg in get_args(target_type) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return target_type


def codec_for(target_type: Any) -> ValueCodec:
    """
    Resolve the codec for a parameter type.

    Accepts a `ValueCodec` instance (returned unchanged), a registered type,
    a type name from `TYPE_NAMES`, an `Enum` subclass, or an optional
    (`X | None`) wrapper around one of those.

    Raises:
        UnsupportedTypeError: If no codec is known for the type.
    """
    if isinstance(target_type, ValueCodec):
        return target_type

    if isinstance(target_type, str):
        named = TYPE_NAMES.get(target_type.strip().lower())
        if named is None:
            raise UnsupportedTypeError(f"Unknown type name '{target_type}'")
        target_type = named

    target_type = _unwrap_optional(target_type)

    codec = _CODECS.get(target_type)
    if codec is not None:
        return codec

    if isinstance(target_type, EnumMeta):
        return EnumCodec(target_type)

    name = getattr(target_type, "__name__", repr(target_type))
    raise UnsupportedTypeError(f"No codec registered for type '{name}'")
