"""
Flagbind Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .args import Args
from .codecs import (
    BoolCodec,
    DateTimeCodec,
    EnumCodec,
    FloatCodec,
    IntCodec,
    PathCodec,
    StrCodec,
    ValueCodec,
    codec_for,
    register_codec,
)
from .engine import ParseEngine
from .help_formatter import HelpFormatter
from .parameter import MISSING, Parameter
from .parser_types import ParseError, ParseErrorKind, ParseOutcome
from .registry import ParameterRegistry
from .storage import AttributeRef, ItemRef, StorageRef, make_ref

__all__ = [
    "Args",
    "AttributeRef",
    "BoolCodec",
    "DateTimeCodec",
    "EnumCodec",
    "FloatCodec",
    "HelpFormatter",
    "IntCodec",
    "ItemRef",
    "MISSING",
    "Parameter",
    "ParameterRegistry",
    "ParseEngine",
    "ParseError",
    "ParseErrorKind",
    "ParseOutcome",
    "PathCodec",
    "StorageRef",
    "StrCodec",
    "ValueCodec",
    "codec_for",
    "make_ref",
    "register_codec",
]
