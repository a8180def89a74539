# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Flagbind.

Registration problems (duplicate keys or names, malformed keys, unsupported
types) are raised immediately to the caller of `Args.arg()`. Problems found
while scanning the command line are never raised by `parse()`; they are
collected as `ParseError` records instead. `ParseFailedError` exists for
callers who prefer to turn a failed outcome into an exception.

Exception Hierarchy:
- FlagbindError
    ├── RegistrationError
    │     ├── DuplicateKeyError
    │     ├── DuplicateNameError
    │     ├── InvalidKeyError
    │     ├── InvalidNameError
    │     └── UnsupportedTypeError
    ├── ConversionError
    ├── ParseFailedError
    └── ConfigError
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from flagbind.parser.parser_types import ParseError, ParseErrorKind


class FlagbindError(Exception):
    """Base exception for Flagbind."""


class RegistrationError(FlagbindError):
    """Exception raised when a parameter cannot be registered."""


class DuplicateKeyError(RegistrationError):
    """Exception raised when a key is already used by another parameter."""


class DuplicateNameError(RegistrationError):
    """Exception raised when a long name is already used by another parameter."""


class InvalidKeyError(RegistrationError):
    """Exception raised when a key is not a single printable character."""


class InvalidNameError(RegistrationError):
    """Exception raised when a long name is empty or malformed."""


class UnsupportedTypeError(RegistrationError):
    """Exception raised when no codec is known for a parameter type."""


class ConversionError(FlagbindError):
    """
    Exception raised when a token cannot be decoded into a typed value.

    Attributes:
        kind (ParseErrorKind): INVALID_ARGUMENT or OUT_OF_RANGE.
        source (str): The text that failed to decode.
        details (str): Diagnostic text from the underlying conversion.
    """

    def __init__(self, kind: ParseErrorKind, source: str, details: str) -> None:
        super().__init__(f"{kind.description} '{source}': {details}")
        self.kind = kind
        self.source = source
        self.details = details


class ParseFailedError(FlagbindError):
    """Exception raised by `ParseOutcome.raise_for_errors()`."""

    def __init__(self, errors: Sequence[ParseError]) -> None:
        lines = "\n".join(str(error) for error in errors)
        plural = "s" if len(errors) != 1 else ""
        super().__init__(f"{len(errors)} parse error{plural}:\n{lines}")
        self.errors = list(errors)


class ConfigError(FlagbindError):
    """Exception raised when a parameter schema file cannot be loaded."""
