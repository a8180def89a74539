# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result models produced by the Flagbind parse engine.

Contents:
- `ParseErrorKind`: Enum of every problem the engine can record while scanning.
- `ParseError`: One recorded problem, with the offending token and the
  underlying conversion diagnostic when there is one.
- `ParseOutcome`: The aggregate result of a single `parse()` call.

A `ParseOutcome` is created fresh for every parse. Errors accumulate rather
than stopping the scan, so a user sees every malformed token in one run.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from flagbind.exceptions import ParseFailedError

if TYPE_CHECKING:
    from flagbind.parser.parameter import Parameter


class ParseErrorKind(Enum):
    """
    Kinds of problems recorded during a parse.

    Members:
        UNKNOWN_KEY: A short-form character does not match any registered key.
        UNKNOWN_NAME: A long-form name does not match any registered name.
        MISSING_VALUE: A parameter that takes a value got none.
        INVALID_ARGUMENT: A value is not a valid literal of the parameter's type.
        OUT_OF_RANGE: A value does not fit the parameter's type.
    """

    UNKNOWN_KEY = "unknown_key"
    UNKNOWN_NAME = "unknown_name"
    MISSING_VALUE = "missing_value"
    INVALID_ARGUMENT = "invalid_argument"
    OUT_OF_RANGE = "out_of_range"

    @property
    def description(self) -> str:
        return {
            ParseErrorKind.UNKNOWN_KEY: "Unknown key",
            ParseErrorKind.UNKNOWN_NAME: "Unknown option",
            ParseErrorKind.MISSING_VALUE: "Missing value",
            ParseErrorKind.INVALID_ARGUMENT: "Invalid argument",
            ParseErrorKind.OUT_OF_RANGE: "Value out of range",
        }[self]

    def __str__(self) -> str:
        return self.value


@dataclass
class ParseError:
    """
    A single problem found while scanning the command line.

    Attributes:
        kind (ParseErrorKind): What went wrong.
        description (str): Human readable summary.
        source (str | None): The offending token, if there is one.
        details (str | None): Underlying diagnostic (e.g. the conversion message).
        parameter (Parameter | None): The parameter involved, for lookup only.
    """

    kind: ParseErrorKind
    description: str
    source: str | None = None
    details: str | None = None
    parameter: Parameter | None = field(default=None, repr=False, compare=False)

    def __str__(self) -> str:
        text = self.description
        if self.source is not None:
            text += f" @ [{self.source}]"
        if self.details:
            text += f": {self.details}"
        return text


@dataclass
class ParseOutcome:
    """Aggregate result of one `parse()` call."""

    errors: list[ParseError] = field(default_factory=list)
    remainder: list[str] = field(default_factory=list)
    set_keys: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(
        self,
        kind: ParseErrorKind,
        description: str,
        source: str | None = None,
        details: str | None = None,
        parameter: Parameter | None = None,
    ) -> ParseError:
        error = ParseError(kind, description, source, details, parameter)
        self.errors.append(error)
        return error

    def mark_set(self, key: str) -> None:
        if key not in self.set_keys:
            self.set_keys.append(key)

    def raise_for_errors(self) -> None:
        """Raise `ParseFailedError` if any error was recorded."""
        if self.errors:
            raise ParseFailedError(self.errors)
