# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `ParseEngine`, the token scanner behind `Args.parse()`.

The engine walks the argument vector left to right and dispatches every
token through the `ParameterRegistry`:

- `--name=value`, `--name value`, `--name` (boolean flags take no value)
- `-k=value`, `-k value`, `-k`
- `-abc`, `-abc value`, `-abc=value`: POSIX-style clusters where every key
  but the last must be a boolean flag
- `--` alone ends option parsing
- the first token of any other shape starts the remainder, which takes every
  token after it verbatim

Value association is greedy: the token following a flag that takes a value is
always its value, even if it looks like a flag. A value after `=` always wins
over lookahead; for boolean flags it is ignored.

Problems never stop the scan. They are recorded on the `ParseOutcome` and the
engine moves on to the next token, so one run reports every bad token.
Assignments that succeeded are kept even when the parse fails overall.
"""
from __future__ import annotations

from typing import Sequence

from flagbind.exceptions import ConversionError
from flagbind.logger import logger
from flagbind.parser.parameter import Parameter
from flagbind.parser.parser_types import ParseErrorKind, ParseOutcome
from flagbind.parser.registry import ParameterRegistry

END_OF_OPTIONS = "--"


class ParseEngine:
    """Scans command-line tokens into the storage of registered parameters."""

    def __init__(self, registry: ParameterRegistry) -> None:
        self.registry = registry

    def parse(self, tokens: Sequence[str]) -> ParseOutcome:
        """
        Parse `tokens` (the argument vector without the program name).

        Every parameter is reset first: `is_set` is cleared and defaults are
        written back to storage, so repeated parses are independent.

        Returns:
            ParseOutcome: Errors, remainder and the keys set by this parse.
        """
        outcome = ParseOutcome()
        for parameter in self.registry:
            parameter.reset()

        args = list(tokens)
        i = 0
        while i < len(args):
            token = args[i]
            if token == END_OF_OPTIONS:
                outcome.remainder.extend(args[i + 1 :])
                break
            elif token.startswith("--"):
                i = self._handle_long(token, args, i, outcome)
            elif token.startswith("-") and len(token) > 1:
                i = self._handle_short(token, args, i, outcome)
            else:
                outcome.remainder.extend(args[i:])
                break

        logger.debug(
            "Parsed %d token(s): %d set, %d error(s), %d remainder token(s)",
            len(args),
            len(outcome.set_keys),
            len(outcome.errors),
            len(outcome.remainder),
        )
        return outcome

    def _handle_long(
        self, token: str, args: list[str], i: int, outcome: ParseOutcome
    ) -> int:
        name, separator, value = token[2:].partition("=")
        parameter = self.registry.lookup_by_name(name)
        if parameter is None:
            suggestions = self.registry.suggest_names(name)
            details = (
                f"Did you mean one of: {', '.join(suggestions)}?"
                if suggestions
                else None
            )
            outcome.add_error(
                ParseErrorKind.UNKNOWN_NAME,
                f"Unknown option '--{name}'",
                source=token,
                details=details,
            )
            return i + 1

        if separator:
            self._assign(parameter, value, outcome)
            return i + 1
        return self._assign_with_lookahead(parameter, token, args, i, outcome)

    def _handle_short(
        self, token: str, args: list[str], i: int, outcome: ParseOutcome
    ) -> int:
        cluster, separator, value = token[1:].partition("=")
        if not cluster:
            outcome.add_error(
                ParseErrorKind.UNKNOWN_KEY,
                "Missing key before '='",
                source=token,
            )
            return i + 1

        last = len(cluster) - 1
        for position, key in enumerate(cluster):
            parameter = self.registry.lookup_by_key(key)
            if parameter is None:
                outcome.add_error(
                    ParseErrorKind.UNKNOWN_KEY,
                    f"Unknown key '-{key}'",
                    source=token,
                    details=f"in cluster '-{cluster}'" if last else None,
                )
                return i + 1

            if position < last:
                if not parameter.is_flag:
                    outcome.add_error(
                        ParseErrorKind.MISSING_VALUE,
                        f"Missing value for '--{parameter.name}'",
                        source=token,
                        details=f"'-{key}' takes a value and must be last in '-{cluster}'",
                        parameter=parameter,
                    )
                    return i + 1
                self._assign(parameter, "", outcome)
                continue

            if separator:
                self._assign(parameter, value, outcome)
                return i + 1
            return self._assign_with_lookahead(parameter, token, args, i, outcome)

        return i + 1

    def _assign_with_lookahead(
        self,
        parameter: Parameter,
        token: str,
        args: list[str],
        i: int,
        outcome: ParseOutcome,
    ) -> int:
        if parameter.is_flag:
            self._assign(parameter, "", outcome)
            return i + 1
        if i + 1 >= len(args):
            outcome.add_error(
                ParseErrorKind.MISSING_VALUE,
                f"Missing value for '--{parameter.name}'",
                source=token,
                details=f"Expected a value after '{token}'",
                parameter=parameter,
            )
            return i + 1
        self._assign(parameter, args[i + 1], outcome)
        return i + 2

    def _assign(self, parameter: Parameter, value: str, outcome: ParseOutcome) -> None:
        if parameter.is_flag and value:
            logger.debug("Ignoring value %r given to flag '--%s'", value, parameter.name)
        try:
            parameter.parse_value(value)
        except ConversionError as error:
            outcome.add_error(
                error.kind,
                f"{error.kind.description} for '--{parameter.name}'",
                source=error.source,
                details=error.details,
                parameter=parameter,
            )
            return
        outcome.mark_set(parameter.key)
