# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Args`, the object callers interact with to declare
command-line parameters and parse a process argument vector into their own
storage.

Parameters are bound to caller-owned storage (an attribute of an object or an
item of a mapping). Defaults are written to that storage as soon as a
parameter is registered, and `parse()` only overwrites a value when a token
decodes successfully.

Public Interface:
- `arg(...)`: Register a typed parameter bound to caller storage.
- `remainder(...)`: Name (and optionally bind) the trailing unparsed tokens.
- `parse(...)`: Scan the argument vector; returns True when no errors occurred.
- `errors()`: All parse errors as text.
- `usage()` / `help()`: Usage banner and full help text.
- `print_help()` / `print_errors()`: Rich console output of the above.

Example Usage:
    @dataclass
    class Options:
        infile: str = ""
        rate: float = 0.0
        debug: bool = False
        outfile: list[str] = field(default_factory=list)

    options = Options()
    args = Args(["foo", "-di", "in.txt", "--rate=0.9", "out.txt"])
    args.arg(options, "infile", "i", "input", "Specify the input file", "./in.foo")
    args.arg(options, "rate", "r", "rate", "Rate of entropy", 0.75)
    args.arg(options, "debug", "d", "debug", "Start in daemon mode")
    args.remainder("output path", options, "outfile")
    if not args.parse():
        print(args.errors())
        print(args.help())
"""
from __future__ import annotations

import os
import sys
from typing import Any, Sequence

from rich.console import Console

from flagbind.console import console as default_console
from flagbind.exceptions import ConversionError, RegistrationError
from flagbind.logger import logger
from flagbind.parser.codecs import StrCodec, codec_for
from flagbind.parser.engine import ParseEngine
from flagbind.parser.help_formatter import HelpFormatter
from flagbind.parser.parameter import MISSING, Parameter
from flagbind.parser.parser_types import ParseOutcome
from flagbind.parser.registry import ParameterRegistry
from flagbind.parser.storage import StorageRef, make_ref
from flagbind.utils import get_program_invocation


def _resolve_type(ref: StorageRef, default: Any, expected_type: Any) -> Any:
    """Pick the parameter type: explicit, annotated, default's, stored value's, str."""
    if expected_type is not None:
        return expected_type
    annotation = ref.annotation()
    if annotation is not None:
        return annotation
    if default is not MISSING and default is not None:
        return type(default)
    current = ref.get()
    if current is not None:
        return type(current)
    return str


class Args:
    """
    Declarative command-line parser bound to caller storage.

    Args:
        argv (Sequence[str] | None): Full process argument vector; `argv[0]`
            is the program name. Defaults to `sys.argv`.
        program (str | None): Program name shown in usage. Defaults to the
            basename of `argv[0]`.
    """

    def __init__(
        self,
        argv: Sequence[str] | None = None,
        program: str | None = None,
    ) -> None:
        self.argv: list[str] = list(sys.argv if argv is None else argv)
        if program is None:
            if self.argv and self.argv[0]:
                program = os.path.basename(self.argv[0])
            else:
                program = get_program_invocation()
        self.program: str = program
        self.registry: ParameterRegistry = ParameterRegistry()
        self.engine: ParseEngine = ParseEngine(self.registry)
        self.formatter: HelpFormatter = HelpFormatter(self.registry, program)
        self.outcome: ParseOutcome = ParseOutcome()
        self._remainder_ref: StorageRef | None = None

    def arg(
        self,
        target: Any,
        field: Any,
        key: str,
        name: str,
        help: str = "",
        default: Any = MISSING,
        *,
        type: Any = None,
    ) -> Parameter:
        """
        Register a parameter bound to `target.field` (or `target[field]`).

        Args:
            target (Any): Object or mutable mapping that owns the storage, or a
                `StorageRef` (with `field=None`).
            field (Any): Attribute name or mapping key.
            key (str): Single-character key (`-k`).
            name (str): Long name (`--name`).
            help (str): Help text.
            default (Any): Optional default, written to storage immediately.
            type (Any): Value type or `ValueCodec`. Inferred from the target's
                annotation, the default, or the current stored value when omitted.

        Returns:
            Parameter: The registered parameter.

        Raises:
            RegistrationError: On duplicate or malformed keys/names, unsupported
                types, or a default that cannot be decoded.
        """
        ref = make_ref(target, field)
        codec = codec_for(_resolve_type(ref, default, type))
        if (
            isinstance(default, str)
            and not isinstance(codec, StrCodec)
            and not codec.is_flag
        ):
            try:
                default = codec.decode(default)
            except ConversionError as error:
                raise RegistrationError(
                    f"Default value {default!r} for '--{name}' is invalid: {error.details}"
                ) from error

        parameter = Parameter(
            key=key,
            name=name,
            ref=ref,
            codec=codec,
            help_text=help,
            default=default,
        )
        self.registry.register(parameter)
        parameter.apply_default()
        return parameter

    def remainder(self, name: str, target: Any = None, field: Any = None) -> None:
        """
        Name the trailing tokens for usage text and optionally bind them.

        When `target` is given, the remainder tokens are written there as a
        `list[str]` (empty until a parse captures some).
        """
        self.formatter.remainder_name = name
        if target is not None:
            self._remainder_ref = make_ref(target, field)
            self._remainder_ref.set([])

    @property
    def remainder_name(self) -> str | None:
        return self.formatter.remainder_name

    @property
    def remainder_values(self) -> list[str]:
        return list(self.outcome.remainder)

    @property
    def parameters(self) -> list[Parameter]:
        return self.registry.all_parameters()

    def get_parameter(self, key_or_name: str) -> Parameter | None:
        """Return the parameter registered under a key or long name."""
        if len(key_or_name) == 1:
            parameter = self.registry.lookup_by_key(key_or_name)
            if parameter is not None:
                return parameter
        return self.registry.lookup_by_name(key_or_name)

    def parse(self, argv: Sequence[str] | None = None) -> bool:
        """
        Parse the argument vector into bound storage.

        Args:
            argv (Sequence[str] | None): Full argument vector including the
                program name. Defaults to the vector given at construction.

        Returns:
            bool: True if no parse errors were recorded.
        """
        if argv is not None:
            self.argv = list(argv)
        self.outcome = self.engine.parse(self.argv[1:])
        if self._remainder_ref is not None:
            self._remainder_ref.set(list(self.outcome.remainder))
        if not self.outcome.ok:
            logger.debug(
                "Parse of %s failed with %d error(s)",
                self.program,
                len(self.outcome.errors),
            )
        return self.outcome.ok

    def errors(self) -> str:
        """Return every error of the last parse, one `Error: ...` line each."""
        return "\n".join(f"Error: {error}" for error in self.outcome.errors)

    def usage(self) -> str:
        return self.formatter.usage()

    def help(self) -> str:
        return self.formatter.help()

    def print_help(self, console: Console | None = None) -> None:
        self.formatter.render(console or default_console)

    def print_errors(self, console: Console | None = None) -> None:
        console = console or default_console
        for error in self.outcome.errors:
            console.print(
                f"Error: {error}", style="bold red", markup=False, highlight=False
            )

    def __str__(self) -> str:
        set_count = sum(parameter.is_set for parameter in self.registry)
        return (
            f"Args(program={self.program!r}, parameters={len(self.registry)}, "
            f"set={set_count}, errors={len(self.outcome.errors)})"
        )

    def __repr__(self) -> str:
        return str(self)
