"""
Flagbind Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Demo entry point:

    python -m flagbind -dvi /input/file -t=/tmp/path/ --rate 0.9 /output/file
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field, fields
from typing import Sequence

from rich.table import Table

from flagbind.console import console
from flagbind.logger import logger
from flagbind.parser import Args
from flagbind.utils import set_console_log_level, setup_logging


@dataclass
class Options:
    infile: str = ""
    tmppath: str = ""
    rate: float = 0.0
    debug: bool = False
    verbose: bool = False
    outfile: list[str] = field(default_factory=list)


def build_args(options: Options, argv: Sequence[str] | None = None) -> Args:
    args = Args(argv, program="flagbind")
    args.arg(options, "infile", "i", "input", "Specify the input file", "./in.foo")
    args.arg(options, "tmppath", "t", "temp", "Path for temporary files", "/tmp/")
    args.arg(options, "rate", "r", "rate", "Rate of entropy", 0.75)
    args.arg(options, "debug", "d", "debug", "Start in daemon mode")
    args.arg(options, "verbose", "v", "verbose", "Level of verbosity")
    args.remainder("output path", options, "outfile")
    return args


def render_options(options: Options, args: Args) -> Table:
    table = Table(title="Options", show_header=True, header_style="bold")
    table.add_column("Field")
    table.add_column("Value")
    table.add_column("Set", justify="center")
    for option in fields(options):
        parameter = next(
            (p for p in args.parameters if getattr(p.ref, "attr", None) == option.name),
            None,
        )
        is_set = "✔" if parameter is not None and parameter.is_set else ""
        table.add_row(option.name, repr(getattr(options, option.name)), is_set)
    return table


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging()
    options = Options()
    args = build_args(options, argv)
    if not args.parse():
        args.print_errors()
        args.print_help()
        return 1
    if options.verbose:
        set_console_log_level(logging.INFO)
    logger.info("Parsed %d option(s) for %s", len(args.outcome.set_keys), args.program)
    console.print(render_options(options, args))
    return 0


if __name__ == "__main__":
    sys.exit(main())
