# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders usage and help text from a `ParameterRegistry`.

`usage()` and `help()` are pure functions of the registry and return plain
strings. `render()` prints the same text through a Rich console for callers
that want styled output.
"""
from __future__ import annotations

from rich.console import Console

from flagbind.parser.registry import ParameterRegistry


class HelpFormatter:
    """Builds the one-line usage banner and the full help listing."""

    def __init__(
        self,
        registry: ParameterRegistry,
        program: str = "",
        remainder_name: str | None = None,
    ) -> None:
        self.registry = registry
        self.program = program
        self.remainder_name = remainder_name

    def usage(self) -> str:
        """
        Return the compact usage banner.

        Example:
            Usage: foo -itrdv <output path>
        """
        text = f"Usage: {self.program}"
        keys = "".join(parameter.usage() for parameter in self.registry)
        if keys:
            text += f" -{keys}"
        if self.remainder_name:
            text += f" <{self.remainder_name}>"
        return text

    def help(self) -> str:
        """Return the usage banner, one line per parameter, and a blank line."""
        lines = [self.usage(), "\n"]
        lines.extend(parameter.help() for parameter in self.registry)
        lines.append("\n")
        return "".join(lines)

    def render(self, console: Console) -> None:
        """Print the help text with the usage banner in bold."""
        console.print(self.usage(), style="bold", markup=False, highlight=False)
        for parameter in self.registry:
            console.print(parameter.help(), end="", markup=False, highlight=False)
        console.print()
