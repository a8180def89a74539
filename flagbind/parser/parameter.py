# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Parameter` dataclass used by `ParameterRegistry` and `ParseEngine`
to represent one registered command-line option.

A `Parameter` is type-erased: the engine dispatches on it without knowing the
concrete value type. The type lives in its `ValueCodec`, and the value lives
in caller storage behind a `StorageRef`.

Key Attributes:
- `key`: Single character used as `-k`
- `name`: Long name used as `--name`
- `ref`: Borrowed reference to caller storage
- `codec`: Converts tokens to values and defaults to help text
- `default`: Optional default written to storage at registration
- `is_set`: Whether the current parse assigned a value

Used By:
- `ParameterRegistry`
- `ParseEngine`
- `HelpFormatter`
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from flagbind.logger import logger
from flagbind.parser.codecs import ValueCodec
from flagbind.parser.storage import StorageRef


class _Missing:
    """Sentinel for "no default supplied" (distinct from a default of None)."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(eq=False)
class Parameter:
    """
    Represents a registered command-line parameter.

    Attributes:
        key (str): Single-character key for the short form (`-k`).
        name (str): Long name for the long form (`--name`).
        ref (StorageRef): Where decoded values are written.
        codec (ValueCodec): Conversion between tokens and values.
        help_text (str): Free-form description shown in help output.
        default (Any): Default value, or `MISSING` when there is none.
        is_set (bool): True once the current parse assigned a value.
    """

    key: str
    name: str
    ref: StorageRef
    codec: ValueCodec
    help_text: str = ""
    default: Any = MISSING
    is_set: bool = field(default=False, init=False)

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    @property
    def is_flag(self) -> bool:
        return self.codec.is_flag

    def usage(self) -> str:
        """Return the key character used in the compact usage banner."""
        return self.key

    def default_str(self) -> str:
        """Return the rendered default value, or an empty string."""
        if not self.has_default:
            return ""
        return self.codec.render(self.default)

    def help(self) -> str:
        """Return one newline-terminated help line for this parameter."""
        key_column = f" -{self.key}"
        name_column = f"  --{self.name}"
        default_column = (
            f"[default: {self.default_str()}] " if self.has_default else ""
        )
        return f"{key_column:<5}{name_column:<14}{default_column:<24}{self.help_text}\n"

    def parse_value(self, token: str) -> None:
        """
        Decode `token` and write the result into the bound storage.

        Raises:
            ConversionError: If the codec rejects the token. Storage and
                `is_set` are left untouched in that case.
        """
        value = self.codec.decode(token)
        self.ref.set(value)
        self.is_set = True
        logger.debug("Set '--%s' to %r", self.name, value)

    def apply_default(self) -> None:
        """
        Write the default into storage, if there is one.

        A boolean flag without a default is written as False, the only value
        it can hold when the flag is absent.
        """
        if self.has_default:
            self.ref.set(self.default)
        elif self.is_flag:
            self.ref.set(False)

    def reset(self) -> None:
        """Clear `is_set` and restore the default ahead of a new parse."""
        self.is_set = False
        self.apply_default()

    def __str__(self) -> str:
        return f"Parameter(-{self.key}, --{self.name}, {self.codec!r})"
