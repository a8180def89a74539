# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParameterRegistry`, the key/name dispatch table for Flagbind.

The registry keeps two maps that point at the same `Parameter` objects: one
keyed by the single-character key and one keyed by the long name. Collisions
on either map are rejected at registration, before anything is stored, so
a rejected parameter is never dispatchable and the first registration keeps
its slot.
"""
from __future__ import annotations

from typing import Iterator

from flagbind.exceptions import (
    DuplicateKeyError,
    DuplicateNameError,
    InvalidKeyError,
    InvalidNameError,
)
from flagbind.logger import logger
from flagbind.parser.parameter import Parameter

RESERVED_KEYS = frozenset("-=")


def validate_key(key: str) -> None:
    """Check that `key` is one printable, non-space character other than `-`/`=`."""
    if not isinstance(key, str) or len(key) != 1:
        raise InvalidKeyError(f"Key {key!r} must be a single character")
    if not key.isprintable() or key.isspace():
        raise InvalidKeyError(f"Key {key!r} must be a printable, non-space character")
    if key in RESERVED_KEYS:
        raise InvalidKeyError(f"Key {key!r} is reserved by the command-line syntax")


def validate_name(name: str) -> None:
    """Check that `name` can be written as `--name` and split on `=`."""
    if not isinstance(name, str) or not name:
        raise InvalidNameError("Name must be a non-empty string")
    if name.startswith("-"):
        raise InvalidNameError(f"Name '{name}' must not start with '-'")
    if "=" in name:
        raise InvalidNameError(f"Name '{name}' must not contain '='")
    if any(char.isspace() for char in name) or not name.isprintable():
        raise InvalidNameError(f"Name '{name}' must not contain whitespace")


class ParameterRegistry:
    """Owns registered parameters and indexes them by key and by name."""

    def __init__(self) -> None:
        self._parameters: list[Parameter] = []
        self._by_key: dict[str, Parameter] = {}
        self._by_name: dict[str, Parameter] = {}

    def register(self, parameter: Parameter) -> Parameter:
        """
        Add `parameter` to the registry.

        Raises:
            InvalidKeyError: If the key is malformed.
            InvalidNameError: If the name is malformed.
            DuplicateKeyError: If the key is already registered.
            DuplicateNameError: If the name is already registered.
        """
        validate_key(parameter.key)
        validate_name(parameter.name)
        if parameter.key in self._by_key:
            existing = self._by_key[parameter.key]
            raise DuplicateKeyError(
                f"Key '-{parameter.key}' is already used by '--{existing.name}'"
            )
        if parameter.name in self._by_name:
            existing = self._by_name[parameter.name]
            raise DuplicateNameError(
                f"Name '--{parameter.name}' is already used by '-{existing.key}'"
            )

        self._by_key[parameter.key] = parameter
        self._by_name[parameter.name] = parameter
        self._parameters.append(parameter)
        logger.debug("Registered %s", parameter)
        return parameter

    def lookup_by_key(self, key: str) -> Parameter | None:
        return self._by_key.get(key)

    def lookup_by_name(self, name: str) -> Parameter | None:
        return self._by_name.get(name)

    def all_parameters(self) -> list[Parameter]:
        """Return parameters in registration order."""
        return list(self._parameters)

    def suggest_names(self, prefix: str) -> list[str]:
        """Return `--name` spellings of registered names starting with `prefix`."""
        if not prefix:
            return []
        return [
            f"--{parameter.name}"
            for parameter in self._parameters
            if parameter.name.startswith(prefix)
        ]

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def __contains__(self, item: object) -> bool:
        return item in self._by_key or item in self._by_name

    def __str__(self) -> str:
        return f"ParameterRegistry(parameters={len(self._parameters)})"

    def __repr__(self) -> str:
        return str(self)
