# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Borrowed references to caller-owned storage.

A parameter never owns the value it writes. It holds a `StorageRef` that
points at an attribute of a caller object or an item of a caller mapping,
and writes through it during registration (defaults) and parsing. The caller
keeps the referenced object alive.

Classes:
- StorageRef: Abstract read/write handle.
- AttributeRef: Handle on `obj.attr`.
- ItemRef: Handle on `mapping[key]`.

Functions:
- make_ref: Build the appropriate handle for a target and field.
"""
from __future__ import annotations

import typing
from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from typing import Any


class StorageRef(ABC):
    """Non-owning read/write handle on caller storage."""

    @abstractmethod
    def get(self, default: Any = None) -> Any:
        """Return the stored value, or `default` if nothing is stored yet."""

    @abstractmethod
    def set(self, value: Any) -> None:
        """Write `value` into the referenced storage."""

    def annotation(self) -> Any:
        """Return the declared type of the referenced slot, if one is known."""
        return None


class AttributeRef(StorageRef):
    """Reference to an attribute of a caller object (dataclass, namespace, ...)."""

    def __init__(self, obj: Any, attr: str) -> None:
        if not isinstance(attr, str) or not attr:
            raise TypeError("attr must be a non-empty string")
        self.obj = obj
        self.attr = attr

    def get(self, default: Any = None) -> Any:
        return getattr(self.obj, self.attr, default)

    def set(self, value: Any) -> None:
        setattr(self.obj, self.attr, value)

    def annotation(self) -> Any:
        owner = self.obj if isinstance(self.obj, type) else type(self.obj)
        try:
            return typing.get_type_hints(owner).get(self.attr)
        except (NameError, TypeError):
            annotation = getattr(owner, "__annotations__", {}).get(self.attr)
        # unresolved forward references carry no usable type
        if isinstance(annotation, str):
            return None
        return annotation

    def __repr__(self) -> str:
        return f"AttributeRef({type(self.obj).__name__}.{self.attr})"


class ItemRef(StorageRef):
    """Reference to an item of a caller mapping."""

    def __init__(self, mapping: MutableMapping, key: Any) -> None:
        if not isinstance(mapping, MutableMapping):
            raise TypeError(f"mapping must be a MutableMapping, got {type(mapping)}")
        self.mapping = mapping
        self.key = key

    def get(self, default: Any = None) -> Any:
        return self.mapping.get(self.key, default)

    def set(self, value: Any) -> None:
        self.mapping[self.key] = value

    def __repr__(self) -> str:
        return f"ItemRef[{self.key!r}]"


def make_ref(target: Any, field: Any = None) -> StorageRef:
    """
    Build a `StorageRef` for `target` and `field`.

    - A `StorageRef` passed as `target` (with no field) is returned unchanged.
    - A mutable mapping yields an `ItemRef` on `target[field]`.
    - Anything else yields an `AttributeRef` on `target.field`.
    """
    if isinstance(target, StorageRef):
        if field is not None:
            raise TypeError("field must be omitted when target is a StorageRef")
        return target
    if field is None:
        raise TypeError("field is required unless target is a StorageRef")
    if isinstance(target, MutableMapping):
        return ItemRef(target, field)
    return AttributeRef(target, field)
