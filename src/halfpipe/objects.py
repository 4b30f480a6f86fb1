"""Pipeline stages for the fields of plain objects.

Works on instances with a ``__dict__``, dataclasses, msgspec Structs and
mappings (whose keys are treated as field names).
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from typing import Any

from msgspec import Struct, structs

from halfpipe.maybes import from_null
from halfpipe.types.maybe import Maybe

__all__ = ['entries', 'get', 'has', 'keys', 'values']


def _fields(obj: Any) -> dict[str, Any]:
    """Shallow field-name to value view of an object."""
    if isinstance(obj, Mapping):
        return dict(obj)
    if isinstance(obj, Struct):
        return structs.asdict(obj)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {field.name: getattr(obj, field.name) for field in dataclasses.fields(obj)}
    return dict(vars(obj))


def get(name: str) -> Callable[[Any], Maybe[Any]]:
    """Field value, or Nothing when the field is missing or None."""

    def stage(obj: Any) -> Maybe[Any]:
        if isinstance(obj, Mapping):
            return from_null(obj.get(name))
        return from_null(getattr(obj, name, None))

    return stage


def keys() -> Callable[[Any], list[str]]:
    return lambda obj: list(_fields(obj))


def values() -> Callable[[Any], list[Any]]:
    return lambda obj: list(_fields(obj).values())


def entries() -> Callable[[Any], list[tuple[str, Any]]]:
    return lambda obj: list(_fields(obj).items())


def has(name: str) -> Callable[[Any], bool]:
    """Whether the object has the field (or the mapping has the key)."""
    return lambda obj: name in obj if isinstance(obj, Mapping) else hasattr(obj, name)
