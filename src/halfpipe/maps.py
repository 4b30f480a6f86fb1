"""Pipeline stages for dicts and other mappings."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from halfpipe.compose.invoker import create_invoker
from halfpipe.maybes import from_null
from halfpipe.types.maybe import Maybe

__all__ = [
    'entries',
    'for_each',
    'get',
    'has',
    'keys',
    'size',
    'values',
]


def get[K, V](key: K) -> Callable[[Mapping[K, V]], Maybe[V]]:
    """Value under the key, or Nothing when missing or None."""
    return lambda mapping: from_null(mapping.get(key))


def size() -> Callable[[Mapping[Any, Any]], int]:
    return len


def keys[K]() -> Callable[[Mapping[K, Any]], list[K]]:
    return lambda mapping: list(mapping.keys())


def values[V]() -> Callable[[Mapping[Any, V]], list[V]]:
    return lambda mapping: list(mapping.values())


def entries[K, V]() -> Callable[[Mapping[K, V]], list[tuple[K, V]]]:
    """Key/value pairs as a list of tuples."""
    return lambda mapping: list(mapping.items())


has = create_invoker('__contains__')
"""has(key) -> stage checking the mapping contains the key."""


def for_each[K, V](fn: Callable[[V, K], Any]) -> Callable[[Mapping[K, V]], None]:
    """Call fn(value, key) for every entry, for side effects."""

    def stage(mapping: Mapping[K, V]) -> None:
        for key, value in mapping.items():
            fn(value, key)

    return stage
