"""Pipeline stages for sets and frozensets."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from halfpipe.compose.invoker import create_invoker

__all__ = [
    'difference',
    'for_each',
    'has',
    'intersection',
    'is_subset',
    'is_superset',
    'size',
    'union',
]


def size() -> Callable[[Iterable[Any]], int]:
    return len


has = create_invoker('__contains__')
"""has(value) -> stage checking membership."""


def for_each[T](fn: Callable[[T], Any]) -> Callable[[Iterable[T]], None]:
    """Call fn with every member, for side effects."""

    def stage(members: Iterable[T]) -> None:
        for member in members:
            fn(member)

    return stage


union = create_invoker('union')
intersection = create_invoker('intersection')
difference = create_invoker('difference')
is_subset = create_invoker('issubset')
is_superset = create_invoker('issuperset')
