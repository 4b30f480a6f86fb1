"""Pipeline stages for lists.

Every stage leaves its input untouched and returns a new list (or a value).

Example:
    ```python
    from halfpipe import arrays, pipe

    pipe(
        ['ab', 'cd'],
        arrays.flat_map(list),       # ['a', 'b', 'c', 'd']
        arrays.map(str.upper),       # ['A', 'B', 'C', 'D']
        arrays.join('-'),            # 'A-B-C-D'
    )
    ```
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from toolz import concat as _concat
from toolz import first, last, mapcat

from halfpipe.compose.invoker import create_invoker
from halfpipe.maybes import from_null
from halfpipe.types.maybe import Maybe, Nothing

__all__ = [
    'concat',
    'count',
    'every',
    'filter',
    'find',
    'flat',
    'flat_map',
    'flatten',
    'for_each',
    'from_',
    'get',
    'get_first',
    'get_last',
    'index_of',
    'is_array',
    'join',
    'map',
    'of',
    'reduce',
    'reduce_right',
    'reverse',
    'size',
    'some',
    'sort',
]


def flat_map[T, R](fn: Callable[[T], Iterable[R]]) -> Callable[[Sequence[T]], list[R]]:
    """Map each element to an iterable and flatten the results one level.

    ```python
    pipe(['ab', 'cd'], arrays.flat_map(list))  # ['a', 'b', 'c', 'd']
    ```
    """
    return lambda array: list(mapcat(fn, array))


def _flatten(items: Iterable[Any], depth: int) -> list[Any]:
    if depth < 1:
        return list(items)
    return _flatten(
        _concat(item if isinstance(item, list | tuple) else (item,) for item in items),
        depth - 1,
    )


def flat(depth: int = 1) -> Callable[[Sequence[Any]], list[Any]]:
    """Flatten nested lists and tuples up to ``depth`` levels (default 1).

    ```python
    pipe([[1, 2], [3, [4]]], arrays.flat())  # [1, 2, 3, [4]]
    pipe([[1, 2], [3, [4]]], arrays.flat(2))  # [1, 2, 3, 4]
    ```
    """
    return lambda array: _flatten(array, depth)


def reduce[T, A](
    fn: Callable[[A, T], A],
    initial_value_factory: Callable[[], A] | None = None,
) -> Callable[[Sequence[T]], A]:
    """Fold the list from the left.

    Starts from the first element, or from ``initial_value_factory()`` when
    given. Reducing an empty list without a factory raises TypeError.
    """
    if initial_value_factory is None:
        return lambda array: functools.reduce(fn, array)
    return lambda array: functools.reduce(fn, array, initial_value_factory())


def reduce_right[T, A](
    fn: Callable[[A, T], A],
    initial_value_factory: Callable[[], A] | None = None,
) -> Callable[[Sequence[T]], A]:
    """Fold the list from the right; same contract as reduce()."""
    if initial_value_factory is None:
        return lambda array: functools.reduce(fn, reversed(array))
    return lambda array: functools.reduce(fn, reversed(array), initial_value_factory())


def get[T](index: int | Callable[[Sequence[T]], int]) -> Callable[[Sequence[T]], Maybe[T]]:
    """Element at an index (negative counts from the end), or Nothing when out of range.

    ``index`` may also be a function of the list returning the index.
    """

    def stage(array: Sequence[T]) -> Maybe[T]:
        idx = index if isinstance(index, int) else index(array)
        if -len(array) <= idx < len(array):
            return from_null(array[idx])
        return Nothing

    return stage


def get_first[T]() -> Callable[[Sequence[T]], Maybe[T]]:
    """First element, or Nothing for an empty list."""
    return lambda array: from_null(first(array)) if array else Nothing


def get_last[T]() -> Callable[[Sequence[T]], Maybe[T]]:
    """Last element, or Nothing for an empty list."""
    return lambda array: from_null(last(array)) if array else Nothing


def size() -> Callable[[Sequence[Any]], int]:
    return len


def find[T](predicate: Callable[[T], bool]) -> Callable[[Sequence[T]], Maybe[T]]:
    """First element matching the predicate, or Nothing."""
    return lambda array: from_null(next((item for item in array if predicate(item)), None))


def index_of[T](value: T) -> Callable[[Sequence[T]], Maybe[int]]:
    """Index of the first element equal to value, or Nothing."""
    return lambda array: from_null(next((i for i, item in enumerate(array) if item == value), None))


def reverse[T]() -> Callable[[Sequence[T]], list[T]]:
    return lambda array: list(reversed(array))


def sort[T](key: Callable[[T], Any] | None = None, *, reverse: bool = False) -> Callable[[Iterable[T]], list[T]]:
    """Sorted copy of the list, optionally by key and/or descending."""
    return lambda array: sorted(array, key=key, reverse=reverse)


def map[T, R](fn: Callable[[T], R]) -> Callable[[Iterable[T]], list[R]]:  # noqa: A001
    return lambda array: [fn(item) for item in array]


def filter[T](predicate: Callable[[T], bool]) -> Callable[[Iterable[T]], list[T]]:  # noqa: A001
    return lambda array: [item for item in array if predicate(item)]


def some[T](predicate: Callable[[T], bool]) -> Callable[[Iterable[T]], bool]:
    """Whether any element matches the predicate."""
    return lambda array: any(predicate(item) for item in array)


def every[T](predicate: Callable[[T], bool]) -> Callable[[Iterable[T]], bool]:
    """Whether all elements match the predicate (True for an empty list)."""
    return lambda array: all(predicate(item) for item in array)


def for_each[T](fn: Callable[[T], Any]) -> Callable[[Iterable[T]], None]:
    """Call fn with every element, for side effects."""

    def stage(array: Iterable[T]) -> None:
        for item in array:
            fn(item)

    return stage


def concat[T](*arrays: Iterable[T]) -> Callable[[Iterable[T]], list[T]]:
    """Append the given lists after the piped one."""
    return lambda array: list(_concat([array, *arrays]))


def join(separator: str = ',') -> Callable[[Iterable[Any]], str]:
    """Join the elements as strings; None elements become empty strings."""
    return lambda array: separator.join('' if item is None else str(item) for item in array)


def is_array() -> Callable[[Any], bool]:
    return lambda value: isinstance(value, list)


count = create_invoker('count')
"""count(value) -> stage counting the elements equal to value (``list.count``)."""

from_ = list
"""Build a list from any iterable."""


def of[T](*items: T) -> list[T]:
    """Build a list from the arguments."""
    return list(items)


flatten = flat
