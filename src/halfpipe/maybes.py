"""Pipeline stages for Maybe values (Some / Nothing).

Example:
    ```python
    from halfpipe import maybes, pipe

    pipe(
        maybes.from_null(user.get('email')),
        maybes.map(str.lower),
        maybes.or_some('unknown'),
    )
    ```
"""

from __future__ import annotations

import math
import operator
from collections.abc import Callable
from functools import partial
from numbers import Real
from typing import Any

import msgspec
from toolz import complement

from halfpipe.compose.invoker import create_invoker
from halfpipe.types.maybe import Maybe, Nothing, Some

__all__ = [
    'Nothing',
    'Some',
    'cata',
    'combine',
    'combine_from',
    'default_to',
    'default_with',
    'filter',
    'flat_map',
    'flat_map_from',
    'from_nan',
    'from_null',
    'from_nulls',
    'from_predicate',
    'if_present',
    'is_equal',
    'is_equal_to',
    'is_equal_to_with',
    'is_equal_with',
    'is_none',
    'is_present',
    'is_some',
    'map',
    'matches',
    'matches_with',
    'of',
    'or_else',
    'or_else_from',
    'or_else_with',
    'or_none',
    'or_some',
    'or_some_with',
    'or_throw',
    'some',
    'tap',
    'to_boolean',
    'to_either',
    'to_value',
    'unless',
]


def from_null[T](value: T | None) -> Maybe[T]:
    """Some(value), or Nothing when the value is None."""
    return Nothing if value is None else Some(value)


def combine(*maybes: Maybe[Any]) -> Maybe[tuple[Any, ...]]:
    """Combine Maybes into a Some of a tuple of their values.

    Returns Nothing as soon as one of them is Nothing.
    """
    values = []
    for maybe in maybes:
        if maybe.is_none():
            return Nothing
        values.append(maybe.some())
    return Some(tuple(values))


def combine_from(*values: Any) -> Maybe[tuple[Any, ...]]:
    """Like combine(), but from plain values where None means Nothing."""
    return combine(*(from_null(value) for value in values))


def tap[T](fn: Callable[[T], Any]) -> Callable[[Maybe[T]], Maybe[T]]:
    """Call fn with the value when present; pass the Maybe through unchanged."""

    def stage(maybe: Maybe[T]) -> Maybe[T]:
        if maybe.is_some():
            fn(maybe.some())
        return maybe

    return stage


def or_throw[T](error: BaseException | Callable[[], BaseException]) -> Callable[[Maybe[T]], T]:
    """Unwrap the value, raising the error (or the one built by a factory) on Nothing.

    Example:
        ```python
        pipe(maybes.from_null(None), maybes.or_throw(KeyError('id')))
        # raises KeyError('id')
        ```
    """
    make_error = (lambda: error) if isinstance(error, BaseException) else error

    def stage(maybe: Maybe[T]) -> T:
        if maybe.is_none():
            raise make_error()
        return maybe.some()

    return stage


def to_boolean[T](fn: Callable[[T], bool] | None = None) -> Callable[[Maybe[T]], bool]:
    """True when the Maybe is Some (and its value satisfies fn, if given)."""
    if fn is None:
        return lambda maybe: maybe.is_some()
    return lambda maybe: maybe.filter(fn).is_some()


def or_some_with[T, R](else_fn: Callable[[], R]) -> Callable[[Maybe[T]], T | R]:
    """Unwrap the value, computing a default with else_fn on Nothing."""
    return lambda maybe: else_fn() if maybe.is_none() else maybe.some()


def or_else_with[T, R](else_fn: Callable[[], Maybe[R]]) -> Callable[[Maybe[T]], Maybe[T | R]]:
    """Keep a Some, or replace Nothing with the Maybe built by else_fn."""
    return lambda maybe: else_fn() if maybe.is_none() else maybe


def or_else_from[T](else_fn: Callable[[], T | None]) -> Callable[[Maybe[T]], Maybe[T]]:
    """Keep a Some, or replace Nothing with from_null(else_fn())."""
    return or_else_with(lambda: from_null(else_fn()))


cata = create_invoker('cata')
"""cata(none_fn, some_fn) -> stage folding a Maybe into a value."""

filter = create_invoker('filter')  # noqa: A001
"""filter(predicate) -> stage keeping a Some only when the predicate holds."""

flat_map = create_invoker('flat_map')
"""flat_map(mapper) -> stage binding a Maybe-returning mapper."""

or_none = create_invoker('or_none')
"""or_none() -> stage unwrapping to the value or None."""

to_either = create_invoker('to_either')
"""to_either(left) -> stage turning Some into Right and Nothing into Left(left)."""

or_some = create_invoker('or_some')
"""or_some(default) -> stage unwrapping to the value or the default."""

or_else = create_invoker('or_else')
"""or_else(other) -> stage replacing Nothing with another Maybe."""

is_some = create_invoker('is_some')
is_none = create_invoker('is_none')
some = create_invoker('some')


def map[T, U](mapper: Callable[[T], U | None]) -> Callable[[Maybe[T]], Maybe[U]]:  # noqa: A001
    """Map the value; a mapper returning None turns the result into Nothing."""
    return flat_map(lambda value: from_null(mapper(value)))


def unless[T](predicate: Callable[[T], bool]) -> Callable[[Maybe[T]], Maybe[T]]:
    """Keep a Some only when the predicate does NOT hold."""
    return lambda maybe: maybe.filter(complement(predicate))


def _to_plain(value: Any) -> Any:
    """Normalise a value to builtin types for structural comparison."""
    return msgspec.to_builtins(value, enc_hook=_object_fields, order='deterministic')


def _object_fields(value: Any) -> Any:
    if hasattr(value, '__dict__'):
        return vars(value)
    raise NotImplementedError(f'Cannot compare objects of type {type(value).__qualname__}')


def _structurally_equal(a: Any, b: Any) -> bool:
    return _to_plain(a) == _to_plain(b)


def is_equal_with[T](comparer: Callable[[T, T], bool], a: Maybe[T], b: Maybe[T]) -> bool:
    """Compare two Maybes: both Nothing, or both Some with values equal under comparer."""
    return a is b or (a.is_none() and b.is_none()) or (a.is_some() and b.is_some() and comparer(a.some(), b.some()))


is_equal = partial(is_equal_with, operator.eq)
"""is_equal(a, b) -> whether two Maybes hold ``==`` values (or are both Nothing)."""


def _is_equal_to_using_with[T](
    comparer: Callable[[T, T], bool],
    value_fn: Callable[[], T],
) -> Callable[[Maybe[T]], bool]:
    return to_boolean(lambda value: comparer(value, value_fn()))


def _is_equal_to_using[T](comparer: Callable[[T, T], bool], value: T) -> Callable[[Maybe[T]], bool]:
    return _is_equal_to_using_with(comparer, lambda: value)


is_equal_to = partial(_is_equal_to_using, operator.eq)
"""is_equal_to(value) -> stage checking the Maybe is Some of a value ``==`` to it."""

is_equal_to_with = partial(_is_equal_to_using_with, operator.eq)
"""is_equal_to_with(value_fn) -> like is_equal_to, with a lazily computed value."""

matches = partial(_is_equal_to_using, _structurally_equal)
"""matches(value) -> stage checking the Some value is structurally equal to value.

Values are compared after msgspec normalisation, so a tuple matches an equal
list and a Struct or dataclass matches an equal dict.
"""

matches_with = partial(_is_equal_to_using_with, _structurally_equal)
"""matches_with(value_fn) -> like matches, with a lazily computed value."""


def from_predicate[T](predicate: Callable[[T], bool], value: T) -> Maybe[T]:
    """from_null(value) when the predicate holds, else Nothing."""
    return from_null(value) if predicate(value) else Nothing


def from_nan(value: Any) -> Maybe[Real]:
    """Some(value) for finite real numbers; Nothing for NaN, infinities, bools and non-numbers."""
    return from_predicate(lambda v: isinstance(v, Real) and not isinstance(v, bool) and math.isfinite(v), value)


# Aliases
from_nulls = combine_from
of = from_null
default_to = or_some
default_with = or_some_with
to_value = or_none
is_present = is_some
if_present = tap
flat_map_from = map

