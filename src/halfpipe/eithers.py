"""Pipeline stages for Either values (Left / Right)."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from halfpipe.compose.invoker import create_invoker
from halfpipe.errors import LeftValueError
from halfpipe.types.either import Either, Left, Right

__all__ = [
    'Left',
    'Right',
    'attempt',
    'bimap',
    'cata',
    'combine',
    'flat_map',
    'flat_map_both',
    'flip',
    'from_null',
    'is_left',
    'is_right',
    'left',
    'left_flat_map',
    'left_map',
    'map',
    'map_both',
    'or_throw',
    'right',
    'right_flat_map',
    'right_map',
    'safe',
    'swap',
    'to_maybe',
    'to_value',
]

P = ParamSpec('P')
T = TypeVar('T')


def attempt[T](fn: Callable[[], T]) -> Either[Exception, T]:
    """Run a thunk, returning Right(result) or Left(exception)."""
    try:
        return Right(fn())
    except Exception as e:
        return Left(e)


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Either[Exception, T]]: ...


@overload
def safe(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Either[BaseException, T]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator making a function return Right(result) or Left(exception).

    Can be used with or without arguments:
        @safe
        def parse(raw): ...

        @safe(exceptions=(ValueError,))
        def parse_int(raw): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types turned into Left. Defaults to (Exception,);
            anything else propagates.

    Example:
        ```python
        @safe
        def parse(raw: str) -> int:
            return int(raw)
        parse('12')
        # Right(value=12)
        parse('x')
        # Left(value=ValueError("invalid literal for int() with base 10: 'x'"))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Either[BaseException, T]:
        try:
            return Right(wrapped(*args, **kwargs))
        except catch as e:
            return Left(e)

    if func is not None:
        return wrapper(func)
    return wrapper


def from_null[E, T](err: E, value: T | None) -> Either[E, T]:
    """Right(value), or Left(err) when the value is None."""
    return Left(err) if value is None else Right(value)


def combine[E, T](err: E) -> Callable[[Iterable[Either[E, T]]], Either[E, list[T]]]:
    """Stage collecting Right values into a list; Left(err) if any of them is Left."""

    def stage(eithers: Iterable[Either[E, T]]) -> Either[E, list[T]]:
        values = []
        for either in eithers:
            if either.is_left():
                return Left(err)
            values.append(either.right())
        return Right(values)

    return stage


def _raise_left(value: Any) -> Any:
    if isinstance(value, BaseException):
        raise value
    raise LeftValueError(value)


def or_throw() -> Callable[[Either[Any, T]], T]:
    """Stage unwrapping a Right, raising the Left.

    A Left holding an exception is raised as-is; any other Left value is
    wrapped in LeftValueError.
    """
    return cata(_raise_left, lambda value: value)


def to_value() -> Callable[[Either[Any, Any]], Any]:
    """Stage unwrapping whichever side is present."""
    return lambda either: either.left() if either.is_left() else either.right()


cata = create_invoker('cata')
"""cata(left_fn, right_fn) -> stage folding an Either into a value."""

map = create_invoker('map')  # noqa: A001
flat_map = create_invoker('flat_map')
left_map = create_invoker('left_map')
bimap = create_invoker('bimap')
is_left = create_invoker('is_left')
left = create_invoker('left')
is_right = create_invoker('is_right')
right = create_invoker('right')
to_maybe = create_invoker('to_maybe')
swap = create_invoker('swap')


def left_flat_map[L, R, M](fn: Callable[[L], Either[M, R]]) -> Callable[[Either[L, R]], Either[M, R]]:
    """Stage binding a Left value with an Either-returning fn; Right passes through."""
    return lambda either: fn(either.left()) if either.is_left() else either


flat_map_both = cata
"""flat_map_both(left_fn, right_fn) -> stage where both functions return an Either."""

# Aliases
right_map = map
right_flat_map = flat_map
map_both = bimap
flip = swap
