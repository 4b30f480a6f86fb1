"""Either type: Left[L] | Right[R] for computations with two outcomes."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from halfpipe.errors import IllegalStateError

if TYPE_CHECKING:
    from halfpipe.types.maybe import NothingType, Some
    from halfpipe.types.validation import Fail, Success

__all__ = ['Either', 'Left', 'Right']


class Left[L](msgspec.Struct, frozen=True, gc=False):
    """Left variant of Either, conventionally the failure side.

    Examples:
        >>> Left('boom').map(str.upper)
        Left(value='boom')
        >>> Left('boom').left_map(str.upper)
        Left(value='BOOM')
    """

    value: L

    def is_left(self) -> TypeIs[Left[L]]:
        return True

    def is_right(self) -> TypeIs[Right[Any]]:
        return False

    def left(self) -> L:
        """Return the contained Left value."""
        return self.value

    def right(self) -> NoReturn:
        """Raise since this is Left.

        Raises:
            IllegalStateError: Always.
        """
        raise IllegalStateError('Cannot call right() on a Left')

    def cata[V](self, left_fn: Callable[[L], V], _right_fn: Callable[[Any], Any]) -> V:
        """Fold the Either by applying left_fn to the Left value."""
        return left_fn(self.value)

    def map(self, _f: Callable[[Any], Any]) -> Left[L]:
        """Return self unchanged; only Right values are mapped."""
        return self

    def flat_map(self, _f: Callable[[Any], Any]) -> Left[L]:
        """Return self unchanged; only Right values are bound."""
        return self

    def left_map[M](self, f: Callable[[L], M]) -> Left[M]:
        """Transform the Left value."""
        return Left(f(self.value))

    def bimap[M](self, left_fn: Callable[[L], M], _right_fn: Callable[[Any], Any]) -> Left[M]:
        """Transform the Left value with left_fn."""
        return Left(left_fn(self.value))

    def swap(self) -> Right[L]:
        """Turn this Left into a Right holding the same value."""
        return Right(self.value)

    def to_maybe(self) -> NothingType:
        """Convert to Maybe, returning Nothing."""
        from halfpipe.types.maybe import Nothing

        return Nothing

    def to_validation(self) -> Fail[L]:
        """Convert to Validation, returning Fail(value)."""
        from halfpipe.types.validation import Fail

        return Fail(self.value)


class Right[R](msgspec.Struct, frozen=True, gc=False):
    """Right variant of Either, conventionally the success side.

    Examples:
        >>> Right(2).map(lambda x: x * 10)
        Right(value=20)
        >>> Right(2).swap()
        Left(value=2)
    """

    value: R

    def is_left(self) -> TypeIs[Left[Any]]:
        return False

    def is_right(self) -> TypeIs[Right[R]]:
        return True

    def left(self) -> NoReturn:
        """Raise since this is Right.

        Raises:
            IllegalStateError: Always.
        """
        raise IllegalStateError('Cannot call left() on a Right')

    def right(self) -> R:
        """Return the contained Right value."""
        return self.value

    def cata[V](self, _left_fn: Callable[[Any], Any], right_fn: Callable[[R], V]) -> V:
        """Fold the Either by applying right_fn to the Right value."""
        return right_fn(self.value)

    def map[U](self, f: Callable[[R], U]) -> Right[U]:
        """Transform the Right value."""
        return Right(f(self.value))

    def flat_map[L, U](self, f: Callable[[R], Left[L] | Right[U]]) -> Left[L] | Right[U]:
        """Apply a function that returns an Either to the Right value."""
        return f(self.value)

    def left_map(self, _f: Callable[[Any], Any]) -> Right[R]:
        """Return self unchanged; only Left values are mapped."""
        return self

    def bimap[U](self, _left_fn: Callable[[Any], Any], right_fn: Callable[[R], U]) -> Right[U]:
        """Transform the Right value with right_fn."""
        return Right(right_fn(self.value))

    def swap(self) -> Left[R]:
        """Turn this Right into a Left holding the same value."""
        return Left(self.value)

    def to_maybe(self) -> Some[R]:
        """Convert to Maybe, returning Some(value)."""
        from halfpipe.types.maybe import Some

        return Some(self.value)

    def to_validation(self) -> Success[R]:
        """Convert to Validation, returning Success(value)."""
        from halfpipe.types.validation import Success

        return Success(self.value)


type Either[L, R] = Left[L] | Right[R]
