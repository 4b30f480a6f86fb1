"""Maybe type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from halfpipe.errors import IllegalStateError

if TYPE_CHECKING:
    from halfpipe.types.either import Left, Right
    from halfpipe.types.validation import Fail, Success

__all__ = ['Maybe', 'Nothing', 'NothingType', 'Some']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Maybe containing a value of type T.

    Some(None) is a legal value and is not Nothing; use
    ``halfpipe.maybes.from_null`` to turn None into Nothing.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(42).cata(lambda: 0, lambda x: x + 1)
        43
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def some(self) -> T:
        """Return the contained value."""
        return self.value

    def or_some(self, _default: Any) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def or_else(self, _other: Some[Any] | NothingType) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def or_none(self) -> T:
        """Return the contained value."""
        return self.value

    def cata[R](self, _none_fn: Callable[[], Any], some_fn: Callable[[T], R]) -> R:
        """Fold the Maybe by applying some_fn to the contained value."""
        return some_fn(self.value)

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def flat_map[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns a Maybe to the contained value.

        Args:
            f: Function that takes T and returns Maybe[U].

        Returns:
            The Maybe returned by f.
        """
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds for the value, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def to_either(self, _left: Any) -> Right[T]:
        """Convert to Either, returning Right(value)."""
        from halfpipe.types.either import Right

        return Right(self.value)

    def to_validation(self, _fail: Any) -> Success[T]:
        """Convert to Validation, returning Success(value)."""
        from halfpipe.types.validation import Success

        return Success(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Maybe representing absence of a value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.or_some(0)
        0
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def some(self) -> NoReturn:
        """Raise since Nothing has no value.

        Raises:
            IllegalStateError: Always.
        """
        raise IllegalStateError('Cannot call some() on Nothing')

    def or_some[U](self, default: U) -> U:
        """Return the default value since this is Nothing."""
        return default

    def or_else[U](self, other: Some[U] | NothingType) -> Some[U] | NothingType:
        """Return the alternative Maybe since this is Nothing."""
        return other

    def or_none(self) -> None:
        """Return None since this is Nothing."""
        return None

    def cata[R](self, none_fn: Callable[[], R], _some_fn: Callable[[Any], Any]) -> R:
        """Fold the Maybe by calling none_fn."""
        return none_fn()

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def flat_map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def to_either[L](self, left: L) -> Left[L]:
        """Convert to Either, returning Left(left)."""
        from halfpipe.types.either import Left

        return Left(left)

    def to_validation[E](self, fail: E) -> Fail[E]:
        """Convert to Validation, returning Fail(fail)."""
        from halfpipe.types.validation import Fail

        return Fail(fail)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Maybe[T] = Some[T] | NothingType
