"""Validation type: Fail[E] | Success[T] with error accumulation.

Validation behaves like Either for mapping and binding, but ``ap`` appends
the errors of two Fail values (with ``+``) instead of keeping only the first.
Combined with ``acc`` this collects every failure of a group of checks:

    ```python
    checks = (
        Success(name).acc()
        .ap(Fail(['age is missing']).acc())
        .ap(Fail(['email is invalid']).acc())
    )
    # Fail(error=['age is missing', 'email is invalid'])
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from halfpipe.errors import IllegalStateError

if TYPE_CHECKING:
    from halfpipe.types.either import Left, Right
    from halfpipe.types.maybe import NothingType, Some

__all__ = ['Fail', 'Success', 'Validation', 'accumulator']


def accumulator(*_: Any) -> Callable[..., Any]:
    """Return itself; the function carried by ``acc()`` for ``ap`` chains."""
    return accumulator


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Validation holding a valid value."""

    value: T

    def is_success(self) -> TypeIs[Success[T]]:
        return True

    def is_fail(self) -> TypeIs[Fail[Any]]:
        return False

    def success(self) -> T:
        """Return the contained value."""
        return self.value

    def fail(self) -> NoReturn:
        """Raise since this is Success.

        Raises:
            IllegalStateError: Always.
        """
        raise IllegalStateError('Cannot call fail() on a Success')

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        return Success(f(self.value))

    def flat_map[E, U](self, f: Callable[[T], Fail[E] | Success[U]]) -> Fail[E] | Success[U]:
        return f(self.value)

    def fail_map(self, _f: Callable[[Any], Any]) -> Success[T]:
        return self

    def bimap[U](self, _fail_fn: Callable[[Any], Any], success_fn: Callable[[T], U]) -> Success[U]:
        return Success(success_fn(self.value))

    def cata[V](self, _fail_fn: Callable[[Any], Any], success_fn: Callable[[T], V]) -> V:
        return success_fn(self.value)

    def to_either(self) -> Right[T]:
        from halfpipe.types.either import Right

        return Right(self.value)

    def to_maybe(self) -> Some[T]:
        from halfpipe.types.maybe import Some

        return Some(self.value)

    def acc(self) -> Success[Callable[..., Any]]:
        """Replace the value with the accumulator so ``ap`` chains collect errors."""
        return Success(accumulator)

    def ap[E, U](self, validation_with_fn: Fail[E] | Success[Callable[[T], U]]) -> Fail[E] | Success[U]:
        """Apply the function held by another Validation to this value.

        Args:
            validation_with_fn: A Success holding a function, or a Fail.

        Returns:
            Success of the applied function, or the other Fail unchanged.
        """
        if isinstance(validation_with_fn, Success):
            return Success(validation_with_fn.value(self.value))
        return validation_with_fn


class Fail[E](msgspec.Struct, frozen=True, gc=False):
    """Fail variant of Validation holding the error(s).

    Errors must support ``+`` (lists, tuples, strings) to accumulate through ``ap``.
    """

    error: E

    def is_success(self) -> TypeIs[Success[Any]]:
        return False

    def is_fail(self) -> TypeIs[Fail[E]]:
        return True

    def success(self) -> NoReturn:
        """Raise since this is Fail.

        Raises:
            IllegalStateError: Always.
        """
        raise IllegalStateError('Cannot call success() on a Fail')

    def fail(self) -> E:
        """Return the contained error."""
        return self.error

    def map(self, _f: Callable[[Any], Any]) -> Fail[E]:
        return self

    def flat_map(self, _f: Callable[[Any], Any]) -> Fail[E]:
        return self

    def fail_map[F](self, f: Callable[[E], F]) -> Fail[F]:
        return Fail(f(self.error))

    def bimap[F](self, fail_fn: Callable[[E], F], _success_fn: Callable[[Any], Any]) -> Fail[F]:
        return Fail(fail_fn(self.error))

    def cata[V](self, fail_fn: Callable[[E], V], _success_fn: Callable[[Any], Any]) -> V:
        return fail_fn(self.error)

    def to_either(self) -> Left[E]:
        from halfpipe.types.either import Left

        return Left(self.error)

    def to_maybe(self) -> NothingType:
        from halfpipe.types.maybe import Nothing

        return Nothing

    def acc(self) -> Fail[E]:
        return self

    def ap(self, validation_with_fn: Fail[E] | Success[Any]) -> Fail[E]:
        """Append the other Fail's errors to this one; a Success leaves self unchanged."""
        if isinstance(validation_with_fn, Fail):
            return Fail(self.error + validation_with_fn.error)  # type: ignore[operator]
        return self


type Validation[E, T] = Fail[E] | Success[T]
