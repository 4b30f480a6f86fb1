"""Pipeline stages for awaitables.

Each stage is an ordinary synchronous function: it takes an awaitable and
returns a new coroutine without awaiting anything, so awaitable stages
compose inside ``pipe`` and the caller awaits the final result.

Example:
    ```python
    from halfpipe import awaitables, pipe

    async def main() -> str:
        return await pipe(
            fetch_user(42),
            awaitables.then(lambda user: user['name']),
            awaitables.catch(lambda exc: 'anonymous'),
        )
    ```
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Coroutine, Iterable
from typing import Any

from halfpipe.predicates import is_awaitable as _is_awaitable

__all__ = ['all_', 'catch', 'is_awaitable', 'race', 'reject', 'resolve', 'then']


async def _settle[T](value: T | Awaitable[T]) -> T:
    if _is_awaitable(value):
        return await value  # type: ignore[misc]
    return value  # type: ignore[return-value]


async def _then[A, B](awaitable: Awaitable[A], fn: Callable[[A], B | Awaitable[B]]) -> B:
    return await _settle(fn(await awaitable))


async def _catch[A, B](
    awaitable: Awaitable[A],
    fn: Callable[[BaseException], B | Awaitable[B]],
    exceptions: tuple[type[BaseException], ...],
) -> A | B:
    try:
        return await awaitable
    except exceptions as e:
        return await _settle(fn(e))


def then[A, B](fn: Callable[[A], B | Awaitable[B]]) -> Callable[[Awaitable[A]], Coroutine[Any, Any, B]]:
    """Stage applying fn to the awaited value; fn may itself return an awaitable."""
    return lambda awaitable: _then(awaitable, fn)


def catch[A, B](
    fn: Callable[[BaseException], B | Awaitable[B]],
    exceptions: tuple[type[BaseException], ...] = (Exception,),
) -> Callable[[Awaitable[A]], Coroutine[Any, Any, A | B]]:
    """Stage recovering from an exception raised while awaiting.

    Args:
        fn: Called with the exception; its (awaited) result replaces the value.
        exceptions: Exception types to recover from. Defaults to (Exception,);
            cancellation and anything else propagate.
    """
    return lambda awaitable: _catch(awaitable, fn, exceptions)


async def all_[T](awaitables: Iterable[Awaitable[T]]) -> list[T]:
    """Await all of them concurrently; results keep the input order.

    The first exception propagates.
    """
    return list(await asyncio.gather(*awaitables))


async def race[T](awaitables: Iterable[Awaitable[T]]) -> T:
    """Result (or exception) of whichever awaitable settles first; the rest are cancelled.

    Raises:
        ValueError: If no awaitables are given.
    """
    tasks = [asyncio.ensure_future(awaitable) for awaitable in awaitables]
    if not tasks:
        msg = 'race() needs at least one awaitable'
        raise ValueError(msg)

    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    finally:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.wait(pending)

    winner = next(task for task in tasks if task in done)
    return winner.result()


async def resolve[T](value: T) -> T:
    """Coroutine producing the value."""
    return value


async def reject(error: BaseException) -> Any:
    """Coroutine raising the error."""
    raise error


def is_awaitable() -> Callable[[Any], bool]:
    return _is_awaitable
