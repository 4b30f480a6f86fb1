"""Branching stages: if_else(), if_then() and switch_case()."""

from __future__ import annotations

from collections.abc import Callable, Iterable

__all__ = ['if_else', 'if_then', 'switch_case']


def if_else[V, R1, R2](
    condition: Callable[[V], bool] | bool,
    pass_fn: Callable[[V], R1],
    fail_fn: Callable[[V], R2],
) -> Callable[[V], R1 | R2]:
    """Stage calling pass_fn or fail_fn depending on the condition.

    The condition is either a predicate of the piped value or a fixed bool.

    ```python
    pipe(7, if_else(lambda n: n % 2 == 0, lambda n: 'even', lambda n: 'odd'))  # 'odd'
    ```
    """
    cond = condition if callable(condition) else (lambda _: condition)
    return lambda value: pass_fn(value) if cond(value) else fail_fn(value)


def if_then[V, R](condition: Callable[[V], bool] | bool, pass_fn: Callable[[V], R]) -> Callable[[V], R | V]:
    """Like if_else(), passing the value through unchanged when the condition fails."""
    return if_else(condition, pass_fn, lambda value: value)


def switch_case[R](cases: Iterable[tuple[Callable[[], bool] | bool, Callable[[], R]]]) -> R | None:
    """Return the result of the first case whose condition holds, or None.

    ```python
    switch_case([
        (lambda: n < 0, lambda: 'negative'),
        (n == 0, lambda: 'zero'),
        (True, lambda: 'positive'),
    ])
    ```
    """
    for condition, result_fn in cases:
        if condition() if callable(condition) else condition:
            return result_fn()
    return None
