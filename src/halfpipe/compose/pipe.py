"""pipe() function for threading a value through a sequence of stages."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

from halfpipe._config import get_config
from halfpipe._logging import get_logger

__all__ = ['pipe', 'pipeline']

T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')
T5 = TypeVar('T5')
T6 = TypeVar('T6')
T7 = TypeVar('T7')
T8 = TypeVar('T8')
T9 = TypeVar('T9')


def _stage_name(stage: Callable[..., Any]) -> str:
    """Best-effort readable name of a stage for trace events."""
    name = getattr(stage, '__qualname__', None) or getattr(stage, '__name__', None)
    return name if name is not None else type(stage).__qualname__


def _run_traced(value: Any, stages: tuple[Callable[[Any], Any], ...]) -> Any:
    """Run the stages like pipe(), logging each one at debug level."""
    log = get_logger(__name__)
    count = len(stages)
    current = value
    for index, stage in enumerate(stages, start=1):
        try:
            current = stage(current)
        except Exception as exc:
            log.debug(
                'pipe.stage_failed',
                index=index,
                stage=_stage_name(stage),
                count=count,
                error=type(exc).__name__,
            )
            raise
        log.debug('pipe.stage', index=index, stage=_stage_name(stage), count=count)
    return current


# Overloads for type inference (up to 9 stages)
@overload
def pipe(value: T, /) -> T: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], /) -> T1: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], /) -> T2: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /) -> T3: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> T4: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    /,
) -> T5: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    fn6: Callable[[T5], T6],
    /,
) -> T6: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    fn6: Callable[[T5], T6],
    fn7: Callable[[T6], T7],
    /,
) -> T7: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    fn6: Callable[[T5], T6],
    fn7: Callable[[T6], T7],
    fn8: Callable[[T7], T8],
    /,
) -> T8: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    fn6: Callable[[T5], T6],
    fn7: Callable[[T6], T7],
    fn8: Callable[[T7], T8],
    fn9: Callable[[T8], T9],
    /,
) -> T9: ...
@overload
def pipe(value: Any, /, *stages: Callable[[Any], Any]) -> Any: ...


def pipe(value: Any, /, *stages: Callable[[Any], Any]) -> Any:
    """Thread a value through stages from left to right.

    ``pipe(x, f, g, h)`` is ``h(g(f(x)))``. With no stages the value is
    returned as-is. Stages run synchronously and exactly once each; an
    exception raised by a stage propagates unchanged and the remaining
    stages are skipped.

    Args:
        value: The seed value.
        *stages: Unary functions applied in order.

    Returns:
        The output of the last stage.

    Example:
        ```python
        pipe('a', lambda s: s + 'b', lambda s: s + 'c')
        # 'abc'

        pipe([1, 2, 3], arrays.map(lambda x: x * 2), arrays.filter(lambda x: x > 2))
        # [4, 6]
        ```
    """
    if get_config().trace:
        return _run_traced(value, stages)

    current = value
    for stage in stages:
        current = stage(current)
    return current


def pipeline(*stages: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Bundle stages into a single reusable stage.

    Example:
        ```python
        shout = pipeline(str.strip, str.upper)
        pipe('  hi ', shout, lambda s: s + '!')
        # 'HI!'
        ```
    """

    def run(value: Any) -> Any:
        return pipe(value, *stages)

    return run
