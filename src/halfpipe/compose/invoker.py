"""Invoker factory: turn a named method into a curried pipeline stage."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from halfpipe.errors import MissingCapabilityError

__all__ = ['create_invoker', 'create_no_args_invoker', 'invoker']

_MISSING = object()


def create_invoker(name: str) -> Callable[..., Callable[[Any], Any]]:
    """Build a stage factory that calls the method ``name`` on its target.

    The arguments are bound first and the target last, so native methods
    become stages: ``create_invoker(name)(*args, **kwargs)(target)`` is
    ``target.name(*args, **kwargs)``.

    Args:
        name: Attribute name of the method to call on the target.

    Returns:
        A function of the call arguments returning a unary stage.

    Raises:
        MissingCapabilityError: When the stage runs on a target without a
            callable attribute ``name``.

    Example:
        ```python
        upper = create_invoker('upper')
        upper()('hello')
        # 'HELLO'

        pipe('a-b-c', create_invoker('split')('-'))
        # ['a', 'b', 'c']
        ```
    """

    def bind(*args: Any, **kwargs: Any) -> Callable[[Any], Any]:
        def invoke(target: Any) -> Any:
            method = getattr(target, name, _MISSING)
            if method is _MISSING or not callable(method):
                raise MissingCapabilityError(name, type(target).__qualname__)
            return method(*args, **kwargs)

        return invoke

    return bind


def create_no_args_invoker(name: str) -> Callable[[Any], Any]:
    """Stage calling the method ``name`` on its target without arguments."""
    return create_invoker(name)()


invoker = create_invoker
