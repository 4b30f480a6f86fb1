"""Truthiness and awaitable predicates usable as stages or filters."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from toolz import complement

__all__ = ['is_awaitable', 'is_falsy', 'is_truthy']

is_truthy: Callable[[Any], bool] = bool
"""Whether the value is truthy."""

is_falsy: Callable[[Any], bool] = complement(bool)
"""Whether the value is falsy (None, False, 0, '', empty containers)."""

is_awaitable: Callable[[Any], bool] = inspect.isawaitable
"""Whether the value can be awaited (coroutine, Task, Future, ...)."""
