"""Pipeline stages for Validation values (Success / Fail)."""

from __future__ import annotations

from halfpipe.compose.invoker import create_invoker
from halfpipe.types.validation import Fail, Success, Validation

__all__ = [
    'Fail',
    'Success',
    'acc',
    'ap',
    'bimap',
    'bind',
    'cata',
    'chain',
    'fail',
    'fail_map',
    'flat_map',
    'from_truthy',
    'is_fail',
    'is_success',
    'map',
    'map_both',
    'success',
    'success_flat_map',
    'success_map',
    'to_either',
    'to_maybe',
]


def from_truthy[E, T](err: E, value: T) -> Validation[E, T]:
    """Success(value) for truthy values, Fail(err) otherwise (None, 0, '', empty containers)."""
    return Success(value) if value else Fail(err)


flat_map = create_invoker('flat_map')
map = create_invoker('map')  # noqa: A001
cata = create_invoker('cata')
bimap = create_invoker('bimap')
fail_map = create_invoker('fail_map')
is_success = create_invoker('is_success')
is_fail = create_invoker('is_fail')
fail = create_invoker('fail')
success = create_invoker('success')
to_either = create_invoker('to_either')
to_maybe = create_invoker('to_maybe')
acc = create_invoker('acc')

ap = create_invoker('ap')
"""ap(validation_with_fn) -> stage applying a Validation-held function, appending Fail errors."""

# Aliases
bind = flat_map
chain = flat_map
success_flat_map = flat_map
success_map = map
map_both = bimap
