"""Algebraic containers: Maybe, Either and Validation."""

from halfpipe.types.either import Either, Left, Right
from halfpipe.types.maybe import Maybe, Nothing, NothingType, Some
from halfpipe.types.validation import Fail, Success, Validation

__all__ = [
    'Either',
    'Fail',
    'Left',
    'Maybe',
    'Nothing',
    'NothingType',
    'Right',
    'Some',
    'Success',
    'Validation',
]
