"""Composition utilities: pipe(), pipeline() and the invoker factory."""

from halfpipe.compose.invoker import create_invoker, create_no_args_invoker, invoker
from halfpipe.compose.pipe import pipe, pipeline

__all__ = [
    'create_invoker',
    'create_no_args_invoker',
    'invoker',
    'pipe',
    'pipeline',
]
