"""halfpipe: pipeline-friendly functional helpers.

Curried stages for lists, dicts, sets, plain objects, awaitables and the
Maybe / Either / Validation containers, composed left to right with pipe().

Flat imports (preferred):
    from halfpipe import pipe, Some, Nothing, Left, Right, Success, Fail
    from halfpipe import arrays, maps, maybes, eithers

Submodule imports (for organization):
    from halfpipe.compose import pipe, create_invoker
    from halfpipe.types import Maybe, Either, Validation

Example:
    ```python
    from halfpipe import arrays, maybes, pipe

    pipe(
        [3, 1, 2],
        arrays.sort(),
        arrays.get(-1),
        maybes.map(lambda n: n * 10),
        maybes.or_some(0),
    )
    # 30
    ```
"""

# Stage modules
from halfpipe import (
    arrays,
    awaitables,
    eithers,
    maps,
    maybes,
    objects,
    sets,
    validations,
)

# Configuration and logging
from halfpipe._config import RuntimeConfig, get_config, init
from halfpipe._logging import configure_logging, get_logger

# Composition
from halfpipe.compose import (
    create_invoker,
    create_no_args_invoker,
    invoker,
    pipe,
    pipeline,
)

# Branching and predicates
from halfpipe.conditionals import if_else, if_then, switch_case

# Errors
from halfpipe.errors import (
    IllegalStateError,
    LeftValueError,
    MissingCapabilityError,
)
from halfpipe.predicates import is_awaitable, is_falsy, is_truthy

# Types
from halfpipe.types import (
    Either,
    Fail,
    Left,
    Maybe,
    Nothing,
    NothingType,
    Right,
    Some,
    Success,
    Validation,
)

__all__ = [
    # Types
    'Either',
    'Fail',
    # Errors
    'IllegalStateError',
    'Left',
    'LeftValueError',
    'Maybe',
    'MissingCapabilityError',
    'Nothing',
    'NothingType',
    'Right',
    # Configuration
    'RuntimeConfig',
    'Some',
    'Success',
    'Validation',
    # Stage modules
    'arrays',
    'awaitables',
    'configure_logging',
    # Composition
    'create_invoker',
    'create_no_args_invoker',
    'eithers',
    'get_config',
    'get_logger',
    # Branching and predicates
    'if_else',
    'if_then',
    'init',
    'invoker',
    'is_awaitable',
    'is_falsy',
    'is_truthy',
    'maps',
    'maybes',
    'objects',
    'pipe',
    'pipeline',
    'sets',
    'switch_case',
    'validations',
]
