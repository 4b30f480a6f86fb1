"""Runtime configuration: RuntimeConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from halfpipe._logging import configure_logging

__all__ = [
    'RuntimeConfig',
    'get_config',
    'init',
    'reset',
]

_TRUTHY = ('1', 'true', 'yes', 'on')
_FALSY = ('', '0', 'false', 'no', 'off')


@dataclass(frozen=True)
class RuntimeConfig:
    """Configuration for halfpipe.

    Attributes:
        trace: Emit a debug log event for every pipe stage.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
    """

    trace: bool = False
    log_level: str | None = None


# Global configuration (set by init(), or lazily from the environment)
_config: RuntimeConfig | None = None


def _detect_trace() -> bool:
    """Read HALFPIPE_TRACE from the environment."""
    raw = os.environ.get('HALFPIPE_TRACE', '').strip().lower()
    if raw in _TRUTHY:
        return True
    if raw not in _FALSY:
        logging.warning("Unknown HALFPIPE_TRACE value '%s', tracing disabled", raw)
    return False


def _detect_log_level() -> str | None:
    """Read HALFPIPE_LOG_LEVEL from the environment."""
    raw = os.environ.get('HALFPIPE_LOG_LEVEL', '').strip()
    return raw.upper() or None


def init(
    trace: bool | None = None,
    log_level: str | None = None,
) -> RuntimeConfig:
    """Initialize halfpipe with the given configuration.

    Args:
        trace: Log every pipe stage at debug level. Read from HALFPIPE_TRACE if None.
        log_level: Logging level to configure. Read from HALFPIPE_LOG_LEVEL if None.

    Returns:
        The RuntimeConfig that was set.

    Example:
        ```python
        import halfpipe

        halfpipe.init(trace=True, log_level="DEBUG")
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    _config = RuntimeConfig(
        trace=_detect_trace() if trace is None else trace,
        log_level=resolved_level,
    )

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> RuntimeConfig:
    """Get the current configuration.

    Builds one from the environment, without touching logging, if init()
    has not been called.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = RuntimeConfig(trace=_detect_trace(), log_level=_detect_log_level())
    return _config


def reset() -> None:
    """Forget the current configuration so the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603

    _config = None
