"""Error types: dual struct+exception for container-based and raise-based code."""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    'IllegalState',
    'IllegalStateError',
    'LeftValue',
    'LeftValueError',
    'MissingCapability',
    'MissingCapabilityError',
]


# --- Invoker Errors ---


class MissingCapability(msgspec.Struct, frozen=True, gc=False):
    """Target has no callable member under the name - struct variant."""

    name: str
    target_type: str

    def to_exception(self) -> MissingCapabilityError:
        """Convert to exception for raise-based code."""
        return MissingCapabilityError(self.name, self.target_type)


class MissingCapabilityError(AttributeError):
    """Target has no callable member under the name - exception variant."""

    def __init__(self, name: str, target_type: str) -> None:
        self.name = name
        self.target_type = target_type
        super().__init__(f"'{target_type}' object has no callable member '{name}'")

    def to_struct(self) -> MissingCapability:
        """Convert to struct for container-based code."""
        return MissingCapability(self.name, self.target_type)


# --- Container Errors ---


class IllegalState(msgspec.Struct, frozen=True, gc=False):
    """Container accessed on the wrong side - struct variant."""

    message: str

    def to_exception(self) -> IllegalStateError:
        """Convert to exception for raise-based code."""
        return IllegalStateError(self.message)


class IllegalStateError(RuntimeError):
    """Container accessed on the wrong side - exception variant.

    Raised by ``Nothing.some()``, ``Right(...).left()``, ``Success(...).fail()``
    and friends.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_struct(self) -> IllegalState:
        """Convert to struct for container-based code."""
        return IllegalState(self.message)


class LeftValue(msgspec.Struct, frozen=True, gc=False):
    """A Left that is not an exception was forced - struct variant."""

    value: Any

    def to_exception(self) -> LeftValueError:
        """Convert to exception for raise-based code."""
        return LeftValueError(self.value)


class LeftValueError(Exception):
    """A Left that is not an exception was forced - exception variant."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f'Left({value!r})')

    def to_struct(self) -> LeftValue:
        """Convert to struct for container-based code."""
        return LeftValue(self.value)
