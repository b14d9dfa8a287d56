from __future__ import annotations


class TodoStateError(Exception):
    """Base class for errors raised by todo_state."""


class UnsupportedValueKind(TodoStateError, TypeError):
    """clone() was handed a value it has no copy rule for (functions, handles, ...)."""

    def __init__(self, value_type: type):
        self.value_type = value_type
        super().__init__(f"Cannot clone value of type {value_type.__module__}.{value_type.__qualname__}")


class ConfigError(TodoStateError, ValueError):
    """Configuration file exists but is not a usable mapping."""
