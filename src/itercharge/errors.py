"""Argument validation shared by all sequence operations."""

from __future__ import annotations

from typing import Any

__all__ = [
    "InvalidArgumentError",
    "require_callable",
    "require_non_negative_int",
    "require_positive_int",
]


class InvalidArgumentError(ValueError):
    """Raised when an operation is called with a missing or out-of-range argument."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(f"{name}: {message}")


def require_callable(value: Any, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(name, "must not be None")
    if not callable(value):
        raise InvalidArgumentError(name, f"must be callable, got {type(value).__name__}")


def _require_int(value: Any, name: str) -> int:
    # bool is an int subclass, but True/False as a size is always a mistake.
    if value is None:
        raise InvalidArgumentError(name, "must not be None")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(name, f"must be an integer, got {type(value).__name__}")
    return value


def require_positive_int(value: Any, name: str) -> int:
    number = _require_int(value, name)
    if number <= 0:
        raise InvalidArgumentError(name, f"must be a positive integer greater than 0, got {number}")
    return number


def require_non_negative_int(value: Any, name: str) -> int:
    number = _require_int(value, name)
    if number < 0:
        raise InvalidArgumentError(name, f"must not be negative, got {number}")
    return number
