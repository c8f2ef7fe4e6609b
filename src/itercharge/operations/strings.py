"""Character sequence helpers."""

from __future__ import annotations

from ..errors import InvalidArgumentError, require_positive_int

__all__ = ["repeat", "reverse", "to_list"]


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(name, f"must be a string, got {type(value).__name__}")
    return value


def repeat(text: str, times: int, separator: str = "") -> str:
    """Return ``text`` repeated ``times`` times, joined by ``separator``.

    Example::

        repeat("ab", 3)                    # "ababab"
        repeat("hello", 3, separator="-")  # "hello-hello-hello"
    """

    _require_str(text, "text")
    count = require_positive_int(times, "times")
    _require_str(separator, "separator")
    return separator.join([text] * count)


def reverse(text: str) -> str:
    return _require_str(text, "text")[::-1]


def to_list(text: str) -> list[str]:
    return list(_require_str(text, "text"))
