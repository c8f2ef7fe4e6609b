"""Command line front-end: apply one sequence operation to a JSON array."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable

from .config import settings
from .errors import InvalidArgumentError
from .logging import setup_logging
from .operations.access import element_at_or_else, first_or_else, last_or_else
from .operations.aggregation import average_by, sum_by, sum_by_double
from .operations.chunk import chunked
from .operations.counting import count
from .operations.extremum import max_by, min_by
from .operations.grouping import group_by

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2


class InputError(ValueError):
    """Raised when the JSON input cannot be used."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="itercharge",
        description="Apply a sequence operation to a JSON array read from a file or stdin.",
    )
    parser.add_argument("--input", type=Path, help="Path to a JSON file (default: stdin)")
    parser.add_argument("--log-level", help="Override ITERCHARGE_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command")

    for name, help_text in (
        ("sum", "Sum of the selected values"),
        ("average", "Average of the selected values (null when empty)"),
        ("count", "Number of elements whose selected value is truthy"),
        ("min", "Element with the smallest selected value"),
        ("max", "Element with the largest selected value"),
    ):
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("--field", help="Object key to select (default: the element itself)")

    chunk_parser = subparsers.add_parser("chunked", help="Split the array into chunks")
    chunk_parser.add_argument("size", type=int, help="Chunk size, at least 1")

    element_parser = subparsers.add_parser("element-at", help="Element at a position")
    element_parser.add_argument("index", type=int)
    element_parser.add_argument("--default", help="JSON value printed when out of range")

    for name in ("first", "last"):
        command = subparsers.add_parser(name, help=f"The {name} element")
        command.add_argument("--default", help="JSON value printed when the array is empty")

    group_parser = subparsers.add_parser("group-by", help="Group objects by a key")
    group_parser.add_argument("--field", required=True, help="Object key to group on")
    group_parser.add_argument("--value-field", help="Object key to collect instead of the whole object")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_OK

    try:
        setup_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        values = _load_values(args.input)
        result = _run(args, values)
    except (InvalidArgumentError, InputError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return EXIT_USAGE

    print(json.dumps(result, indent=settings.json_indent))
    return EXIT_OK


def _run(args: argparse.Namespace, values: list[Any]) -> Any:
    logger.debug("Running %s on %d values", args.command, len(values))
    return _COMMANDS[args.command](args, values)


def _sum(args: argparse.Namespace, values: list[Any]) -> Any:
    selected = [_selector(args.field)(value) for value in values]
    if all(isinstance(value, int) and not isinstance(value, bool) for value in selected):
        return sum_by(selected, _identity)
    return sum_by_double(selected, _as_number)


def _average(args: argparse.Namespace, values: list[Any]) -> Any:
    select = _selector(args.field)
    return average_by(values, lambda value: _as_number(select(value)))


def _count(args: argparse.Namespace, values: list[Any]) -> Any:
    select = _selector(args.field)
    return count(values, lambda value: bool(select(value)))


def _extremum(args: argparse.Namespace, values: list[Any]) -> Any:
    select = _selector(args.field)
    pick = min_by if args.command == "min" else max_by
    return pick(values, lambda a, b: _natural_order(select(a), select(b)))


def _chunked(args: argparse.Namespace, values: list[Any]) -> Any:
    return list(chunked(values, args.size))


def _element_at(args: argparse.Namespace, values: list[Any]) -> Any:
    default = _parse_default(args.default)
    return element_at_or_else(values, args.index, lambda: default)


def _first_or_last(args: argparse.Namespace, values: list[Any]) -> Any:
    default = _parse_default(args.default)
    pick = first_or_else if args.command == "first" else last_or_else
    return pick(values, lambda: default)


def _group_by(args: argparse.Namespace, values: list[Any]) -> Any:
    groups = group_by(values, _key_selector(args.field), _selector(args.value_field))

    # JSON object keys are strings, so 1 and "1" would share one output key.
    output: dict[str, list[Any]] = {}
    for key, members in groups.items():
        label = key.encoded() if isinstance(key, _CompositeKey) else key
        if label in output:
            raise InputError(f"group keys collide when written as JSON: {label!r}")
        output[label] = members
    return output


_COMMANDS: dict[str, Callable[[argparse.Namespace, list[Any]], Any]] = {
    "sum": _sum,
    "average": _average,
    "count": _count,
    "min": _extremum,
    "max": _extremum,
    "chunked": _chunked,
    "element-at": _element_at,
    "first": _first_or_last,
    "last": _first_or_last,
    "group-by": _group_by,
}


def _load_values(path: Path | None) -> list[Any]:
    try:
        raw = path.read_text(encoding="utf-8") if path else sys.stdin.read()
    except OSError as exc:
        raise InputError(f"cannot read input: {exc}") from exc

    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise InputError(f"input is not valid JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise InputError(f"input must be a JSON array, got {type(payload).__name__}")
    return payload


def _parse_default(raw: str | None) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise InputError(f"--default is not valid JSON: {exc}") from exc


def _identity(value: Any) -> Any:
    return value


def _selector(field: str | None) -> Callable[[Any], Any]:
    if field is None:
        return _identity

    def select(value: Any) -> Any:
        if not isinstance(value, dict) or field not in value:
            raise InputError(f"element {value!r} has no field {field!r}")
        return value[field]

    return select


class _CompositeKey(tuple):
    """Non-string key held as its JSON text, so 1, 1.0 and true stay separate groups."""

    def __new__(cls, encoded: str) -> _CompositeKey:
        return super().__new__(cls, (encoded,))

    def encoded(self) -> str:
        return self[0]


def _key_selector(field: str) -> Callable[[Any], Any]:
    select = _selector(field)

    def key(value: Any) -> Any:
        selected = select(value)
        if isinstance(selected, str):
            return selected
        return _CompositeKey(json.dumps(selected, sort_keys=True))

    return key


def _as_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InputError(f"expected a number, got {value!r}")
    return float(value)


def _natural_order(left: Any, right: Any) -> int:
    try:
        return (left > right) - (left < right)
    except TypeError as exc:
        raise InputError(f"cannot compare {left!r} with {right!r}") from exc


if __name__ == "__main__":
    sys.exit(main())
