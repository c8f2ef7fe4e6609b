import argparse
import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

from itercharge.cli import _COMMANDS, EXIT_OK, EXIT_USAGE, build_parser, main

PEOPLE = [
    {"name": "John", "age": 21},
    {"name": "Carl", "age": 18},
    {"name": "Peter", "age": 56},
    {"name": "Sarah", "age": 61},
]


class CliTest(unittest.TestCase):
    def setUp(self) -> None:
        patcher = patch("itercharge.cli.setup_logging")
        patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, argv: list[str], stdin: object) -> tuple[int, object]:
        buffer = io.StringIO()
        with patch("sys.stdin", io.StringIO(json.dumps(stdin))), redirect_stdout(buffer):
            code = main(argv)
        output = buffer.getvalue()
        return code, json.loads(output) if output else None

    def test_every_subcommand_has_a_handler(self) -> None:
        subparsers = next(
            action for action in build_parser()._actions if isinstance(action, argparse._SubParsersAction)
        )
        self.assertEqual(set(subparsers.choices), set(_COMMANDS))

    def test_sum_of_integers_stays_integer(self) -> None:
        self.assertEqual(self._run(["sum"], [1, 2, 3]), (EXIT_OK, 6))

    def test_sum_of_field(self) -> None:
        self.assertEqual(self._run(["sum", "--field", "age"], PEOPLE), (EXIT_OK, 156))
        self.assertEqual(self._run(["sum"], [0.5, 1]), (EXIT_OK, 1.5))

    def test_average(self) -> None:
        self.assertEqual(self._run(["average", "--field", "age"], PEOPLE), (EXIT_OK, 39.0))
        self.assertEqual(self._run(["average"], []), (EXIT_OK, None))

    def test_chunked(self) -> None:
        self.assertEqual(self._run(["chunked", "3"], [1, 2, 3, 4]), (EXIT_OK, [[1, 2, 3], [4]]))

    def test_chunked_rejects_zero(self) -> None:
        with self.assertLogs("itercharge.cli", level="ERROR"):
            code, output = self._run(["chunked", "0"], [1])
        self.assertEqual(code, EXIT_USAGE)
        self.assertIsNone(output)

    def test_count(self) -> None:
        self.assertEqual(self._run(["count"], [1, 0, 2]), (EXIT_OK, 2))
        self.assertEqual(self._run(["count", "--field", "ok"], [{"ok": True}, {"ok": False}]), (EXIT_OK, 1))

    def test_element_access(self) -> None:
        self.assertEqual(self._run(["element-at", "1"], ["a", "b"]), (EXIT_OK, "b"))
        self.assertEqual(self._run(["element-at", "5", "--default", '"none"'], ["a"]), (EXIT_OK, "none"))
        self.assertEqual(self._run(["first"], []), (EXIT_OK, None))
        self.assertEqual(self._run(["last", "--default", "0"], []), (EXIT_OK, 0))
        self.assertEqual(self._run(["last"], [1, 2, 3]), (EXIT_OK, 3))

    def test_negative_index_is_usage_error(self) -> None:
        with self.assertLogs("itercharge.cli", level="ERROR"):
            code, _ = self._run(["element-at", "-1"], ["a"])
        self.assertEqual(code, EXIT_USAGE)

    def test_group_by(self) -> None:
        code, output = self._run(["group-by", "--field", "age", "--value-field", "name"], PEOPLE + [{"name": "Ann", "age": 21}])
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(output, {"21": ["John", "Ann"], "18": ["Carl"], "56": ["Peter"], "61": ["Sarah"]})

    def test_group_by_keys_that_print_alike_are_rejected(self) -> None:
        rows = [{"k": 1, "v": "a"}, {"k": "1", "v": "b"}]
        with self.assertLogs("itercharge.cli", level="ERROR"):
            code, output = self._run(["group-by", "--field", "k", "--value-field", "v"], rows)
        self.assertEqual(code, EXIT_USAGE)
        self.assertIsNone(output)

    def test_group_by_keeps_numbers_and_booleans_apart(self) -> None:
        rows = [{"k": 1}, {"k": True}, {"k": 1.0}, {"k": None}, {"k": [1]}]
        code, output = self._run(["group-by", "--field", "k"], rows)
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(
            output,
            {"1": [rows[0]], "true": [rows[1]], "1.0": [rows[2]], "null": [rows[3]], "[1]": [rows[4]]},
        )

    def test_min_max(self) -> None:
        self.assertEqual(self._run(["min", "--field", "age"], PEOPLE), (EXIT_OK, PEOPLE[1]))
        self.assertEqual(self._run(["max"], [90, 10, 20, 30]), (EXIT_OK, 90))
        self.assertEqual(self._run(["max"], []), (EXIT_OK, None))

    def test_missing_field_is_usage_error(self) -> None:
        with self.assertLogs("itercharge.cli", level="ERROR"):
            code, _ = self._run(["sum", "--field", "height"], PEOPLE)
        self.assertEqual(code, EXIT_USAGE)

    def test_rejects_non_array_input(self) -> None:
        with self.assertLogs("itercharge.cli", level="ERROR"):
            code, _ = self._run(["count"], {"a": 1})
        self.assertEqual(code, EXIT_USAGE)

    def test_reads_input_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "values.json"
            path.write_text("[4, 5]", encoding="utf-8")
            buffer = io.StringIO()
            with redirect_stdout(buffer):
                code = main(["--input", str(path), "sum"])

        self.assertEqual(code, EXIT_OK)
        self.assertEqual(json.loads(buffer.getvalue()), 9)

    def test_missing_input_file_is_usage_error(self) -> None:
        with self.assertLogs("itercharge.cli", level="ERROR"):
            code = main(["--input", "/nonexistent/values.json", "count"])
        self.assertEqual(code, EXIT_USAGE)


if __name__ == "__main__":
    unittest.main()
