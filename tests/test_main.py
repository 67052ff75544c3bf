import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

import main


class CommandLineTests(unittest.TestCase):
    def run_main(self, *argv):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            code = main.main(["--log-level", "ERROR", *argv])
        return code, stdout.getvalue()

    def test_places_explicit_words_and_writes_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "out.json"
            code, text = self.run_main(
                "--width", "5", "--height", "5", "--words", "eye", "yes", "--seed", "1",
                "--output", str(output),
            )
            self.assertEqual(code, 0)
            self.assertIn("--- Search ---", text)
            payload = json.loads(output.read_text(encoding="utf-8"))
            self.assertEqual([p["word"] for p in payload["placed_words"]], ["EYE", "YES"])
            self.assertEqual(payload["validation"], [])
            self.assertEqual(len(payload["board"]), 5)
            self.assertEqual(payload["seed"], 1)

    def test_spelled_numbers_by_default(self) -> None:
        code, text = self.run_main("--count", "6", "--seed", "3", "--blank", " ")
        self.assertEqual(code, 0)
        self.assertIn("ZERO", text)
        self.assertIn("FIVE", text)

    def test_no_solution_exit_code(self) -> None:
        code, text = self.run_main("--width", "1", "--height", "1", "--words", "ab", "--verify")
        self.assertEqual(code, main.EXIT_NO_SOLUTION)
        self.assertIn("No solution", text)
        self.assertIn("INFEASIBLE", text)

    def test_invalid_dimensions_exit_with_usage_error(self) -> None:
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            self.run_main("--width", "0", "--words", "cat")
        self.assertEqual(ctx.exception.code, 2)

    def test_rejects_words_without_letters(self) -> None:
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            self.run_main("--words", "123", "cat")
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
