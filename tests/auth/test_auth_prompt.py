import io
import unittest

from gsheettsv.auth import console_prompt


class TestConsolePrompt(unittest.TestCase):
    def test_prints_url_and_reads_code(self) -> None:
        stdin = io.StringIO("4/abc-code\n")
        stderr = io.StringIO()

        code = console_prompt("https://auth.example/x", stdin=stdin, stderr=stderr)

        self.assertEqual(code, "4/abc-code")
        out = stderr.getvalue()
        self.assertIn("Open this: https://auth.example/x", out)
        self.assertIn("Enter the code from that page here: ", out)

    def test_reads_a_single_line(self) -> None:
        stdin = io.StringIO("first\nsecond\n")
        code = console_prompt("u", stdin=stdin, stderr=io.StringIO())
        self.assertEqual(code, "first")
        self.assertEqual(stdin.readline(), "second\n")

    def test_eof_yields_empty_code(self) -> None:
        code = console_prompt("u", stdin=io.StringIO(""), stderr=io.StringIO())
        self.assertEqual(code, "")


if __name__ == "__main__":
    unittest.main()
