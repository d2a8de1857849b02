from mock import patch

from vercelctl.plugin import CommandResult

from .base import BaseTestCase


class TestCommandResult(BaseTestCase):
    def test_echo_cursor(self):
        with patch.object(CommandResult, "_echo") as out:
            lines = [
                "Line 1",
                "Line 2",
            ]
            result = CommandResult(lines[0]).echo()
            result = result.add_line(lines[1]).echo()

            self.assertEqual(len(out.call_args_list), 2)

            for idx, line in enumerate(lines):
                args, _ = out.call_args_list[idx]

                self.assertEqual(args[0], line + "\n")

    def test_return_code_is_kept_when_adding_lines(self):
        result = CommandResult("Something failed", return_code=1)
        result = result.add_line("More details")

        self.assertEqual(result.return_code, 1)
        self.assertEqual(result, "Something failed\nMore details\n")

    def test_empty_result_defaults_to_success(self):
        result = CommandResult()

        self.assertEqual(result, "")
        self.assertEqual(result.return_code, 0)

    def test_format_keyword_arguments(self):
        result = CommandResult("Opened {url}", url="https://vercel.com/acme")

        self.assertEqual(result, "Opened https://vercel.com/acme\n")

    def test_unknown_format_key_returns_original(self):
        result = CommandResult("Literal {braces}")

        self.assertEqual(result, "Literal {braces}\n")
