"""Terminal width probe and inline-image escape tests."""

from __future__ import annotations

import subprocess
import unittest
from unittest import mock

from iconls.terminal import inline_image, terminal_columns


class InlineImageTests(unittest.TestCase):
    def test_escape_sequence_is_exact(self) -> None:
        self.assertEqual(inline_image("QUJD"), " \x1b]1337;File=inline=1;height=1:QUJD\x07")


class TerminalColumnsTests(unittest.TestCase):
    def _completed(self, stdout: str) -> subprocess.CompletedProcess:
        return subprocess.CompletedProcess(args=["stty", "size"], returncode=0, stdout=stdout, stderr="")

    def test_returns_second_number_of_stty_size(self) -> None:
        with mock.patch("iconls.terminal.subprocess.run", return_value=self._completed("24 132\n")) as run:
            self.assertEqual(terminal_columns(), 132)

        self.assertEqual(run.call_args.args[0], ["stty", "size"])

    def test_failures_disable_wrapping(self) -> None:
        failures = (
            OSError("stty missing"),
            ValueError("no fileno"),
            subprocess.CalledProcessError(1, ["stty", "size"]),
        )
        for failure in failures:
            with self.subTest(failure=type(failure).__name__):
                with mock.patch("iconls.terminal.subprocess.run", side_effect=failure):
                    self.assertEqual(terminal_columns(), -1)

    def test_unexpected_output_disables_wrapping(self) -> None:
        for output in ("", "24\n", "garbage"):
            with self.subTest(output=output):
                with mock.patch("iconls.terminal.subprocess.run", return_value=self._completed(output)):
                    self.assertEqual(terminal_columns(), -1)


if __name__ == "__main__":
    unittest.main()
