"""Tests for the ``inputloop`` command-line tool (cli/app.py).

Standard input is replaced by piped bytes in an ``io.BytesIO`` (several
answers may arrive in one read) and output is captured with ``capsys``;
no terminal is involved.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from unittest.mock import patch

import pytest

from inputloop.cli import exit_codes
from inputloop.cli.app import cli, main
from inputloop.exceptions import EndOfInputError, InvalidPromptError


# ---------------------------------------------------------------------------
# choose
# ---------------------------------------------------------------------------

class TestChooseCommand:
    def test_auto_choice(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["choose", "Start", "Quit", "--choice", "1"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == "\n[0] Start\n[1] Quit\n> Quit\n"

    def test_reads_answer_from_stdin(
        self,
        capsys: pytest.CaptureFixture[str],
        fake_stdin: Callable[..., object],
    ) -> None:
        fake_stdin(b"0\n")
        assert main(["choose", "Start", "Quit"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.endswith("> Start\n")

    def test_layout_options(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(
            [
                "choose", "A", "B",
                "--inline", "--separator", "/",
                "--index-style", "()",
                "--divider-top", "--divider-char", "=", "--divider-length", "4",
                "--choice", "0",
            ]
        )
        assert capsys.readouterr().out == "\n====\n(0) A / (1) B / > A\n"

    def test_unmatched_answer_is_an_error(self, fake_stdin: Callable[..., object]) -> None:
        fake_stdin(b"7\n")
        with pytest.raises(InvalidPromptError) as exc_info:
            main(["choose", "A", "B"])
        assert exc_info.value.hint == "Enter a number from 0 to 1."

    def test_end_of_input_is_an_error(self, fake_stdin: Callable[..., object]) -> None:
        fake_stdin()
        with pytest.raises(EndOfInputError):
            main(["choose", "A", "B"])

    def test_loop_until_last_option(
        self,
        capsys: pytest.CaptureFixture[str],
        fake_stdin: Callable[..., object],
    ) -> None:
        fake_stdin(b"0\n", b"9\n", b"1\n")
        code = main(["choose", "Start", "Quit", "--close-last", "--loop"])
        assert code == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert out.count("[0] Start") == 3
        assert "> Start\n" in out
        assert out.endswith("> Quit\n")

    def test_loop_with_all_answers_piped_at_once(
        self,
        capsys: pytest.CaptureFixture[str],
        fake_stdin: Callable[..., object],
    ) -> None:
        fake_stdin(b"0\n1\n")
        code = main(["choose", "Start", "Quit", "--close-last", "--loop"])
        assert code == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert out.count("[0] Start") == 2
        assert out == ("\n[0] Start\n[1] Quit\n> Start\n" "\n[0] Start\n[1] Quit\n> Quit\n")

    def test_loop_auto_choice_applies_to_first_prompt_only(
        self,
        capsys: pytest.CaptureFixture[str],
        fake_stdin: Callable[..., object],
    ) -> None:
        fake_stdin(b"1\n")
        main(["choose", "Start", "Quit", "--close-last", "--loop", "--choice", "0"])
        out = capsys.readouterr().out
        assert out.count("[0] Start") == 2
        assert out.endswith("> Start\n" + "\n[0] Start\n[1] Quit\n> Quit\n")

    def test_loop_without_close_ends_on_end_of_input(
        self, fake_stdin: Callable[..., object]
    ) -> None:
        fake_stdin(b"0\n")
        with pytest.raises(EndOfInputError):
            main(["choose", "A", "B", "--loop"])


# ---------------------------------------------------------------------------
# ask
# ---------------------------------------------------------------------------

class TestAskCommand:
    def test_reads_answer(
        self,
        capsys: pytest.CaptureFixture[str],
        fake_stdin: Callable[..., object],
    ) -> None:
        fake_stdin(b"Ada\r\n")
        assert main(["ask", "Name?"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out == "Name?\nAda\n"

    def test_takes_only_the_first_piped_line(
        self,
        capsys: pytest.CaptureFixture[str],
        fake_stdin: Callable[..., object],
    ) -> None:
        fake_stdin(b"Ada\nextra\n")
        assert main(["ask", "Name?"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out == "Name?\nAda\n"

    def test_same_line_with_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["ask", "Name? ", "--same-line", "--value", "Bob"])
        assert capsys.readouterr().out == "Name? Bob\n"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class TestVerbose:
    def test_verbose_enables_debug_logging(self) -> None:
        package_logger = logging.getLogger("inputloop")
        try:
            main(["-v", "ask", "Q", "--value", "x"])
            assert package_logger.level == logging.DEBUG
            assert len(package_logger.handlers) == 1
        finally:
            package_logger.handlers.clear()
            package_logger.setLevel(logging.NOTSET)


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_success_exit(self) -> None:
        with patch("inputloop.cli.app.main", return_value=exit_codes.SUCCESS):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_known_error_exits_general(self, capsys: pytest.CaptureFixture[str]) -> None:
        err = EndOfInputError("Input ended.", hint="Pipe an answer.")
        with patch("inputloop.cli.app.main", side_effect=err):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        captured = capsys.readouterr().err
        assert "Input ended." in captured
        assert "Pipe an answer." in captured

    def test_keyboard_interrupt(self) -> None:
        with patch("inputloop.cli.app.main", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("inputloop.cli.app.main", side_effect=RuntimeError("kaboom")):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaboom" in capsys.readouterr().err
