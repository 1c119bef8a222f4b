"""Rich consoles for the prompt tool: stdout for prompts, stderr for status.

Rich is imported when a console is first needed, never at module level,
so ``--help`` and ``--version`` run without it and a missing install
surfaces as :class:`~inputloop.exceptions.EnvironmentError` on first
output.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

from inputloop.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def get_plain_console(file: IO[str] | None = None) -> Any:
    """Create a Rich console that writes text exactly as given.

    Markup, highlighting and emoji codes are disabled and soft wrapping
    is on, so option labels such as ``[0] Start`` reach the terminal
    untouched.
    """
    console_class = _load_rich_console_class()
    return console_class(
        file=file if file is not None else sys.stdout,
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


class _ConsoleProxy:
    """Stderr channel for error and hint messages from the CLI boundary.

    Prompts never go through here; they are written to stdout by
    :class:`~inputloop.cli.printer.Printer`.  Rich markup in the messages
    is rendered when Rich is installed and printed as-is otherwise, so a
    missing Rich can still be reported.
    """

    def print(self, *objects: object) -> None:
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def configure_logging(level: int = logging.DEBUG) -> None:
    """Route ``inputloop`` log records at *level* and above to stderr via Rich.

    Only the CLI calls this; the library itself never installs handlers.
    """
    rich_console = get_rich_console()
    from rich.logging import RichHandler

    package_logger = logging.getLogger("inputloop")
    package_logger.handlers.clear()
    package_logger.addHandler(
        RichHandler(console=rich_console, show_path=False),
    )
    package_logger.setLevel(level)
