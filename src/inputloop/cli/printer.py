"""Rich-backed printer for prompts, menu options and dividers."""

from __future__ import annotations

from typing import IO, Any

from inputloop.cli.console import get_plain_console
from inputloop.core.models import PrinterConfig


class _Verbatim:
    """Renderable handing its text to Rich as one unstyled segment.

    Going through a segment skips Rich's text pipeline, which would
    otherwise expand tabs and apply ``end``.
    """

    def __init__(self, text: str) -> None:
        self.text = text

    def __rich_console__(self, console: Any, options: Any) -> Any:
        from rich.segment import Segment

        yield Segment(self.text)


class Printer:
    """Write prompt text and divider lines to standard output.

    Satisfies :class:`~inputloop.core.protocols.OutputSink` structurally.
    Text reaches the stream exactly as given, and Rich flushes after every
    write so a prompt is visible before the following blocking read.  The
    Rich console is created on the first write, so constructing a printer
    never needs Rich.

    Parameters
    ----------
    config:
        Divider defaults.  ``None`` uses :class:`PrinterConfig` defaults.
    file:
        Text stream to write to.  Defaults to ``sys.stdout``.
    """

    def __init__(self, config: PrinterConfig | None = None, file: IO[str] | None = None) -> None:
        self.config: PrinterConfig = config if config is not None else PrinterConfig()
        self._file = file
        self._console: Any = None

    def _get_console(self) -> Any:
        if self._console is None:
            self._console = get_plain_console(self._file)
        return self._console

    def print(self, text: str, append_newline: bool = False) -> None:
        end = "\n" if append_newline else ""
        self._get_console().print(_Verbatim(f"{text}{end}"))

    def newline(self) -> None:
        self.print("", True)

    def divider(self, length: int | None = None, char: str | None = None) -> None:
        """Write *char* repeated *length* times, then a line break.

        Omitted (or empty) values fall back to :attr:`config`.
        """
        length = length or self.config.divider_length
        char = char or self.config.divider_char
        self.print(char * length, append_newline=True)
