"""The user-facing prompt loop.

:class:`InputLoop` renders prompts through a printer, obtains answers
either from standard input or from a programmatically supplied value,
and tracks whether the loop is done.

Design
------
* All prompt methods are coroutines.  The blocking read runs on a daemon
  thread that resolves a future on the event loop, so at most one read is
  pending and the loop stays free while it waits.  Cancelling the read
  (Ctrl+C under ``asyncio.run``) abandons the thread instead of joining it.
* Auto-answers bypass the read entirely, which makes scripted flows and
  tests deterministic.
* ``done`` only ever goes from ``False`` to ``True``.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Sequence

from inputloop.cli.printer import Printer
from inputloop.core import menu
from inputloop.core.history import History
from inputloop.core.models import (
    ChooseRecord,
    Preferences,
    PrinterConfig,
    PromptKind,
    QuestionRecord,
)
from inputloop.core.protocols import InputSource, OutputSink
from inputloop.exceptions import EndOfInputError, InvalidPromptError, NothingToRepeatError
from inputloop.infra.stdin_reader import StdinReader

logger = logging.getLogger(__name__)


class InputLoop:
    """Prompt, read and replay on top of standard input and output.

    Parameters
    ----------
    config:
        Output defaults forwarded to the default :class:`Printer`.
    source:
        Raw input backend.  Defaults to :class:`StdinReader`.
    printer:
        Output backend.  Defaults to ``Printer(config)``; when given,
        *config* is ignored.
    """

    def __init__(
        self,
        config: PrinterConfig | None = None,
        *,
        source: InputSource | None = None,
        printer: OutputSink | None = None,
    ) -> None:
        self.out: OutputSink = printer if printer is not None else Printer(config)
        self.history: History = History()
        self._source: InputSource = source if source is not None else StdinReader()
        self._done: bool = False

    @property
    def done(self) -> bool:
        """``True`` once a closing option was picked or :meth:`close` ran."""
        return self._done

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    async def read(self) -> str:
        """Read one line of input and return it without its line terminator.

        Raises
        ------
        EndOfInputError
            When the input stream has ended.
        """
        data = await _read_in_daemon_thread(self._source)
        if not data:
            logger.debug("Input stream ended")
            raise EndOfInputError(
                "Input ended before an answer was read.",
                hint="Pipe an answer on stdin or pass one explicitly.",
            )
        return menu.clean_input(data.decode("utf-8", errors="replace"))

    # ------------------------------------------------------------------
    # Prompts
    # ------------------------------------------------------------------

    async def choose(
        self,
        options: Sequence[str],
        preferences: Preferences | None = None,
    ) -> list[bool]:
        """Show a numbered menu and return which option was picked.

        Parameters
        ----------
        options:
            Non-empty menu options, indexed from zero.
        preferences:
            Layout options and an optional auto-answer.

        Returns
        -------
        list[bool]
            One flag per option, ``True`` only at the picked index.  An
            answer that matches no index yields all ``False``.

        Raises
        ------
        InvalidPromptError
            When *options* is empty.
        EndOfInputError
            When no auto-answer is given and input has ended.
        """
        if not options:
            raise InvalidPromptError("Cannot show a menu without options.")
        prefs = preferences if preferences is not None else Preferences()

        self._render_menu(options, prefs)
        self.history.save(options, PromptKind.CHOOSE, last_option_close=prefs.last_option_close)

        if prefs.choice is not None:
            answer = menu.coerce_answer(prefs.choice)
        else:
            answer = await self.read()

        if prefs.last_option_close and menu.closes_loop(len(options), answer):
            self.close()

        return menu.selection_mask(len(options), answer)

    async def question(
        self,
        text: str,
        include_newline: bool = True,
        value: str | int | None = None,
    ) -> str:
        """Print *text* and return the answer.

        *value*, when not ``None``, is returned (coerced to ``str``)
        instead of reading input.
        """
        self.out.print(text, include_newline)
        self.history.save(text, PromptKind.QUESTION, include_newline=include_newline)

        if value is not None:
            return menu.coerce_answer(value)
        return await self.read()

    async def repeat(self, value: str | int | None = None) -> list[bool] | str:
        """Show the last prompt again, with *value* as its auto-answer.

        Raises
        ------
        NothingToRepeatError
            When no prompt has been shown yet.
        """
        record = self.history.retrieve()
        if isinstance(record, ChooseRecord):
            logger.debug("Repeating menu with %d option(s)", len(record.options))
            return await self.choose(
                list(record.options),
                Preferences(last_option_close=record.last_option_close, choice=value),
            )
        if isinstance(record, QuestionRecord):
            logger.debug("Repeating question %r", record.text)
            return await self.question(record.text, record.include_newline, value)
        raise NothingToRepeatError("There is no previous prompt to repeat.")

    def close(self) -> None:
        """Mark the loop as done.  Safe to call more than once."""
        if not self._done:
            logger.debug("Loop closed")
        self._done = True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_menu(self, options: Sequence[str], prefs: Preferences) -> None:
        style = menu.resolve_index_style(prefs.index_style)
        separator = menu.build_separator(prefs)

        self.out.newline()
        if prefs.divider_top:
            self.out.divider(prefs.divider_length, prefs.divider_char)
        if prefs.divider_padding:
            self.out.newline()

        for index, option in enumerate(options):
            line = menu.format_option(index, option, style)
            if prefs.display_inline:
                self.out.print(f"{line}{separator}")
            else:
                self.out.print(line, True)

        if prefs.divider_bottom:
            self.out.newline()
            if prefs.divider_padding:
                self.out.newline()
            self.out.divider(prefs.divider_length, prefs.divider_char)


async def _read_in_daemon_thread(source: InputSource) -> bytes:
    """Run ``source.read_chunk`` on a daemon thread and await its result.

    A cancelled await leaves the thread blocked in its read; being a
    daemon, it does not keep the process alive.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[bytes] = loop.create_future()

    def _settle_result(data: bytes) -> None:
        if not future.done():
            future.set_result(data)

    def _settle_error(exc: Exception) -> None:
        if not future.done():
            future.set_exception(exc)

    def _worker() -> None:
        try:
            data = source.read_chunk()
        except Exception as exc:  # noqa: BLE001
            settle, outcome = _settle_error, exc
        else:
            settle, outcome = _settle_result, data
        try:
            loop.call_soon_threadsafe(settle, outcome)
        except RuntimeError:
            logger.debug("Event loop closed before the pending read finished")

    threading.Thread(target=_worker, name="inputloop-read", daemon=True).start()
    return await future
