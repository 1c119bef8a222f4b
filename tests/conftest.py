"""Shared pytest fixtures and configuration for the inputloop test suite.

Guidelines
----------
* No real terminal: input comes from scripted sources, output goes to
  ``io.StringIO``.
* Tests must not depend on what is attached to the process's stdin.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterable
from types import SimpleNamespace

import pytest

from inputloop.cli.input_loop import InputLoop
from inputloop.cli.printer import Printer
from inputloop.core.models import PrinterConfig


class ScriptedSource:
    """Input source that returns one pre-recorded chunk per read."""

    def __init__(self, chunks: Iterable[bytes] = ()) -> None:
        self.chunks: list[bytes] = list(chunks)
        self.reads: int = 0

    def read_chunk(self) -> bytes:
        self.reads += 1
        if not self.chunks:
            return b""
        return self.chunks.pop(0)


LoopFactory = Callable[..., tuple[InputLoop, io.StringIO, ScriptedSource]]


@pytest.fixture
def make_loop() -> LoopFactory:
    """Build an :class:`InputLoop` wired to scripted input and a string buffer."""

    def _factory(
        *chunks: bytes,
        config: PrinterConfig | None = None,
    ) -> tuple[InputLoop, io.StringIO, ScriptedSource]:
        out = io.StringIO()
        source = ScriptedSource(chunks)
        loop = InputLoop(source=source, printer=Printer(config, file=out))
        return loop, out, source

    return _factory


@pytest.fixture
def fake_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[..., io.BytesIO]:
    """Replace ``sys.stdin`` with piped input made of the given pieces.

    The pieces are concatenated into one ``io.BytesIO``, so a single read
    can return every line at once, as with a real pipe or file.
    """

    def _install(*pieces: bytes) -> io.BytesIO:
        stream = io.BytesIO(b"".join(pieces))
        monkeypatch.setattr("sys.stdin", SimpleNamespace(buffer=stream))
        return stream

    return _install
