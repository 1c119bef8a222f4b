"""Protocols (interfaces) for the input and output ends of a loop.

:class:`~inputloop.cli.input_loop.InputLoop` depends only on these
contracts, so tests and embedding applications can swap in their own
reader or printer without subclassing anything.
"""

from __future__ import annotations

from typing import Protocol


class InputSource(Protocol):
    """Contract for raw input backends."""

    def read_chunk(self) -> bytes:
        """Block until input is available and return one chunk of it.

        An empty ``bytes`` object means the stream has ended.
        """
        ...  # pragma: no cover


class OutputSink(Protocol):
    """Contract for prompt output backends."""

    def print(self, text: str, append_newline: bool = False) -> None:
        """Write *text*, followed by a line break when *append_newline*."""
        ...  # pragma: no cover

    def newline(self) -> None:
        """Write a single line break."""
        ...  # pragma: no cover

    def divider(self, length: int | None = None, char: str | None = None) -> None:
        """Write a line of *char* repeated *length* times."""
        ...  # pragma: no cover
