"""Line-oriented standard-input reader.

This is the only module that touches ``sys.stdin``.  It satisfies
:class:`~inputloop.core.protocols.InputSource` structurally.

Input is pulled from the stream in fixed-size chunks and handed out one
line at a time, so piped input carrying several answers is consumed one
answer per read.  For the process's own stdin the unbuffered ``raw``
file is read directly: a read left blocked in a daemon thread then holds
no ``BufferedReader`` lock that interpreter shutdown would wait on.
"""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO

logger = logging.getLogger(__name__)

CHUNK_SIZE: int = 1024
"""Maximum number of bytes pulled from the stream, and returned, per read."""


class StdinReader:
    """Read standard input one line at a time.

    Parameters
    ----------
    stream:
        Binary stream to read from.  Defaults to ``sys.stdin.buffer``,
        resolved on each read so that test harnesses replacing
        ``sys.stdin`` are honoured.
    chunk_size:
        Upper bound on the bytes pulled per stream read and on the
        length of a returned line.  Longer lines come back in pieces.
    """

    def __init__(self, stream: BinaryIO | None = None, chunk_size: int = CHUNK_SIZE) -> None:
        self._stream = stream
        self._chunk_size = chunk_size
        self._pending = bytearray()

    def _resolve_stream(self) -> BinaryIO:
        if self._stream is not None:
            return self._stream
        return sys.stdin.buffer

    def _pull(self) -> bytes:
        stream = self._resolve_stream()
        raw = getattr(stream, "raw", None)
        if raw is not None:
            return raw.read(self._chunk_size) or b""
        read1 = getattr(stream, "read1", None)
        if read1 is not None:
            return read1(self._chunk_size)
        return stream.read(self._chunk_size)

    def read_chunk(self) -> bytes:
        """Return the next line, terminator included; ``b""`` once input has ended.

        The final line is returned without a terminator when the stream
        ends without one.
        """
        while b"\n" not in self._pending and len(self._pending) < self._chunk_size:
            data = self._pull()
            if not data:
                break
            self._pending += data

        end = self._pending.find(b"\n")
        size = end + 1 if end != -1 else len(self._pending)
        size = min(size, self._chunk_size)
        line = bytes(self._pending[:size])
        del self._pending[:size]
        logger.debug("Read %d byte(s) from input", len(line))
        return line
