"""Infrastructure layer — the process's standard input.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from inputloop.infra.stdin_reader import CHUNK_SIZE, StdinReader

__all__: list[str] = [
    "CHUNK_SIZE",
    "StdinReader",
]
