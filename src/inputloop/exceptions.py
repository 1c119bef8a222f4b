"""Custom exception hierarchy for inputloop.

Every error the library raises on purpose inherits from
:class:`InputLoopError`, so callers (and the CLI error boundary) can
catch one type and still show a clean message.

Hierarchy
---------
InputLoopError
├── EndOfInputError
├── NothingToRepeatError
├── InvalidPromptError
└── EnvironmentError
"""

from __future__ import annotations


class InputLoopError(Exception):
    """Base exception for all inputloop errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Reading ---------------------------------------------------------------

class EndOfInputError(InputLoopError):
    """Raised when a read yields no data because standard input closed."""


# --- Prompts ---------------------------------------------------------------

class NothingToRepeatError(InputLoopError):
    """Raised by ``repeat()`` when no prompt has been recorded yet."""


class InvalidPromptError(InputLoopError):
    """Raised when a prompt cannot be shown or answered as requested."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(InputLoopError):
    """Raised when a required runtime dependency is not available."""
