"""Process exit codes returned by the ``inputloop`` command.

Shell scripts branch on these, so each one is a named constant that
tests pin down.
"""

from __future__ import annotations

SUCCESS: int = 0
"""An answer was read (or supplied) and printed."""

GENERAL_ERROR: int = 1
"""An InputLoopError ended the prompt, e.g. input closed or no option matched."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C while waiting for an answer (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""Anything else escaped; the message asks the user to report it."""
