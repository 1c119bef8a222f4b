"""Core layer — prompt records, history and menu formatting.

Rules
-----
* No ``print()`` calls.
* No terminal or stream I/O.
* No imports from ``cli`` or ``infra``.
"""

from inputloop.core.history import History
from inputloop.core.models import (
    ChooseRecord,
    Preferences,
    PrinterConfig,
    PromptKind,
    PromptRecord,
    QuestionRecord,
)
from inputloop.core.protocols import InputSource, OutputSink

__all__: list[str] = [
    "ChooseRecord",
    "History",
    "InputSource",
    "OutputSink",
    "Preferences",
    "PrinterConfig",
    "PromptKind",
    "PromptRecord",
    "QuestionRecord",
]
