"""Domain models for inputloop.

Prompt records are **frozen** dataclasses: the history keeps exactly one
of them and replaces it wholesale, never mutates it.  The configuration
bags (:class:`Preferences`, :class:`PrinterConfig`) are plain dataclasses
with defaults for every field so callers only spell out what they change.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class PromptKind(Enum):
    """The two kinds of prompt an :class:`InputLoop` can show."""

    CHOOSE = "choose"
    QUESTION = "question"


# ---------------------------------------------------------------------------
# Prompt records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ChooseRecord:
    """The last menu shown, kept so it can be replayed."""

    options: tuple[str, ...]
    """Menu options in display order."""

    last_option_close: bool = False
    """Whether picking the last option closes the loop."""

    @property
    def kind(self) -> PromptKind:
        return PromptKind.CHOOSE


@dataclass(frozen=True, slots=True)
class QuestionRecord:
    """The last free-text question asked, kept so it can be replayed."""

    text: str
    """Question text as printed."""

    include_newline: bool = True
    """Whether a line break followed the question text."""

    @property
    def kind(self) -> PromptKind:
        return PromptKind.QUESTION


PromptRecord = ChooseRecord | QuestionRecord


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEFAULT_INDEX_STYLE: tuple[str, str] = ("[", "]")
DEFAULT_INLINE_SPACING: int = 2


@dataclass(slots=True)
class Preferences:
    """Rendering and answering options for a single ``choose`` call.

    Every field is optional.  Missing or malformed values fall back to
    defaults instead of being rejected.
    """

    choice: str | int | None = None
    """Auto-answer used instead of reading standard input."""

    last_option_close: bool = False
    """Close the loop when the last option is picked."""

    display_inline: bool = False
    """Render all options on one line instead of one per line."""

    inline_spacing: int | None = None
    """Spaces between inline options when no separator is given."""

    inline_separator: str | None = None
    """Separator between inline options, padded with one space each side."""

    index_style: Sequence[str] | None = None
    """Left and right bracket around each index, e.g. ``("(", ")")``."""

    divider_top: bool = False
    divider_bottom: bool = False
    divider_padding: bool = False
    """Blank line between the dividers and the options."""

    divider_char: str | None = None
    divider_length: int | None = None


@dataclass(slots=True)
class PrinterConfig:
    """Output defaults forwarded from ``InputLoop`` to its printer."""

    divider_length: int = 30
    divider_char: str = "-"
