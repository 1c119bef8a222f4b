"""Pure helpers for rendering choice menus and normalising answers.

Nothing here performs I/O; :class:`~inputloop.cli.input_loop.InputLoop`
feeds the resulting strings to its printer.
"""

from __future__ import annotations

from collections.abc import Sequence

from inputloop.core.models import (
    DEFAULT_INDEX_STYLE,
    DEFAULT_INLINE_SPACING,
    Preferences,
)


# ---------------------------------------------------------------------------
# Answer normalisation
# ---------------------------------------------------------------------------

def clean_input(value: str | None) -> str:
    """Strip trailing carriage-return and line-feed characters."""
    if value is None:
        return ""
    return value.rstrip("\r\n")


def coerce_answer(value: str | int) -> str:
    """Turn an auto-supplied answer into the string a user would type."""
    return clean_input(str(value))


def selection_mask(option_count: int, answer: str) -> list[bool]:
    """Return one flag per option, true only where the index equals *answer*."""
    return [answer == str(index) for index in range(option_count)]


def closes_loop(option_count: int, answer: str) -> bool:
    """Whether *answer* picks the last of *option_count* options."""
    return answer == str(option_count - 1)


# ---------------------------------------------------------------------------
# Menu layout
# ---------------------------------------------------------------------------

def resolve_index_style(index_style: Sequence[str] | None) -> tuple[str, str]:
    """Return the ``(left, right)`` bracket pair, defaulting to ``[ ]``."""
    if index_style is None or len(index_style) < 2:
        return DEFAULT_INDEX_STYLE
    return index_style[0], index_style[1]


def build_separator(preferences: Preferences) -> str:
    """Return the text placed after each option in inline layout."""
    if preferences.inline_separator:
        return f" {preferences.inline_separator} "
    return " " * (preferences.inline_spacing or DEFAULT_INLINE_SPACING)


def format_option(index: int, option: str, style: tuple[str, str]) -> str:
    """Build a single menu line, e.g. ``"[0] Start"``."""
    left, right = style
    return f"{left}{index}{right} {option}"
