"""Single-slot prompt history."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from inputloop.core.models import ChooseRecord, PromptKind, PromptRecord, QuestionRecord

logger = logging.getLogger(__name__)


class History:
    """Remembers the most recent prompt so it can be replayed.

    Only one record is kept; each :meth:`save` overwrites the previous one.
    """

    def __init__(self) -> None:
        self._record: PromptRecord | None = None

    def save(
        self,
        argument: str | Sequence[str],
        kind: PromptKind,
        last_option_close: bool = False,
        include_newline: bool = True,
    ) -> None:
        """Overwrite the stored record.

        *argument* is the option list for :attr:`PromptKind.CHOOSE` and
        the question text for :attr:`PromptKind.QUESTION`.
        """
        if kind is PromptKind.CHOOSE:
            self._record = ChooseRecord(
                options=tuple(argument),
                last_option_close=last_option_close,
            )
        else:
            self._record = QuestionRecord(
                text=str(argument),
                include_newline=include_newline,
            )
        logger.debug("Recorded %s prompt", kind.value)

    def retrieve(self) -> PromptRecord | None:
        """Return the stored record, or ``None`` if nothing was saved."""
        return self._record

    def clear(self) -> None:
        """Forget the stored record, so the next ``retrieve`` returns ``None``."""
        self._record = None
