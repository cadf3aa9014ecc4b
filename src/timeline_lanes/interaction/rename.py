"""Inline rename editing state."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

COMMIT_KEYS = frozenset({"Enter", "Return"})
CANCEL_KEYS = frozenset({"Escape"})


@dataclass(slots=True)
class EditSession:
    item_id: int
    buffer: str


class InlineRenameEditor:
    def __init__(self) -> None:
        self.session: EditSession | None = None

    @property
    def is_editing(self) -> bool:
        return self.session is not None

    def editing_item_id(self) -> int | None:
        return None if self.session is None else self.session.item_id

    def begin(self, item_id: int, current_name: str) -> EditSession:
        # An open session is discarded uncommitted.
        if self.session is not None:
            logger.debug("Discarded open rename of item %d", self.session.item_id)
        self.session = EditSession(item_id=item_id, buffer=current_name)
        return self.session

    def update(self, text: str) -> None:
        if self.session is not None:
            self.session.buffer = text

    def commit(self) -> EditSession | None:
        session, self.session = self.session, None
        return session

    def cancel(self) -> EditSession | None:
        session, self.session = self.session, None
        return session
