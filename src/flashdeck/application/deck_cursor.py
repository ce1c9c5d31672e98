"""
Deck traversal over the items of a ReviewStore.

The cursor keeps an ordering of item ids plus a position within it. Moving
forward or backward skips items that are not eligible at the caller's ``now``;
running off the end of the ordering starts a new shuffled round.
"""

import logging
import random

from flashdeck.domain.models import DeckEntry

from .review_store import ReviewStore

logger = logging.getLogger(__name__)


class DeckCursor:
    """
    Ordering of item ids and a cursor index into it.

    The cursor never holds records itself. Entries are resolved through the
    store on every read, so a rating is visible immediately.
    """

    def __init__(self, store: ReviewStore, rng: random.Random | None = None):
        self._store = store
        self._rng = rng or random.Random()
        self._order: list[str] = []
        self._index = 0

    def __len__(self) -> int:
        return len(self._order)

    @property
    def store(self) -> ReviewStore:
        return self._store

    @property
    def position(self) -> int:
        return self._index

    @property
    def order(self) -> tuple[str, ...]:
        return tuple(self._order)

    def current(self) -> DeckEntry | None:
        """Entry under the cursor, or None when the ordering is empty."""
        if not self._order:
            return None
        return self._store.entry(self._order[self._index])

    def progress_fraction(self) -> float:
        """Cursor position normalized to [0, 1]; display only."""
        if not self._order:
            return 0.0
        return self._index / max(len(self._order) - 1, 1)

    def reshuffle(self, now: int) -> None:
        """Start a new round with the items eligible at ``now`` in random order."""
        order = [item.id for item in self._store.eligible(now)]
        self._rng.shuffle(order)
        self._order = order
        self._index = 0

        if order:
            logger.debug(f"Reshuffled deck at {now}: {len(order)} eligible items")
        else:
            logger.warning(f"Reshuffled deck at {now}: no eligible items")

    def advance(self, now: int) -> None:
        """
        Move to the next eligible entry after the cursor.

        Falls back to reshuffle(now) when nothing eligible remains ahead.
        """
        for index in range(self._index + 1, len(self._order)):
            if self._store.is_eligible(self._order[index], now):
                self._move(index)
                return

        logger.debug("No eligible item ahead; starting a new round")
        self.reshuffle(now)

    def retreat(self, now: int) -> None:
        """
        Move to the previous eligible entry, wrapping around from the end.

        The current position is never revisited; if no other entry is
        eligible the cursor stays where it is.
        """
        backward = range(self._index - 1, -1, -1)
        wrapped = range(len(self._order) - 1, self._index, -1)
        for candidates in (backward, wrapped):
            for index in candidates:
                if self._store.is_eligible(self._order[index], now):
                    self._move(index)
                    return

        logger.debug("No eligible item behind the cursor; staying put")

    def _move(self, index: int) -> None:
        logger.debug(f"Cursor {self._index} -> {index} of {len(self._order)}")
        self._index = index
