"""
Review store: authoritative review state per item.

Holds every item of the session together with its ReviewRecord in a single
mapping keyed by item id. Never reads a clock; every temporal decision is
parameterized by the caller's ``now`` (epoch milliseconds).
"""

import logging
from collections.abc import Iterable

from flashdeck.domain.errors import DuplicateItem, UnknownItem
from flashdeck.domain.models import DeckEntry, Difficulty, Item, ReviewRecord, interval

logger = logging.getLogger(__name__)


def is_eligible(record: ReviewRecord, now: int) -> bool:
    """An item is due once its next eligible time has been reached."""
    return record.next_eligible_at <= now


class ReviewStore:
    """
    Owns items and their review records for the lifetime of a session.

    Records are created once, in the "never reviewed" state, and are never
    deleted or copied. Views such as DeckCursor resolve them by id.
    """

    def __init__(self, items: Iterable[Item]):
        self._items: dict[str, Item] = {}
        self._records: dict[str, ReviewRecord] = {}
        for item in items:
            if item.id in self._items:
                raise DuplicateItem(item.id)
            self._items[item.id] = item
            self._records[item.id] = ReviewRecord()
        logger.debug(f"Review store initialized with {len(self._items)} items")

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def get(self, item_id: str) -> Item:
        try:
            return self._items[item_id]
        except KeyError:
            raise UnknownItem(item_id) from None

    def record(self, item_id: str) -> ReviewRecord:
        try:
            return self._records[item_id]
        except KeyError:
            raise UnknownItem(item_id) from None

    def entry(self, item_id: str) -> DeckEntry:
        return DeckEntry(item=self.get(item_id), record=self.record(item_id))

    def all(self) -> list[Item]:
        """All items in insertion order."""
        return list(self._items.values())

    def eligible(self, now: int) -> list[Item]:
        """Items due at ``now``, in insertion order."""
        return [item for item in self._items.values() if is_eligible(self._records[item.id], now)]

    def is_eligible(self, item_id: str, now: int) -> bool:
        return is_eligible(self.record(item_id), now)

    def rate(self, item_id: str, difficulty: Difficulty | str, now: int) -> ReviewRecord:
        """
        Record a rating and schedule the item's next eligible time.

        Args:
            item_id: Id of the rated item.
            difficulty: Rating; strings are parsed via Difficulty.parse.
            now: Rating time in epoch milliseconds.

        Returns:
            The updated (shared) record.

        Raises:
            UnknownItem: If the id is not in the store.
            InvalidDifficulty: If the rating string is not recognised.
        """
        record = self.record(item_id)
        difficulty = Difficulty.parse(difficulty)

        record.last_reviewed_at = now
        record.next_eligible_at = now + interval(difficulty)
        record.last_difficulty = difficulty

        logger.debug(
            f"Rated {item_id} as {difficulty.value} at {now}; "
            f"next eligible at {record.next_eligible_at}"
        )
        return record

    def due_count(self, now: int) -> int:
        return sum(1 for record in self._records.values() if is_eligible(record, now))

    def reviewed_count(self) -> int:
        return sum(1 for record in self._records.values() if record.reviewed)
