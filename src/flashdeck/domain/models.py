"""
Domain models for review scheduling.

These are pure data structures with no I/O or external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from .constants import (
    DIFFICULT_INTERVAL_MS,
    EASY_INTERVAL_MS,
    GOOD_INTERVAL_MS,
    NEVER,
    REPEAT_INTERVAL_MS,
)
from .errors import InvalidDifficulty


class Difficulty(str, Enum):
    """Rating buttons offered after an item is shown."""

    EASY = "easy"
    GOOD = "good"
    DIFFICULT = "difficult"
    REPEAT = "repeat"

    @classmethod
    def parse(cls, value: "Difficulty | str") -> "Difficulty":
        """Accept an enum member, its value, or the 'hard' button label."""
        if isinstance(value, Difficulty):
            return value
        key = str(value).strip().lower()
        if key == "hard":
            return cls.DIFFICULT
        try:
            return cls(key)
        except ValueError:
            raise InvalidDifficulty(
                f"Unknown difficulty {value!r}; expected one of "
                f"{', '.join(d.value for d in cls)} (or 'hard')"
            ) from None


INTERVALS_MS: Mapping[Difficulty, int] = MappingProxyType(
    {
        Difficulty.EASY: EASY_INTERVAL_MS,
        Difficulty.GOOD: GOOD_INTERVAL_MS,
        Difficulty.DIFFICULT: DIFFICULT_INTERVAL_MS,
        Difficulty.REPEAT: REPEAT_INTERVAL_MS,
    }
)


def interval(difficulty: Difficulty | str) -> int:
    """Delay in milliseconds added to the rating time."""
    return INTERVALS_MS[Difficulty.parse(difficulty)]


@dataclass(frozen=True)
class Item:
    """
    A study item supplied by the surrounding application.

    Attributes:
        id: Unique, stable identifier.
        content: Opaque display payload (phrase, meaning, translation, ...).
    """

    id: str
    content: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "content", MappingProxyType(dict(self.content)))

    def get(self, key: str, default: Any = None) -> Any:
        return self.content.get(key, default)


@dataclass
class ReviewRecord:
    """
    Review state for one item. Owned by the ReviewStore.

    Attributes:
        last_reviewed_at: Epoch ms of the last rating, NEVER if unrated.
        next_eligible_at: Epoch ms from which the item is due again.
        last_difficulty: Rating given at last_reviewed_at.
    """

    last_reviewed_at: int = NEVER
    next_eligible_at: int = NEVER
    last_difficulty: Difficulty | None = None

    @property
    def reviewed(self) -> bool:
        return self.last_difficulty is not None


@dataclass(frozen=True)
class DeckEntry:
    """An item paired with its live review record."""

    item: Item
    record: ReviewRecord

    @property
    def id(self) -> str:
        return self.item.id
