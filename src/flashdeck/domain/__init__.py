# Domain Package
from .errors import (
    DeckLoadError,
    DuplicateItem,
    FlashdeckError,
    InvalidDifficulty,
    UnknownItem,
)
from .models import INTERVALS_MS, DeckEntry, Difficulty, Item, ReviewRecord, interval

__all__ = [
    "DeckEntry",
    "DeckLoadError",
    "Difficulty",
    "DuplicateItem",
    "FlashdeckError",
    "INTERVALS_MS",
    "InvalidDifficulty",
    "Item",
    "ReviewRecord",
    "UnknownItem",
    "interval",
]
