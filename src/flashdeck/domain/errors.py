"""Domain errors raised by the scheduling engine and its loaders."""


class FlashdeckError(Exception):
    """Base class for every error raised by flashdeck."""


class UnknownItem(FlashdeckError, LookupError):
    """A rating referenced an item id that is not in the review store."""

    def __init__(self, item_id: str):
        super().__init__(f"Unknown item: {item_id!r}")
        self.item_id = item_id


class DuplicateItem(FlashdeckError, ValueError):
    """Two items passed to the engine share the same id."""

    def __init__(self, item_id: str):
        super().__init__(f"Duplicate item id: {item_id!r}")
        self.item_id = item_id


class InvalidDifficulty(FlashdeckError, ValueError):
    """A rating string did not name a known difficulty."""


class DeckLoadError(FlashdeckError):
    """A deck file could not be read or is malformed."""
