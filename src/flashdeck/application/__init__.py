# Application Package
from .deck_cursor import DeckCursor
from .engine import EngineState
from .review_store import ReviewStore, is_eligible

__all__ = ["DeckCursor", "EngineState", "ReviewStore", "is_eligible"]
