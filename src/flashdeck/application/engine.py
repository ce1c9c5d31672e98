"""
Engine facade used by the presentation layers.

Composes ReviewStore and DeckCursor into a single session state and exposes
the operations a front end needs: read the current card, rate it, navigate,
reshuffle, and report progress. Every call takes ``now`` explicitly.
"""

import logging
import random
from collections.abc import Iterable
from dataclasses import dataclass

from flashdeck.domain.constants import PROGRESS_SCALE
from flashdeck.domain.models import DeckEntry, Difficulty, Item

from .deck_cursor import DeckCursor
from .review_store import ReviewStore

logger = logging.getLogger(__name__)


@dataclass
class EngineState:
    """Single-session scheduler state."""

    store: ReviewStore
    cursor: DeckCursor


def initialize(items: Iterable[Item], rng: random.Random | None = None) -> EngineState:
    """
    Build review records for ``items`` and an empty deck.

    The deck stays empty until the first reshuffle.
    """
    store = ReviewStore(items)
    cursor = DeckCursor(store, rng=rng)
    logger.info(f"Engine initialized with {len(store)} items")
    return EngineState(store=store, cursor=cursor)


def get_current(state: EngineState) -> DeckEntry | None:
    return state.cursor.current()


def rate(state: EngineState, difficulty: Difficulty | str, now: int) -> EngineState:
    """
    Rate the current item, then advance with the same ``now``.

    The just-rated item is no longer eligible, so the forward scan skips it.
    The rating is validated first. With an empty deck there is nothing to
    rate and the state is unchanged.
    """
    difficulty = Difficulty.parse(difficulty)
    entry = state.cursor.current()
    if entry is None:
        logger.debug("Rating ignored: deck is empty")
        return state

    state.store.rate(entry.id, difficulty, now)
    state.cursor.advance(now)
    return state


def advance(state: EngineState, now: int) -> EngineState:
    state.cursor.advance(now)
    return state


def retreat(state: EngineState, now: int) -> EngineState:
    state.cursor.retreat(now)
    return state


def reshuffle(state: EngineState, now: int) -> EngineState:
    state.cursor.reshuffle(now)
    return state


def progress(state: EngineState) -> float:
    """Cursor position as a percentage in [0, 100]."""
    return state.cursor.progress_fraction() * PROGRESS_SCALE
