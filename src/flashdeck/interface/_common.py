"""Shared helpers for the CLI command modules."""

import logging
import random
from pathlib import Path
from typing import Any

import typer

from flashdeck.application import engine
from flashdeck.application.config import AppConfig, resolve_config
from flashdeck.application.deck_loader import Deck, load_deck
from flashdeck.domain.errors import DeckLoadError


def _resolve_with_overrides(**overrides: Any) -> AppConfig:
    """Resolve config with CLI overrides and apply its verbosity to logging."""
    config = resolve_config(overrides)
    if config.verbose >= 2:
        logging.getLogger().setLevel(logging.DEBUG)
    return config


def _load_deck_or_exit(path: Path | None) -> Deck:
    try:
        return load_deck(path)
    except DeckLoadError as e:
        typer.secho(f"Error: {e}", fg="red", err=True)
        raise typer.Exit(1) from None


def _start_session(config: AppConfig, now: int) -> tuple[Deck, engine.EngineState]:
    """Load the configured deck and deal the first round."""
    deck = _load_deck_or_exit(config.deck_path)
    rng = random.Random(config.seed) if config.seed is not None else None
    state = engine.initialize(deck.items, rng=rng)
    engine.reshuffle(state, now)
    return deck, state
