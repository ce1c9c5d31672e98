"""
Deck file loading.

A deck file is YAML or JSON and holds either a list of cards or a mapping
with a ``cards`` list. Each card needs an ``id``; every other key is kept
as opaque display content.
"""

import json
import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from flashdeck.domain.errors import DeckLoadError
from flashdeck.domain.models import Item

logger = logging.getLogger(__name__)

DEFAULT_DECK = "look_idioms.yaml"
YAML_SUFFIXES = {".yaml", ".yml"}


@dataclass(frozen=True)
class Deck:
    """Items loaded from a deck file."""

    title: str
    items: tuple[Item, ...]
    source: str


def default_deck_path() -> Path:
    """Path of the sample deck bundled with the package."""
    return Path(str(resources.files("flashdeck.application").joinpath("data", DEFAULT_DECK)))


def load_deck(path: Path | None = None) -> Deck:
    """
    Load a deck file, falling back to the bundled sample deck.

    Raises:
        DeckLoadError: If the file is missing, unparsable, or has bad cards.
    """
    path = path or default_deck_path()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DeckLoadError(f"Cannot read deck {path}: {e}") from e

    data = parse_deck_text(text, path.suffix.lower(), source=str(path))
    deck = build_deck(data, default_title=path.stem, source=str(path))
    logger.info(f"Loaded {len(deck.items)} cards from {path}")
    return deck


def parse_deck_text(text: str, suffix: str, source: str = "<string>") -> Any:
    try:
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(text)
        if suffix == ".json":
            return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise DeckLoadError(f"Invalid deck file {source}: {e}") from e
    raise DeckLoadError(f"Unsupported deck format {suffix!r} for {source}")


def build_deck(data: Any, default_title: str = "Deck", source: str = "<string>") -> Deck:
    """Turn parsed deck data into a Deck of Items."""
    title = default_title
    if isinstance(data, dict):
        title = str(data.get("title") or default_title)
        cards = data.get("cards")
    else:
        cards = data

    if not isinstance(cards, list):
        raise DeckLoadError(f"Deck {source} must contain a list of cards")

    items: list[Item] = []
    seen: set[str] = set()
    for position, card in enumerate(cards, start=1):
        if not isinstance(card, dict):
            raise DeckLoadError(f"Card #{position} in {source} is not a mapping")
        if card.get("id") is None:
            raise DeckLoadError(f"Card #{position} in {source} has no id")

        item_id = str(card["id"])
        if item_id in seen:
            raise DeckLoadError(f"Duplicate card id {item_id!r} in {source}")
        seen.add(item_id)

        content = {k: v for k, v in card.items() if k != "id"}
        items.append(Item(id=item_id, content=content))

    return Deck(title=title, items=tuple(items), source=source)
