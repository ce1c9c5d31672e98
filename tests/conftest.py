import random

import pytest

from flashdeck.domain.models import Item


class IdentityRandom(random.Random):
    """Random source whose shuffle keeps insertion order."""

    def shuffle(self, x):
        pass


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at a temp dir and drop FLASHDECK_* env so config is predictable."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in ("DECK_PATH", "SEED", "SHOW_MEANING", "VERBOSE", "HOST", "PORT"):
        monkeypatch.delenv(f"FLASHDECK_{key}", raising=False)
    return home


@pytest.fixture
def items():
    return [
        Item(id="a", content={"phrase": "Look up", "meaning": "To search"}),
        Item(id="b", content={"phrase": "Look after", "meaning": "To take care of"}),
        Item(id="c", content={"phrase": "Look into", "meaning": "To investigate"}),
    ]


@pytest.fixture
def ordered_rng():
    return IdentityRandom()


@pytest.fixture
def deck_file(tmp_path):
    path = tmp_path / "deck.yaml"
    path.write_text(
        """title: Test Deck
cards:
  - id: 1
    phrase: Look up
    translation: Cercare
    meaning: To search for information
    examples:
      - topic: Research
        example: Look up the word.
  - id: 2
    phrase: Look after
    translation: Prendersi cura di
    meaning: To take care of
""",
        encoding="utf-8",
    )
    return path
