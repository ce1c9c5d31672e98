"""flashdeck: spaced review scheduling and deck traversal for flashcards."""

from flashdeck.consts import VERSION

__version__ = VERSION
