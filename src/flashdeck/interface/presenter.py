"""Turn engine state into text and JSON-friendly payloads."""

from typing import Any

from flashdeck.application import engine
from flashdeck.domain.constants import EMPTY_DECK_MESSAGE
from flashdeck.domain.models import DeckEntry

BAR_WIDTH = 20


def entry_payload(entry: DeckEntry) -> dict[str, Any]:
    record = entry.record
    return {
        "id": entry.id,
        "content": dict(entry.item.content),
        "review": {
            "last_reviewed_at": record.last_reviewed_at,
            "next_eligible_at": record.next_eligible_at,
            "last_difficulty": record.last_difficulty.value if record.last_difficulty else None,
        },
    }


def state_payload(state: engine.EngineState) -> dict[str, Any]:
    """Current card plus deck position, as served to front ends."""
    entry = engine.get_current(state)
    return {
        "card": entry_payload(entry) if entry else None,
        "progress": engine.progress(state),
        "position": state.cursor.position,
        "deck_size": len(state.cursor),
        "message": None if entry else EMPTY_DECK_MESSAGE,
    }


def progress_bar(percent: float, width: int = BAR_WIDTH) -> str:
    filled = round(width * percent / 100)
    return f"[{'#' * filled}{'-' * (width - filled)}] {percent:3.0f}%"


def render_card(state: engine.EngineState, show_meaning: bool = False) -> str:
    """Plain-text rendering of the current card for the terminal."""
    entry = engine.get_current(state)
    if entry is None:
        return EMPTY_DECK_MESSAGE

    item = entry.item
    lines = [
        progress_bar(engine.progress(state)),
        "",
        f"  {item.get('phrase', item.id)}",
    ]
    if item.get("translation"):
        lines.append(f"  ({item.get('translation')})")

    if show_meaning:
        if item.get("meaning"):
            lines += ["", f"  Meaning: {item.get('meaning')}"]
        examples = item.get("examples") or []
        if examples:
            lines += ["", "  Examples:"]
            for example in examples:
                if isinstance(example, dict):
                    lines.append(f"    - {example.get('topic', '')}: {example.get('example', '')}")
                else:
                    lines.append(f"    - {example}")
    return "\n".join(lines)
