"""flashdeck CLI: study loop, deck inspection, config, and server commands."""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from flashdeck.application import engine
from flashdeck.application.config import resolve_config
from flashdeck.clock import now_ms
from flashdeck.domain.models import INTERVALS_MS
from flashdeck.interface._common import (
    _load_deck_or_exit,
    _resolve_with_overrides,
    _start_session,
)
from flashdeck.interface.presenter import render_card

# ---------------------------------------------------------------------------
# Root app
# ---------------------------------------------------------------------------

app = typer.Typer(
    help="flashdeck: Spaced review flashcards in your terminal.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Subgroups
# ---------------------------------------------------------------------------

deck_app = typer.Typer(help="Inspect deck files.", no_args_is_help=True)
app.add_typer(deck_app, name="deck")

config_app = typer.Typer(help="Manage flashdeck configuration.", no_args_is_help=True)
app.add_typer(config_app, name="config")

RATING_KEYS = {
    "e": "easy",
    "g": "good",
    "h": "difficult",
    "r": "repeat",
}

HELP_LINE = (
    "[n]ext  [p]revious  [m]eaning  [s]huffle  "
    "rate: [e]asy [g]ood [h]ard [r]epeat  [q]uit"
)


# ---------------------------------------------------------------------------
# Global callback
# ---------------------------------------------------------------------------


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity. Repeat for more detail."
        ),
    ] = 1,
):
    """Global settings for flashdeck."""
    ctx.ensure_object(dict)
    ctx.obj["verbose_bonus"] = verbose


# ---------------------------------------------------------------------------
# Root commands
# ---------------------------------------------------------------------------


@app.command()
def study(
    ctx: typer.Context,
    deck: Annotated[
        Path | None,
        typer.Argument(help="Deck file (YAML or JSON). Defaults to config, then the sample deck."),
    ] = None,
    seed: Annotated[int | None, typer.Option(help="Seed for reproducible shuffles.")] = None,
    show_meaning: Annotated[
        bool | None,
        typer.Option("--show-meaning/--hide-meaning", help="Reveal meanings by default."),
    ] = None,
):
    """[bold green]Study[/bold green] a deck interactively."""
    config = _resolve_with_overrides(
        deck_path=deck,
        seed=seed,
        show_meaning=show_meaning,
        verbose=ctx.obj.get("verbose_bonus", 1) if ctx.obj else 1,
    )
    loaded, state = _start_session(config, now_ms())
    reveal = config.show_meaning

    typer.secho(loaded.title, bold=True)
    typer.echo(HELP_LINE)

    while True:
        typer.echo("")
        typer.echo(render_card(state, show_meaning=reveal))
        action = typer.prompt(">", default="n", show_default=False).strip().lower()

        if action in ("q", "quit"):
            break

        now = now_ms()
        if action in ("n", "next"):
            engine.advance(state, now)
        elif action in ("p", "prev", "previous"):
            engine.retreat(state, now)
        elif action in ("s", "shuffle"):
            engine.reshuffle(state, now)
        elif action in ("m", "meaning", ""):
            reveal = not reveal
            continue
        elif action in RATING_KEYS:
            engine.rate(state, RATING_KEYS[action], now)
        else:
            typer.secho(f"Unknown action {action!r}. {HELP_LINE}", fg="yellow")
            continue
        reveal = config.show_meaning

    reviewed = state.store.reviewed_count()
    typer.echo(f"Reviewed {reviewed} of {len(state.store)} cards this session.")


@app.command()
def intervals(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
):
    """Show the review interval for each rating."""
    table = {difficulty.value: ms for difficulty, ms in INTERVALS_MS.items()}
    if json_output:
        typer.echo(json.dumps(table, indent=2))
        return
    for name, ms in table.items():
        typer.echo(f"{name:<10} {ms:>10} ms  ({_humanize_ms(ms)})")


@app.command()
def serve(
    ctx: typer.Context,
    host: Annotated[str | None, typer.Option(help="Host to bind the server to.")] = None,
    port: Annotated[int | None, typer.Option(help="Port to bind the server to.")] = None,
    reload: Annotated[bool, typer.Option(help="Enable auto-reload.")] = False,
):
    """Run the HTTP study server for browser front ends."""
    import uvicorn

    config = _resolve_with_overrides(
        host=host,
        port=port,
        verbose=ctx.obj.get("verbose_bonus", 1) if ctx.obj else 1,
    )
    uvicorn.run("flashdeck.server:app", host=config.host, port=config.port, reload=reload)


# ---------------------------------------------------------------------------
# Deck subgroup
# ---------------------------------------------------------------------------


@deck_app.command("show")
def deck_show(
    ctx: typer.Context,
    path: Annotated[Path | None, typer.Argument(help="Deck file. Defaults to config.")] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
):
    """List the cards in a deck file."""
    config = _resolve_with_overrides(
        deck_path=path,
        verbose=ctx.obj.get("verbose_bonus", 1) if ctx.obj else 1,
    )
    deck = _load_deck_or_exit(config.deck_path)

    if json_output:
        typer.echo(
            json.dumps(
                {
                    "title": deck.title,
                    "source": deck.source,
                    "cards": [{"id": item.id, **dict(item.content)} for item in deck.items],
                },
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    typer.secho(f"{deck.title}  ({len(deck.items)} cards)", bold=True)
    for item in deck.items:
        typer.echo(f"  {item.id:>4}  {item.get('phrase', '')}")


# ---------------------------------------------------------------------------
# Config subgroup
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show():
    """Display final resolved configuration."""
    config = resolve_config()
    d = {k: str(v) if isinstance(v, Path) else v for k, v in config.model_dump().items()}
    typer.echo(json.dumps(d, indent=2))


def _humanize_ms(ms: int) -> str:
    minutes = ms // 60_000
    if minutes < 60:
        return f"{minutes} minutes"
    days = minutes // (60 * 24)
    if days:
        return f"{days} day" + ("s" if days != 1 else "")
    return f"{minutes // 60} hours"


if __name__ == "__main__":  # pragma: no cover
    app()
