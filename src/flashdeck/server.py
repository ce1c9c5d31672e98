import logging
import random
import time
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from flashdeck.application import engine
from flashdeck.application.config import resolve_config
from flashdeck.application.deck_loader import load_deck
from flashdeck.clock import now_ms
from flashdeck.consts import VERSION
from flashdeck.domain.errors import DeckLoadError, InvalidDifficulty
from flashdeck.interface.presenter import state_payload

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("flashdeck.server")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"flashdeck server v{VERSION} starting up...")
    app.state.session = None
    yield
    # Shutdown
    logger.info("flashdeck server shutting down...")


app = FastAPI(
    title="flashdeck Server",
    description="Single-session study server for flashdeck front ends.",
    version=VERSION,
    lifespan=lifespan,
)


class HealthResponse(BaseModel):
    status: str
    version: str
    uptime_seconds: float


start_time = time.time()


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Simple health check to verify server is reachable.
    """
    return HealthResponse(status="ok", version=VERSION, uptime_seconds=time.time() - start_time)


@app.get("/version")
async def get_version():
    return {"version": VERSION}


class SessionRequest(BaseModel):
    # If None, use defaults/config file.
    deck_path: str | None = None
    seed: int | None = None
    now: int | None = None


class TimedRequest(BaseModel):
    # Epoch ms; the server clock is used when omitted.
    now: int | None = None


class RateRequest(TimedRequest):
    difficulty: str


def _now(req: TimedRequest | SessionRequest | None) -> int:
    if req is not None and req.now is not None:
        return req.now
    return now_ms()


def _session(request: Request) -> engine.EngineState:
    state = getattr(request.app.state, "session", None)
    if state is None:
        raise HTTPException(status_code=409, detail="No active session. POST /session first.")
    return state


@app.post("/session")
def start_session(request: Request, req: SessionRequest | None = None) -> dict[str, Any]:
    """
    Start (or restart) the study session and deal the first round.

    ``deck_path`` is read from the server's own filesystem with the
    server process's permissions. The server is meant for a single local
    user; keep it bound to localhost (the default host).
    """
    req = req or SessionRequest()
    config = resolve_config({"deck_path": req.deck_path, "seed": req.seed})

    try:
        deck = load_deck(config.deck_path)
    except DeckLoadError as e:
        logger.error(f"Session start failed: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e

    rng = random.Random(config.seed) if config.seed is not None else None
    state = engine.initialize(deck.items, rng=rng)
    engine.reshuffle(state, _now(req))
    request.app.state.session = state

    logger.info(f"Session started with deck '{deck.title}' ({len(deck.items)} cards)")
    return {"title": deck.title, **state_payload(state)}


@app.get("/session/current")
def current_card(request: Request) -> dict[str, Any]:
    return state_payload(_session(request))


@app.post("/session/rate")
def rate_card(request: Request, req: RateRequest) -> dict[str, Any]:
    """Rate the current card and move to the next eligible one."""
    state = _session(request)
    try:
        engine.rate(state, req.difficulty, _now(req))
    except InvalidDifficulty as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return state_payload(state)


@app.post("/session/advance")
def advance(request: Request, req: TimedRequest | None = None) -> dict[str, Any]:
    state = _session(request)
    engine.advance(state, _now(req))
    return state_payload(state)


@app.post("/session/retreat")
def retreat(request: Request, req: TimedRequest | None = None) -> dict[str, Any]:
    state = _session(request)
    engine.retreat(state, _now(req))
    return state_payload(state)


@app.post("/session/reshuffle")
def reshuffle(request: Request, req: TimedRequest | None = None) -> dict[str, Any]:
    state = _session(request)
    engine.reshuffle(state, _now(req))
    return state_payload(state)
