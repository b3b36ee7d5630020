"""HTTP API entrypoint for driving a hot-seat arena match from a local web UI."""

from typing import Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from arena import ActionType, ConfigError, MatchConfig, PreconditionError, Side
from infra.logger import configure_logging, get_logger
from infra.settings import Settings
from runtime.session import MatchSession

# Configure logging before the first request is handled.
settings = Settings.from_env()
configure_logging(settings.log_level, json=settings.log_json, logfile=settings.log_file)
log = get_logger(__name__)

app = FastAPI(title="Tactical Arena")
session: MatchSession | None = None


# Allow the browser-based arena page (served from file:// or other origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

SideName = Literal["A", "B"]


class ConfigPayload(BaseModel):
    """Typed match setup; omitted fields keep the standard values."""
    names: dict[SideName, str] | None = None
    health: int | None = None
    shields: dict[SideName, int] | None = None
    ammo: int | None = None
    max_ammo: int | None = None
    start_positions: dict[SideName, tuple[int, int]] | None = None


class StartRequest(BaseModel):
    config: ConfigPayload | None = None


class SideRequest(BaseModel):
    side: SideName


class SelectRequest(SideRequest):
    kind: Literal["MOVE", "ATTACK", "DEFEND", "RELOAD"]


class MoveTargetRequest(SideRequest):
    x: int = Field(ge=0)
    y: int = Field(ge=0)


def _require_session() -> MatchSession:
    if session is None:
        raise HTTPException(400, "No active match")
    return session


def _state(current: MatchSession) -> dict:
    match = current.match
    return {
        "match": match.to_dict(),
        "phase_text": match.phase_text(),
        "ready_to_resolve": current.ready_to_resolve,
        "affordances": {side.name: current.available_actions(side).to_dict() for side in Side},
        "valid_moves": {side.name: [list(p) for p in current.valid_moves(side)] for side in Side},
    }


@app.post("/start")
def start(request: StartRequest):
    global session
    try:
        config = MatchConfig.from_dict(request.config.model_dump(exclude_none=True)) if request.config else None
    except ConfigError as exc:
        raise HTTPException(422, str(exc)) from exc
    session = MatchSession(config)
    return {"success": True, **_state(session)}


@app.post("/select")
def select(request: SelectRequest):
    current = _require_session()
    validation = current.select_action(Side[request.side], ActionType[request.kind])
    return {"applied": validation.valid, "error_code": validation.error_code,
            "message": validation.message, **_state(current)}


@app.post("/move-target")
def move_target(request: MoveTargetRequest):
    current = _require_session()
    validation = current.pick_move_target(Side[request.side], (request.x, request.y))
    return {"applied": validation.valid, "error_code": validation.error_code,
            "message": validation.message, **_state(current)}


@app.post("/confirm")
def confirm(request: SideRequest):
    current = _require_session()
    both = current.confirm(Side[request.side])
    return {"both_confirmed": both, **_state(current)}


@app.post("/cancel")
def cancel(request: SideRequest):
    current = _require_session()
    validation = current.cancel(Side[request.side])
    return {"applied": validation.valid, "error_code": validation.error_code,
            "message": validation.message, **_state(current)}


@app.post("/resolve")
def resolve():
    current = _require_session()
    try:
        return current.resolve().to_dict()
    except PreconditionError as exc:
        raise HTTPException(409, str(exc)) from exc


@app.post("/lobby")
def lobby():
    """Leave the match; the next /start begins from the initial state."""
    global session
    if session is None:
        raise HTTPException(400, "No active match")
    log.info("Leaving match on turn %d", session.turn)
    session = None
    return {"success": True}


@app.get("/state")
def state():
    return _state(_require_session())


@app.get("/status")
def status():
    if session is None:
        return {"active": False}
    return {"active": True, "turn": session.turn, "done": session.done,
            "phase_text": session.match.phase_text()}

