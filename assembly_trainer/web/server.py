"""
FastAPI web server — request/response surface for the assembly UI.

The browser renders icons, plays sounds and shows dialogs; every decision
comes from the endpoints here.  One module-level session serves the one
learner at the keyboard.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from assembly_trainer.assembly import (
    feedback_for, feedback_to_dict, result_to_dict, snap_to_dict, state_to_dict,
)
from assembly_trainer.catalog import (
    UnknownComponentError, catalog_to_dict, component_to_dict, load_catalog,
)
from assembly_trainer.geometry import Point
from assembly_trainer.session import AssemblySession, create_session


log = logging.getLogger(__name__)

# ── App ────────────────────────────────────────────────────────────

app = FastAPI(title="PC Assembly Trainer")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Session state (persists across requests) ───────────────────────

_session: AssemblySession | None = None


def get_session() -> AssemblySession:
    """Return the live session, creating it (and loading the catalog) on first use."""
    global _session
    if _session is None:
        _session = create_session()
        log.info("Started assembly session %s", _session.id)
    return _session


def set_session(session: AssemblySession | None) -> None:
    """Replace the live session (``None`` = recreate lazily)."""
    global _session
    _session = session


# ── Models ─────────────────────────────────────────────────────────

class DropRequest(BaseModel):
    component_id: str
    x: float
    y: float


# ── Routes ─────────────────────────────────────────────────────────

def _unknown(exc: UnknownComponentError) -> HTTPException:
    log.error("%s", exc)
    return HTTPException(404, str(exc))


@app.get("/api/catalog")
def get_catalog():
    """Components, their zones and home positions, in declaration order."""
    catalog = get_session().validator.catalog
    return {
        "stage_count": catalog.rules.stage_count,
        "prerequisite": catalog.prerequisite.id,
        "components": [component_to_dict(c) for c in catalog.components],
    }


@app.get("/api/state")
def get_state():
    session = get_session()
    return {"session_id": session.id, **state_to_dict(session.validator)}


@app.post("/api/snap")
def snap(req: DropRequest):
    """Drag preview: where the icon would land, without judging the drop."""
    validator = get_session().validator
    try:
        preview = validator.preview(req.component_id, Point(req.x, req.y))
    except UnknownComponentError as exc:
        raise _unknown(exc) from exc
    return snap_to_dict(preview)


@app.post("/api/validate")
def validate(req: DropRequest):
    """Judge a drop and return the result plus the cues the UI should play."""
    session = get_session()
    validator = session.validator
    try:
        result = validator.validate(req.component_id, Point(req.x, req.y))
    except UnknownComponentError as exc:
        raise _unknown(exc) from exc
    session.touch()
    # Always clear the flag; ineligible drops revert without setting it
    pending = validator.consume_revert()
    return {
        "result": result_to_dict(result),
        "feedback": feedback_to_dict(feedback_for(result, validator.catalog.rules)),
        "revert": result.reverted or pending,
    }


@app.post("/api/reset")
def reset_session():
    """Restart the exercise from stage 1."""
    session = get_session()
    session.restart()
    return {"status": "ok", "session_id": session.id}


@app.get("/api/catalog/check")
def check_catalog():
    """Reload catalog/*.json and report validation errors without swapping it in."""
    return catalog_to_dict(load_catalog())


def main(host: str = "127.0.0.1", port: int = 8000):
    import uvicorn
    uvicorn.run("assembly_trainer.web.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
