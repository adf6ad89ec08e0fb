"""Assembly serialization — results, feedback and state as JSON-safe dicts."""

from __future__ import annotations

from assembly_trainer.geometry import Point

from .feedback import Feedback
from .models import PlacementResult
from .snap import SnapResult
from .validator import AssemblyValidator


def _point(p: Point) -> dict:
    return {"x": p.x, "y": p.y}


def result_to_dict(r: PlacementResult) -> dict:
    """Serialize a PlacementResult to a JSON-safe dict."""
    return {
        "correct": r.correct,
        "reason": r.reason,
        "component_id": r.component_id,
        "position": _point(r.position),
        "outcome": r.outcome.value,
        "stage": r.stage,
        "progress": r.progress,
        "completed": r.completed,
        "reverted": r.reverted,
    }


def feedback_to_dict(f: Feedback) -> dict:
    return {
        "sound": f.sound.value if f.sound else None,
        "volume": f.volume,
        "dialog": {"title": f.dialog_title, "text": f.dialog_text} if f.dialog_title else None,
        "progress_percent": f.progress_percent,
        "progress_label": f.progress_label,
        "open_win_window": f.open_win_window,
    }


def snap_to_dict(s: SnapResult) -> dict:
    return {
        "position": _point(s.point),
        "hit": s.hit,
    }


def state_to_dict(v: AssemblyValidator) -> dict:
    """Snapshot of a validator's progression for the UI."""
    state = v.state
    return {
        "stage": state.current_stage(),
        "stage_count": state.rules.stage_count,
        "progress": state.progress_fraction(),
        "completed": state.is_completed(),
        "locked": list(state.locked),
        "remaining": state.remaining(),
        "positions": {cid: _point(p) for cid, p in v.positions().items()},
        "draggable": [c.id for c in v.catalog.components if v.is_draggable(c.id)],
    }
