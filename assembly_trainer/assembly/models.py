"""Validator output dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from assembly_trainer.geometry import Point


class Outcome(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"              # out of zone; the icon goes back
    INELIGIBLE = "ineligible"            # not placeable yet (or any more)
    LOCKED = "locked"                    # already placed; no-op
    FIXED = "fixed"                      # backdrop element; no-op


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of one drop, plus a snapshot of progress after it."""

    correct: bool
    reason: str
    component_id: str
    position: Point                      # where the UI should leave the icon
    outcome: Outcome
    stage: int
    progress: float
    completed: bool

    @property
    def reverted(self) -> bool:
        """True when the icon must return to where the drag started."""
        return self.outcome in (Outcome.INCORRECT, Outcome.INELIGIBLE)
