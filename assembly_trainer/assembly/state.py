"""
Progression state machine for one assembly session.

States:
- Stage(1): only the prerequisite (the motherboard) may be placed
- Stage(2..N): every remaining part may be placed, in any order
- COMPLETED: all N parts are locked in (terminal)

Each correct placement locks one part and consumes one unit of stage
progress.  Nothing leaves COMPLETED; a new session gets a new state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from assembly_trainer.config import TRAINER_RULES, TrainerRules


log = logging.getLogger(__name__)


class Eligibility(Enum):
    ELIGIBLE = "eligible"
    LOCKED = "locked"                          # already placed correctly
    PREREQUISITE_NOT_MET = "prerequisite_not_met"
    COMPLETED = "completed"                    # nothing left to place


@dataclass(frozen=True)
class StageTransition:
    component_id: str
    from_stage: int
    to_stage: int
    completed: bool


class ProgressionError(Exception):
    """Raised when ``advance`` is called for a component that is not eligible."""

    def __init__(self, component_id: str, eligibility: Eligibility) -> None:
        self.component_id = component_id
        self.eligibility = eligibility
        super().__init__(f"Cannot advance with '{component_id}': {eligibility.value}")


@dataclass
class ProgressionState:
    prerequisite: str
    rules: TrainerRules = TRAINER_RULES
    stage: int = 1
    locked: list[str] = field(default_factory=list)   # in lock order
    completed: bool = False
    pending_revert: bool = False
    last_correct: bool = False
    transitions: list[StageTransition] = field(default_factory=list)

    # ── Queries ────────────────────────────────────────────────────

    def current_stage(self) -> int:
        return self.stage

    def is_locked(self, component_id: str) -> bool:
        return component_id in self.locked

    def is_completed(self) -> bool:
        # Completion is only reached by a correct placement
        return self.completed and self.last_correct

    def progress_fraction(self) -> float:
        return min(1.0, len(self.locked) / self.rules.stage_count)

    def remaining(self) -> int:
        return self.rules.stage_count - len(self.locked)

    def eligibility(self, component_id: str) -> Eligibility:
        if self.is_locked(component_id):
            return Eligibility.LOCKED
        if self.completed:
            return Eligibility.COMPLETED
        if self.stage == self.rules.prerequisite_stage:
            if component_id == self.prerequisite:
                return Eligibility.ELIGIBLE
            return Eligibility.PREREQUISITE_NOT_MET
        return Eligibility.ELIGIBLE

    # ── Transitions ────────────────────────────────────────────────

    def advance(self, component_id: str) -> StageTransition:
        """Lock a correctly placed component and move the stage on."""
        status = self.eligibility(component_id)
        if status is not Eligibility.ELIGIBLE:
            raise ProgressionError(component_id, status)

        from_stage = self.stage
        self.locked.append(component_id)
        self.last_correct = True
        self.pending_revert = False

        if len(self.locked) >= self.rules.stage_count:
            self.completed = True
            log.info("Locked %s; assembly complete", component_id)
        else:
            self.stage += 1
            log.info("Locked %s; stage %d -> %d (%d remaining)",
                     component_id, from_stage, self.stage, self.remaining())

        transition = StageTransition(
            component_id=component_id,
            from_stage=from_stage,
            to_stage=self.stage,
            completed=self.completed,
        )
        self.transitions.append(transition)
        return transition

    def reject(self) -> None:
        """Record a wrong placement; the UI must move the icon back."""
        if self.completed:
            return
        self.last_correct = False
        self.pending_revert = True

    def consume_revert(self) -> bool:
        """Return whether a revert is pending and clear the flag."""
        pending = self.pending_revert
        self.pending_revert = False
        return pending
