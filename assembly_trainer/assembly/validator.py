"""Placement validator — judges each drop and drives the progression state.

The validator is the only writer of its ProgressionState.  Drops are
handled one at a time; every learner outcome comes back as a
PlacementResult and the validator itself never plays sounds or opens
dialogs.
"""

from __future__ import annotations

import logging

from assembly_trainer.catalog import Component, ZoneCatalog
from assembly_trainer.geometry import Point

from .models import Outcome, PlacementResult
from .snap import SnapEngine, SnapResult
from .state import Eligibility, ProgressionState


log = logging.getLogger(__name__)


class AssemblyValidator:
    """Request/response surface over the snap engine and the state machine."""

    def __init__(self, catalog: ZoneCatalog) -> None:
        self.catalog = catalog
        self.snap_engine = SnapEngine(catalog)
        self._state = self._new_state()
        self._positions: dict[str, Point] = self._home_positions()

    # ── Session lifecycle ──────────────────────────────────────────

    def _new_state(self) -> ProgressionState:
        return ProgressionState(
            prerequisite=self.catalog.prerequisite.id,
            rules=self.catalog.rules,
        )

    def _home_positions(self) -> dict[str, Point]:
        return {c.id: c.home for c in self.catalog.components}

    def reset(self) -> None:
        """Discard all progress and start a fresh assembly."""
        self._state = self._new_state()
        self._positions = self._home_positions()
        log.info("Assembly reset")

    # ── Queries ────────────────────────────────────────────────────

    @property
    def state(self) -> ProgressionState:
        return self._state

    def current_stage(self) -> int:
        return self._state.current_stage()

    def progress_fraction(self) -> float:
        return self._state.progress_fraction()

    def is_completed(self) -> bool:
        return self._state.is_completed()

    def is_draggable(self, component_id: str) -> bool:
        """Whether the UI may start a drag on this icon."""
        return self.catalog.is_draggable(component_id) and not self._state.is_locked(component_id)

    def position_of(self, component_id: str) -> Point:
        """Committed position: home until placed, then the snapped slot."""
        self.catalog.get(component_id)
        return self._positions[component_id]

    def positions(self) -> dict[str, Point]:
        return dict(self._positions)

    def consume_revert(self) -> bool:
        return self._state.consume_revert()

    def preview(self, component_id: str, cursor: Point) -> SnapResult:
        """Where the icon would land if dropped now; changes nothing."""
        self.catalog.get(component_id)
        return self.snap_engine.snap(cursor, component_id, self.current_stage())

    # ── Validation ─────────────────────────────────────────────────

    def validate(self, component_id: str, cursor: Point) -> PlacementResult:
        """Judge one drop of ``component_id`` released at ``cursor``.

        Raises UnknownComponentError for ids the catalog does not know.
        """
        comp = self.catalog.get(component_id)

        if comp.fixed:
            return self._result(comp, Outcome.FIXED, False,
                                f"The {comp.name.lower()} is part of the backdrop and stays where it is.")

        stage = self._state.current_stage()
        status = self._state.eligibility(component_id)

        if status in (Eligibility.LOCKED, Eligibility.COMPLETED):
            return self._result(comp, Outcome.LOCKED, True,
                                f"The {comp.name} is already installed.")
        if status is Eligibility.PREREQUISITE_NOT_MET:
            prereq = self.catalog.prerequisite
            log.info("Rejected %s at stage %d: prerequisite %s not placed",
                     component_id, stage, prereq.id)
            return self._result(comp, Outcome.INELIGIBLE, False,
                                f"Prerequisite not met: install the {prereq.name} "
                                f"before the {comp.name}.")

        snapped = self.snap_engine.snap(cursor, component_id, stage)

        if snapped.hit:
            self._state.advance(component_id)
            self._positions[component_id] = snapped.point
            reason = f"Correct! The {comp.name} is in place."
            if comp.explanation:
                reason = f"{reason} {comp.explanation}"
            return self._result(comp, Outcome.CORRECT, True, reason)

        self._state.reject()
        log.info("Incorrect drop of %s at (%.1f, %.1f) on stage %d",
                 component_id, cursor.x, cursor.y, stage)
        target = comp.target or "in its marked slot"
        return self._result(comp, Outcome.INCORRECT, False,
                            f"Not quite. The {comp.name} goes {target}.")

    def _result(self, comp: Component, outcome: Outcome, correct: bool, reason: str) -> PlacementResult:
        return PlacementResult(
            correct=correct,
            reason=reason,
            component_id=comp.id,
            position=self._positions[comp.id],
            outcome=outcome,
            stage=self._state.current_stage(),
            progress=self._state.progress_fraction(),
            completed=self._state.is_completed(),
        )
