"""Shared rules for the assembly trainer.

The stage count, progress-label thresholds and sound volumes live here so
the progression state machine, the feedback layer and the catalog
validator all read the same numbers.  Change a value here and every
consumer stays in sync.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TrainerRules:
    """Rules for one predefined PC layout."""

    stage_count: int = 6
    """Number of stages N; also the number of parts that must be placed."""

    almost_there_fraction: float = 0.5
    """Progress at or above which the encouragement label is shown."""

    almost_there_text: str = "Almost There!"
    done_text: str = "Nice Job!"

    good_volume: int = 50
    bad_volume: int = 50
    win_volume: int = 40
    """Sound volumes on a 0-100 scale, per cue."""

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def prerequisite_stage(self) -> int:
        """The stage that only the prerequisite component can satisfy."""
        return 1


# Module-level singleton, importable everywhere.
TRAINER_RULES = TrainerRules()
