"""UI cues derived from a placement result.

Mirrors what the assembly window shows after each drop: a sound, an
optional modal dialog, the progress bar value and the encouragement
label above it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from assembly_trainer.config import TRAINER_RULES, TrainerRules

from .models import Outcome, PlacementResult


class Sound(Enum):
    GOOD = "good"
    BAD = "bad"
    WIN = "win"


@dataclass(frozen=True)
class Feedback:
    sound: Sound | None
    volume: int
    dialog_title: str | None
    dialog_text: str | None
    progress_percent: int
    progress_label: str | None           # None = label hidden
    open_win_window: bool = False


def progress_label(percent: int, rules: TrainerRules = TRAINER_RULES) -> str | None:
    if percent >= 100:
        return rules.done_text
    if percent >= rules.almost_there_fraction * 100:
        return rules.almost_there_text
    return None


def feedback_for(result: PlacementResult, rules: TrainerRules = TRAINER_RULES) -> Feedback:
    percent = round(result.progress * 100)
    label = progress_label(percent, rules)

    if result.outcome is Outcome.CORRECT and result.completed:
        return Feedback(
            sound=Sound.WIN, volume=rules.win_volume,
            dialog_title=None, dialog_text=None,
            progress_percent=percent, progress_label=label,
            open_win_window=True,
        )
    if result.outcome is Outcome.CORRECT:
        return Feedback(
            sound=Sound.GOOD, volume=rules.good_volume,
            dialog_title="Correct", dialog_text=result.reason,
            progress_percent=percent, progress_label=label,
        )
    if result.outcome in (Outcome.INCORRECT, Outcome.INELIGIBLE):
        return Feedback(
            sound=Sound.BAD, volume=rules.bad_volume,
            dialog_title="Incorrect", dialog_text=result.reason,
            progress_percent=percent, progress_label=label,
        )
    # Locked and fixed icons: nothing happened
    return Feedback(
        sound=None, volume=0,
        dialog_title=None, dialog_text=None,
        progress_percent=percent, progress_label=label,
    )
