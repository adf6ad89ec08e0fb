"""Assembly core — snap engine, progression state machine, placement validator.

Submodules:
  snap          Raw drop point → canonical zone point (or cursor-follow miss).
  state         Stage progression, locked parts, completion, pending revert.
  models        PlacementResult and Outcome.
  validator     Orchestrates snap + state for each drop.
  feedback      Sound / dialog / progress-bar cues derived from a result.
  serialization JSON conversion for the web API.
"""

from .models import Outcome, PlacementResult
from .snap import SnapEngine, SnapResult
from .state import Eligibility, ProgressionError, ProgressionState, StageTransition
from .validator import AssemblyValidator
from .feedback import Feedback, Sound, feedback_for, progress_label
from .serialization import result_to_dict, feedback_to_dict, snap_to_dict, state_to_dict

__all__ = [
    # Models
    "Outcome", "PlacementResult",
    # Snap engine
    "SnapEngine", "SnapResult",
    # State machine
    "Eligibility", "ProgressionError", "ProgressionState", "StageTransition",
    # Validator
    "AssemblyValidator",
    # Feedback
    "Feedback", "Sound", "feedback_for", "progress_label",
    # Serialization
    "result_to_dict", "feedback_to_dict", "snap_to_dict", "state_to_dict",
]
