"""Catalog dataclasses — typed representations of catalog/*.json entries."""

from __future__ import annotations

from dataclasses import dataclass, field

from assembly_trainer.geometry import Point, Rect


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Zone:
    """A drop target: where the cursor must land and where the icon snaps to."""

    rect: Rect
    snap: Point                          # top-left of the snapped icon
    stage: int                           # first stage at which the zone is live
    last_stage: int | None = None        # None = live through the final stage

    def live_at(self, stage: int, stage_count: int) -> bool:
        last = self.last_stage if self.last_stage is not None else stage_count
        return self.stage <= stage <= last


@dataclass
class Component:
    id: str                              # UI object name, e.g. "cpuLabel"
    name: str
    tooltip: str
    image: str
    size: Size
    home: Point                          # position before the first drag
    zones: list[Zone] = field(default_factory=list)
    prerequisite: bool = False
    fixed: bool = False                  # static backdrop, never draggable
    target: str = ""                     # where it belongs, for corrective messages
    explanation: str = ""                # shown after a correct placement
    source_file: str = ""                # path of the JSON file (for error reporting)


@dataclass
class ValidationError:
    component_id: str
    field: str
    message: str

    def __str__(self) -> str:
        return f"[{self.component_id}] {self.field}: {self.message}"


@dataclass
class CatalogResult:
    """Result of loading the catalog — components + validation errors and warnings."""
    components: list[Component]
    errors: list[ValidationError]
    warnings: list[ValidationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return len(self.errors) == 0


class UnknownComponentError(KeyError):
    """Raised when a component id is not in the catalog.

    This signals a mismatch between the UI and the catalog, never a
    learner mistake.
    """

    def __init__(self, component_id: str) -> None:
        self.component_id = component_id
        super().__init__(component_id)

    def __str__(self) -> str:
        return f"Unknown component '{self.component_id}' (not in the zone catalog)"


class CatalogError(Exception):
    """Raised when a catalog with validation errors is put into service."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = errors
        lines = "\n".join(f"  - {e}" for e in errors)
        super().__init__(f"Catalog has {len(errors)} error(s):\n{lines}")
