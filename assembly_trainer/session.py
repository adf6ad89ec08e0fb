"""
Session management — one assembly attempt by one learner.

A session owns a single AssemblyValidator (and through it the
progression state).  Restarting the exercise discards that state and
starts from stage 1 again.  Sessions live in memory only; nothing is
written to disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from assembly_trainer.assembly import AssemblyValidator
from assembly_trainer.catalog import ZoneCatalog, load_catalog


@dataclass
class AssemblySession:
    id: str
    created: str                         # ISO 8601
    last_modified: str                   # ISO 8601
    validator: AssemblyValidator

    def touch(self) -> None:
        self.last_modified = datetime.now(timezone.utc).isoformat()

    def restart(self) -> None:
        """Throw away all progress and begin the assembly again."""
        self.validator.reset()
        self.touch()


def _generate_session_id() -> str:
    """Generate a short, human-readable session ID."""
    return datetime.now().strftime("%Y%m%d_%H%M%S_%f")


def create_session(catalog: ZoneCatalog | None = None, catalog_dir: Path | None = None) -> AssemblySession:
    """Create a new session, loading the catalog from disk if none is given.

    Raises CatalogError if the catalog on disk does not validate.
    """
    if catalog is None:
        catalog = ZoneCatalog.from_result(load_catalog(catalog_dir))
    now = datetime.now(timezone.utc).isoformat()
    return AssemblySession(
        id=_generate_session_id(),
        created=now,
        last_modified=now,
        validator=AssemblyValidator(catalog),
    )
