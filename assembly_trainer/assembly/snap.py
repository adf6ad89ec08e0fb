"""Snap engine — turn a raw drop point into the position an icon lands at."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from assembly_trainer.catalog import ZoneCatalog, Zone
from assembly_trainer.geometry import Point, rect_contains_point, centered_under


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnapResult:
    point: Point
    zone: Zone | None = None             # the zone that captured the drop, if any

    @property
    def hit(self) -> bool:
        return self.zone is not None


class SnapEngine:
    """Snaps drops into the zones the catalog declares for each component."""

    def __init__(self, catalog: ZoneCatalog) -> None:
        self.catalog = catalog

    def match_zone(self, cursor: Point, component_id: str, stage: int) -> Zone | None:
        """First live zone of the component containing the cursor.

        Declaration order breaks ties when zones overlap.
        """
        for zone in self.catalog.live_zones(component_id, stage):
            if rect_contains_point(zone.rect, cursor):
                return zone
        return None

    def snap(self, cursor: Point, component_id: str, stage: int) -> SnapResult:
        """Return the zone's canonical point on a hit, else centre the icon on the cursor."""
        zone = self.match_zone(cursor, component_id, stage)
        if zone is not None:
            log.debug("Snap %s at (%.1f, %.1f) stage %d -> zone snap (%.1f, %.1f)",
                      component_id, cursor.x, cursor.y, stage, zone.snap.x, zone.snap.y)
            return SnapResult(point=zone.snap, zone=zone)

        size = self.catalog.get(component_id).size
        point = centered_under(cursor, size.width, size.height)
        log.debug("Snap %s at (%.1f, %.1f) stage %d -> no zone, follows cursor",
                  component_id, cursor.x, cursor.y, stage)
        return SnapResult(point=point)
