"""Zone catalog — read-only lookups over a validated catalog."""

from __future__ import annotations

from collections.abc import Sequence

from assembly_trainer.config import TRAINER_RULES, TrainerRules

from .models import (
    Component, Zone, CatalogResult, CatalogError, UnknownComponentError, ValidationError,
)


class ZoneCatalog:
    """Component id → zones, stage, and draggability.

    Built once at startup and never mutated.  Component order is the
    catalog's declaration order.
    """

    def __init__(self, components: Sequence[Component], rules: TrainerRules = TRAINER_RULES) -> None:
        self.rules = rules
        self._components: dict[str, Component] = {}
        for c in components:
            if c.id in self._components:
                raise CatalogError([ValidationError(c.id, "id", "Duplicate component ID")])
            self._components[c.id] = c

    @classmethod
    def from_result(cls, result: CatalogResult, rules: TrainerRules = TRAINER_RULES) -> ZoneCatalog:
        """Build a catalog from a loader result, refusing one with errors."""
        if not result.ok:
            raise CatalogError(result.errors)
        return cls(result.components, rules)

    # ── Lookups ────────────────────────────────────────────────────

    def get(self, component_id: str) -> Component:
        try:
            return self._components[component_id]
        except KeyError:
            raise UnknownComponentError(component_id) from None

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._components

    @property
    def components(self) -> list[Component]:
        return list(self._components.values())

    def zones_for(self, component_id: str) -> Sequence[Zone]:
        return tuple(self.get(component_id).zones)

    def live_zones(self, component_id: str, stage: int) -> list[Zone]:
        """Zones of a component that accept drops at ``stage``, in declaration order."""
        return [z for z in self.zones_for(component_id)
                if z.live_at(stage, self.rules.stage_count)]

    def stage_of(self, component_id: str) -> int:
        """Earliest stage at which the component can be placed.

        Fixed components have no zones and are never placeable; asking for
        their stage is a configuration error.
        """
        zones = self.zones_for(component_id)
        if not zones:
            raise ValueError(f"Component '{component_id}' has no drop zones")
        return min(z.stage for z in zones)

    def is_draggable(self, component_id: str) -> bool:
        return not self.get(component_id).fixed

    @property
    def prerequisite(self) -> Component:
        for c in self._components.values():
            if c.prerequisite:
                return c
        raise CatalogError([ValidationError("_catalog", "prerequisite", "No prerequisite component")])

    @property
    def placeable(self) -> list[Component]:
        """The components that must all be placed to finish the assembly."""
        return [c for c in self._components.values() if not c.fixed]
