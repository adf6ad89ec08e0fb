"""Catalog serialization — convert dataclasses to JSON-safe dicts."""

from __future__ import annotations

from typing import Any

from .models import Component, CatalogResult, Zone


def catalog_to_dict(result: CatalogResult) -> dict:
    """Serialize a CatalogResult to a JSON-safe dict for the web API."""
    return {
        "ok": result.ok,
        "component_count": len(result.components),
        "components": [component_to_dict(c) for c in result.components],
        "errors": [{"component_id": e.component_id, "field": e.field, "message": e.message}
                   for e in result.errors],
        "warnings": [{"component_id": w.component_id, "field": w.field, "message": w.message}
                     for w in result.warnings],
    }


def zone_to_dict(z: Zone) -> dict:
    d: dict[str, Any] = {
        "rect": {
            "x_min": z.rect.x_min,
            "y_min": z.rect.y_min,
            "x_max": z.rect.x_max,
            "y_max": z.rect.y_max,
        },
        "snap": {"x": z.snap.x, "y": z.snap.y},
        "stage": z.stage,
    }
    if z.last_stage is not None:
        d["last_stage"] = z.last_stage
    return d


def component_to_dict(c: Component) -> dict:
    """Serialize a Component to a JSON-safe dict."""
    d: dict[str, Any] = {
        "id": c.id,
        "name": c.name,
        "tooltip": c.tooltip,
        "image": c.image,
        "size": {"width": c.size.width, "height": c.size.height},
        "home": {"x": c.home.x, "y": c.home.y},
        "zones": [zone_to_dict(z) for z in c.zones],
        "prerequisite": c.prerequisite,
        "fixed": c.fixed,
    }

    # Optional fields
    if c.target:
        d["target"] = c.target
    if c.explanation:
        d["explanation"] = c.explanation

    return d
