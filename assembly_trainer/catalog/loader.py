"""Catalog loader — reads catalog/*.json files, parses and validates them."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from assembly_trainer.config import TRAINER_RULES, TrainerRules
from assembly_trainer.geometry import Point, Rect, rects_overlap

from .models import Component, Size, Zone, ValidationError, CatalogResult


log = logging.getLogger(__name__)

CATALOG_DIR = Path(__file__).resolve().parent.parent.parent / "catalog"


# ── Validation ─────────────────────────────────────────────────────

def _validate_component(comp: Component, rules: TrainerRules) -> list[ValidationError]:
    """Run all per-component validation checks."""
    errs: list[ValidationError] = []
    cid = comp.id

    if comp.size.width <= 0 or comp.size.height <= 0:
        errs.append(ValidationError(cid, "size", "Width and height must be > 0"))

    if comp.fixed:
        if comp.zones:
            errs.append(ValidationError(cid, "zones", "Fixed components cannot have drop zones"))
        if comp.prerequisite:
            errs.append(ValidationError(cid, "prerequisite", "Fixed components cannot be the prerequisite"))
        return errs

    if not comp.zones:
        errs.append(ValidationError(cid, "zones", "Draggable components need at least one zone"))

    for i, zone in enumerate(comp.zones):
        where = f"zones[{i}]"
        if zone.rect.x_min >= zone.rect.x_max or zone.rect.y_min >= zone.rect.y_max:
            errs.append(ValidationError(cid, f"{where}.rect", "Rectangle must have positive width and height"))
        if not 1 <= zone.stage <= rules.stage_count:
            errs.append(ValidationError(cid, f"{where}.stage",
                                        f"Stage {zone.stage} outside 1..{rules.stage_count}"))
        if zone.last_stage is not None:
            if zone.last_stage < zone.stage:
                errs.append(ValidationError(cid, f"{where}.last_stage",
                                            f"last_stage {zone.last_stage} before stage {zone.stage}"))
            elif zone.last_stage > rules.stage_count:
                errs.append(ValidationError(cid, f"{where}.last_stage",
                                            f"last_stage {zone.last_stage} beyond {rules.stage_count}"))
        if comp.prerequisite and zone.stage != rules.prerequisite_stage:
            errs.append(ValidationError(cid, f"{where}.stage",
                                        f"Prerequisite zones must open at stage {rules.prerequisite_stage}"))
        if not comp.prerequisite and zone.stage <= rules.prerequisite_stage:
            errs.append(ValidationError(cid, f"{where}.stage",
                                        "Only the prerequisite may be placed at the first stage"))

    return errs


def _zone_overlap_warnings(comp: Component, stage_count: int) -> list[ValidationError]:
    """Flag a component's zones that overlap while live at a common stage.

    Overlaps are legal (the first declared zone wins) but usually a typo.
    """
    warns: list[ValidationError] = []
    for i, a in enumerate(comp.zones):
        for j in range(i + 1, len(comp.zones)):
            b = comp.zones[j]
            shared = any(a.live_at(s, stage_count) and b.live_at(s, stage_count)
                         for s in range(1, stage_count + 1))
            if shared and rects_overlap(a.rect, b.rect):
                warns.append(ValidationError(comp.id, f"zones[{j}]",
                                             f"Overlaps zones[{i}]; zones[{i}] wins"))
    return warns


def _validate_catalog(components: list[Component], rules: TrainerRules) -> list[ValidationError]:
    """Cross-component checks: unique ids, one prerequisite, N placeable parts."""
    errs: list[ValidationError] = []

    id_counts: dict[str, int] = {}
    for comp in components:
        id_counts[comp.id] = id_counts.get(comp.id, 0) + 1
    for cid, count in id_counts.items():
        if count > 1:
            errs.append(ValidationError(cid, "id", f"Duplicate component ID (appears {count} times)"))

    prereqs = [c.id for c in components if c.prerequisite]
    if len(prereqs) != 1:
        errs.append(ValidationError("_catalog", "prerequisite",
                                    f"Expected exactly one prerequisite, found {len(prereqs)}: {prereqs}"))

    placeable = [c for c in components if not c.fixed]
    if len(placeable) != rules.stage_count:
        errs.append(ValidationError("_catalog", "components",
                                    f"Expected {rules.stage_count} placeable components "
                                    f"(one per stage), found {len(placeable)}"))
    return errs


# ── Parsing ────────────────────────────────────────────────────────

def _parse_point(data: dict) -> Point:
    return Point(x=float(data["x"]), y=float(data["y"]))


def _parse_rect(data: dict) -> Rect:
    return Rect(
        x_min=float(data["x_min"]),
        y_min=float(data["y_min"]),
        x_max=float(data["x_max"]),
        y_max=float(data["y_max"]),
    )


def _parse_zone(data: dict) -> Zone:
    return Zone(
        rect=_parse_rect(data["rect"]),
        snap=_parse_point(data["snap"]),
        stage=int(data["stage"]),
        last_stage=int(data["last_stage"]) if data.get("last_stage") is not None else None,
    )


def _parse_component(data: dict, source_file: str = "") -> Component:
    size = data["size"]
    return Component(
        id=data["id"],
        name=data["name"],
        tooltip=data.get("tooltip", data["name"]),
        image=data.get("image", ""),
        size=Size(width=float(size["width"]), height=float(size["height"])),
        home=_parse_point(data["home"]),
        zones=[_parse_zone(z) for z in data.get("zones", [])],
        prerequisite=data.get("prerequisite", False),
        fixed=data.get("fixed", False),
        target=data.get("target", ""),
        explanation=data.get("explanation", ""),
        source_file=source_file,
    )


# ── Public API ─────────────────────────────────────────────────────

def load_catalog(
    catalog_dir: Path | None = None,
    rules: TrainerRules = TRAINER_RULES,
) -> CatalogResult:
    """Load all catalog/*.json files, parse and validate.

    Files are read in sorted name order; that order is the catalog's
    declaration order and breaks ties between overlapping zones.

    Components that fail to parse are skipped (error recorded).
    Components that parse but have validation issues are still included.
    """
    d = catalog_dir or CATALOG_DIR
    components: list[Component] = []
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    json_files = sorted(d.glob("*.json"))
    if not json_files:
        errors.append(ValidationError("_catalog", "files", f"No .json files found in {d}"))
        return CatalogResult(components=components, errors=errors)

    for path in json_files:
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            errors.append(ValidationError(
                path.stem, "json", f"Parse error: {exc}"))
            continue
        except OSError as exc:
            errors.append(ValidationError(
                path.stem, "file", f"Read error: {exc}"))
            continue

        try:
            comp = _parse_component(raw, source_file=str(path))
        except (KeyError, TypeError, ValueError) as exc:
            errors.append(ValidationError(
                raw.get("id", path.stem) if isinstance(raw, dict) else path.stem,
                "parse", f"Missing/invalid field: {exc}"))
            continue

        errors.extend(_validate_component(comp, rules))
        warnings.extend(_zone_overlap_warnings(comp, rules.stage_count))
        components.append(comp)

    errors.extend(_validate_catalog(components, rules))

    for w in warnings:
        log.warning("Catalog warning: %s", w)
    log.info("Loaded %d catalog components from %s (%d errors)",
             len(components), d, len(errors))

    return CatalogResult(components=components, errors=errors, warnings=warnings)

