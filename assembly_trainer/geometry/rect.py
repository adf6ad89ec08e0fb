"""
Scene-coordinate geometry for drop zones.

Coordinates are in scene pixels, origin top-left, X to the right and
Y downwards, the same space the UI reports cursor positions in.
"""

from __future__ import annotations

from dataclasses import dataclass

from shapely.geometry import Point as ShapelyPoint, box as shapely_box


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle, bounds inclusive on every side."""

    x_min: float
    y_min: float
    x_max: float
    y_max: float


# ── Predicates ─────────────────────────────────────────────────────


def rect_contains_point(rect: Rect, point: Point) -> bool:
    """Closed-interval containment: a point on the border is inside.

    Shapely's ``covers`` (unlike ``contains``) counts the boundary.
    """
    zone = shapely_box(rect.x_min, rect.y_min, rect.x_max, rect.y_max)
    return zone.covers(ShapelyPoint(point.x, point.y))


def rects_overlap(a: Rect, b: Rect) -> bool:
    """True if two rectangles share a region of positive area.

    Rectangles that merely touch along an edge (like two neighbouring
    RAM slots) do not overlap.
    """
    box_a = shapely_box(a.x_min, a.y_min, a.x_max, a.y_max)
    box_b = shapely_box(b.x_min, b.y_min, b.x_max, b.y_max)
    return box_a.intersection(box_b).area > 0


def centered_under(cursor: Point, width: float, height: float) -> Point:
    """Top-left corner that centres a ``width`` x ``height`` icon on the cursor."""
    return Point(cursor.x - 0.5 * width, cursor.y - 0.5 * height)
