from .rect import (
    Point,
    Rect,
    rect_contains_point,
    rects_overlap,
    centered_under,
)
