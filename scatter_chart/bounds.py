from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Tuple

from .errors import EmptySampleSet
from .geometry import Vec, lerp, remap_point

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

MARGIN_RATIO = 0.1


@dataclass(frozen=True)
class Rect:
    # data rects: bottom <= top (y up); pixel rects: top <= bottom (y down)
    left: float
    right: float
    top: float
    bottom: float

    @property
    def width(self) -> float:
        return abs(self.right - self.left)

    @property
    def height(self) -> float:
        return abs(self.bottom - self.top)

    @property
    def center(self) -> Vec:
        return ((self.left + self.right) / 2, (self.top + self.bottom) / 2)

    def translated(self, offset: Vec) -> "Rect":
        dx, dy = offset
        return Rect(
            left=self.left + dx,
            right=self.right + dx,
            top=self.top + dy,
            bottom=self.bottom + dy,
        )

    def scaled(self, k: float) -> "Rect":
        """Scale about this rect's own center (k < 1 shrinks, i.e. zooms in)."""
        cx, cy = self.center
        return Rect(
            left=lerp(cx, self.left, k),
            right=lerp(cx, self.right, k),
            top=lerp(cy, self.top, k),
            bottom=lerp(cy, self.bottom, k),
        )

    def contains(self, point: Vec) -> bool:
        x, y = point
        return (
            min(self.left, self.right) <= x <= max(self.left, self.right)
            and min(self.top, self.bottom) <= y <= max(self.top, self.bottom)
        )


def margin_for(size: float) -> float:
    return float(size) * MARGIN_RATIO


def pixel_bounds_for(size: float) -> Rect:
    m = margin_for(size)
    return Rect(left=m, right=float(size) - m, top=m, bottom=float(size) - m)


def data_bounds_for(points: Iterable[Vec]) -> Rect:
    pts = list(points)
    if not pts:
        raise EmptySampleSet()
    xs = [float(p[0]) for p in pts]
    ys = [float(p[1]) for p in pts]
    left, right = min(xs), max(xs)
    bottom, top = min(ys), max(ys)

    # a single shared value on an axis would make every remap divide by zero
    if left == right:
        logger.warning("All samples share x=%s; using a unit-wide x range.", left)
        left, right = left - 0.5, right + 0.5
    if bottom == top:
        logger.warning("All samples share y=%s; using a unit-high y range.", bottom)
        bottom, top = bottom - 0.5, top + 0.5
    return Rect(left=left, right=right, top=top, bottom=bottom)


@dataclass
class BoundsModel:
    pixel: Rect
    data: Rect

    def to_pixel(self, data_point: Vec) -> Vec:
        return remap_point(self.data, self.pixel, data_point)

    def to_data(self, pixel_point: Vec) -> Vec:
        return remap_point(self.pixel, self.data, pixel_point)

    def with_data(self, data: Rect) -> "BoundsModel":
        return replace(self, data=data)

    def corners(self) -> Tuple[Vec, Vec]:
        """Data values at the plot area's bottom-left and top-right corners."""
        p = self.pixel
        return self.to_data((p.left, p.bottom)), self.to_data((p.right, p.top))
