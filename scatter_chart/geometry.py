from __future__ import annotations

import math
from typing import Sequence, Tuple, TYPE_CHECKING

import numpy as np

from .errors import DegenerateBounds

if TYPE_CHECKING:
    from .bounds import Rect

Vec = Tuple[float, float]


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def inv_lerp(a: float, b: float, v: float) -> float:
    # ZeroDivisionError when a == b; callers guard degenerate rects
    return (v - a) / (b - a)


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def sign(v: float) -> int:
    if v > 0:
        return 1
    if v < 0:
        return -1
    return 0


def add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def subtract(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec, k: float) -> Vec:
    return (v[0] * k, v[1] * k)


def equals(a: Vec, b: Vec, tol: float = 0.0) -> bool:
    return abs(a[0] - b[0]) <= tol and abs(a[1] - b[1]) <= tol


def distance(a: Vec, b: Vec) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def nearest(target: Vec, points: Sequence[Vec]) -> int:
    """
    Index of the point closest to target (Euclidean).

    Coincident points are common in scatter data: ties resolve to the
    lowest index (np.argmin returns the first minimum).
    """
    if len(points) == 0:
        raise ValueError("nearest() needs at least one point.")
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    d = np.hypot(pts[:, 0] - float(target[0]), pts[:, 1] - float(target[1]))
    return int(np.argmin(d))


def remap_point(from_rect: "Rect", to_rect: "Rect", point: Vec) -> Vec:
    """
    Map point from one rectangle to another, axis by axis.

    Each rect is read through its own edges (left/right for x, top/bottom
    for y), so a data rect with y growing up maps onto a pixel rect with y
    growing down without any sign flip.
    """
    try:
        tx = inv_lerp(from_rect.left, from_rect.right, point[0])
        ty = inv_lerp(from_rect.top, from_rect.bottom, point[1])
    except ZeroDivisionError as e:
        raise DegenerateBounds(f"Cannot remap from zero-extent bounds {from_rect}.") from e
    return (
        lerp(to_rect.left, to_rect.right, tx),
        lerp(to_rect.top, to_rect.bottom, ty),
    )


def format_number(n: float, decimals: int = 0) -> str:
    return f"{float(n):.{int(decimals)}f}"
