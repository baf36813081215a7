from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple

from .bounds import BoundsModel, Rect, data_bounds_for, margin_for, pixel_bounds_for
from .data_model import Sample
from .errors import EmptySampleSet

MIN_SCALE = 0.01
MAX_SCALE = 3.0
ZOOM_STEP = 0.05

# canvas tags of the two drawing layers; overlay is stacked above base
BASE = "base"
OVERLAY = "overlay"
LAYERS = (BASE, OVERLAY)


class Redraw(Enum):
    NONE = "none"
    OVERLAY = "overlay"
    FULL = "full"


@dataclass
class ViewportState:
    offset: Tuple[float, float] = (0.0, 0.0)
    # clamped to [MIN_SCALE, MAX_SCALE]; < 1 is zoomed in
    scale: float = 1.0


@dataclass
class DragState:
    # data-space points (pixel locations remapped against the default bounds)
    start: Tuple[float, float] = (0.0, 0.0)
    end: Tuple[float, float] = (0.0, 0.0)
    # pending offset delta; left in place after release so click can tell a drag
    offset: Tuple[float, float] = (0.0, 0.0)
    dragging: bool = False


@dataclass
class SelectionState:
    # identity references into ChartState.samples
    hovered: Optional[Sample] = None
    selected: Optional[Sample] = None


@dataclass
class ChartState:
    samples: Tuple[Sample, ...]
    size: int
    margin: float
    default_bounds: Rect
    bounds: BoundsModel
    viewport: ViewportState = field(default_factory=ViewportState)
    drag: DragState = field(default_factory=DragState)
    selection: SelectionState = field(default_factory=SelectionState)
    # last pointer location in surface pixels, None while off the surface
    pointer: Optional[Tuple[float, float]] = None

    @classmethod
    def create(cls, samples: Sequence[Sample], size: int) -> "ChartState":
        samples = tuple(samples)
        if not samples:
            raise EmptySampleSet()
        default = data_bounds_for(s.point for s in samples)
        return cls(
            samples=samples,
            size=int(size),
            margin=margin_for(size),
            default_bounds=default,
            bounds=BoundsModel(pixel=pixel_bounds_for(size), data=default),
        )

    @property
    def hover_radius(self) -> float:
        return self.margin / 2

    def owns(self, sample: Optional[Sample]) -> bool:
        if sample is None:
            return True
        return any(s is sample for s in self.samples)
