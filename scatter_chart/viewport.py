from __future__ import annotations

import logging

from .bounds import Rect
from .geometry import Vec, add, clamp, remap_point, scale, sign, subtract
from .ui_state import MAX_SCALE, MIN_SCALE, ZOOM_STEP, ChartState

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def live_bounds(default: Rect, offset: Vec, k: float) -> Rect:
    """
    Visible data bounds for a given offset and scale.

    Always rebuilt from the default bounds: translate by offset first, then
    scale about the *translated* rect's center. Zoom is therefore anchored to
    what is currently on screen rather than to the data's own center.
    """
    return default.translated(offset).scaled(k)


def _apply(state: ChartState, offset: Vec) -> None:
    state.bounds = state.bounds.with_data(
        live_bounds(state.default_bounds, offset, state.viewport.scale)
    )


def zoom(state: ChartState, delta: float) -> float:
    vp = state.viewport
    step = vp.scale * ZOOM_STEP
    new_scale = clamp(vp.scale + sign(delta) * step, MIN_SCALE, MAX_SCALE)
    vp.scale = new_scale
    _apply(state, vp.offset)
    logger.debug("zoom delta=%s scale=%.4f", delta, new_scale)
    return new_scale


def _pixel_to_default_data(state: ChartState, px: Vec) -> Vec:
    # drag endpoints are measured against the default bounds; the scale
    # factor applied in drag_to converts them into live units
    return remap_point(state.bounds.pixel, state.default_bounds, px)


def begin_drag(state: ChartState, px: Vec) -> None:
    d = state.drag
    d.start = _pixel_to_default_data(state, px)
    d.end = d.start
    d.offset = (0.0, 0.0)
    d.dragging = True


def drag_to(state: ChartState, px: Vec) -> Vec:
    d = state.drag
    d.end = _pixel_to_default_data(state, px)
    d.offset = scale(subtract(d.start, d.end), state.viewport.scale)
    candidate = add(state.viewport.offset, d.offset)
    _apply(state, candidate)
    return candidate


def end_drag(state: ChartState) -> None:
    d = state.drag
    if not d.dragging:
        return
    state.viewport.offset = add(state.viewport.offset, d.offset)
    d.dragging = False
    logger.debug("pan committed offset=(%.4f, %.4f)", *state.viewport.offset)


def reset_view(state: ChartState) -> None:
    state.viewport.offset = (0.0, 0.0)
    state.viewport.scale = 1.0
    state.drag.offset = (0.0, 0.0)
    state.drag.dragging = False
    state.bounds = state.bounds.with_data(state.default_bounds)
