"""
Pointer / wheel handlers for the chart.

Every handler takes the chart's owned ChartState, performs the whole
transition synchronously and returns how much of the surface must be
repainted. Tk bindings live in ui_panel_chart / chart; nothing here touches
a widget.
"""
from __future__ import annotations

import logging
from typing import Optional

from .data_model import Sample
from .errors import ChartError
from .geometry import Vec
from .hit_test import update_hover
from .ui_state import ChartState, Redraw
from .viewport import begin_drag, drag_to, end_drag, zoom

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def is_dragging(state: ChartState) -> bool:
    return state.drag.dragging


def pointer_down(state: ChartState, px: Vec) -> Redraw:
    state.pointer = px
    begin_drag(state, px)
    # a press can arrive without a preceding move
    if update_hover(state):
        return Redraw.FULL
    return Redraw.NONE


def pointer_move(state: ChartState, px: Vec) -> Redraw:
    state.pointer = px
    if state.drag.dragging:
        drag_to(state, px)
        update_hover(state)
        return Redraw.FULL
    # hover halos are painted on the base layer
    if update_hover(state):
        return Redraw.FULL
    return Redraw.OVERLAY


def pointer_up(state: ChartState, px: Optional[Vec] = None) -> Redraw:
    if px is not None:
        state.pointer = px
    # bounds already reflect the candidate offset; only the commit is left
    end_drag(state)
    return Redraw.NONE


def pointer_leave(state: ChartState) -> Redraw:
    state.pointer = None
    if update_hover(state):
        return Redraw.FULL
    return Redraw.OVERLAY


def scroll(state: ChartState, delta: float) -> Redraw:
    zoom(state, delta)
    update_hover(state)
    return Redraw.FULL


def click(state: ChartState) -> bool:
    """
    Apply a click to the selection.

    Returns False when the click merely ends a drag (non-zero pending drag
    offset); otherwise the selection is toggled, replaced or cleared and the
    caller is expected to notify listeners.
    """
    if state.drag.offset != (0.0, 0.0):
        return False
    sel = state.selection
    hovered = sel.hovered
    if hovered is None:
        sel.selected = None
    elif sel.selected is hovered:
        sel.selected = None
    else:
        sel.selected = hovered
    logger.debug("selection -> %r", sel.selected)
    return True


def select_sample(state: ChartState, sample: Optional[Sample]) -> Redraw:
    if not state.owns(sample):
        raise ChartError(f"{sample!r} is not one of this chart's samples.")
    state.selection.selected = sample
    return Redraw.FULL
