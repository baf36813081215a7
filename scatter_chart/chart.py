from __future__ import annotations

import logging
import tkinter as tk
from typing import Callable, Optional, Sequence

import mss
from PIL import Image

from . import interaction
from .data_model import ChartOptions, Sample
from .draw import draw_full, draw_overlay
from .surface import TkSurface
from .ui_panel_chart import ChartPanel
from .ui_state import OVERLAY, ChartState, Redraw
from .viewport import reset_view

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

SelectionCallback = Callable[[Optional[Sample]], None]


class Chart:
    """
    Interactive scatter chart on a Tk canvas.

    Drag pans, the wheel zooms, hovering highlights the nearest sample and a
    click selects it (clicking the selected sample again clears the
    selection). on_selection_change is called with the new selection, or
    None, after every click that is not the end of a drag.
    """

    def __init__(
        self,
        container: tk.Widget,
        samples: Sequence[Sample],
        options: ChartOptions,
        on_selection_change: Optional[SelectionCallback] = None,
    ) -> None:
        self.options = options
        self.state = ChartState.create(samples, options.size)
        self._on_selection_change = on_selection_change

        self.panel = ChartPanel(container, size=options.size, background=options.background, actor=self)
        self.surface = TkSurface(self.panel.canvas, background=options.background)

        try:
            self.redraw(Redraw.FULL)
        except Exception:
            # leave no half-built canvas behind in the host
            self.panel.canvas.destroy()
            raise
        logger.info(
            "Chart ready: %d samples, size=%d, icon=%s",
            len(self.state.samples), options.size, options.icon,
        )

    @property
    def widget(self) -> tk.Canvas:
        return self.panel.canvas

    @property
    def selected(self) -> Optional[Sample]:
        return self.state.selection.selected

    @property
    def hovered(self) -> Optional[Sample]:
        return self.state.selection.hovered

    # ---------- public operations ----------

    def select_sample(self, sample: Optional[Sample]) -> None:
        self.redraw(interaction.select_sample(self.state, sample))

    def reset_view(self) -> None:
        reset_view(self.state)
        self.redraw(Redraw.FULL)

    def redraw(self, kind: Redraw = Redraw.FULL) -> None:
        if kind is Redraw.FULL:
            draw_full(self.surface, self.state, self.options)
        elif kind is Redraw.OVERLAY:
            draw_overlay(self.surface, self.state)
            self.surface.raise_layer(OVERLAY)

    def snapshot(self) -> Image.Image:
        """Capture what the chart canvas currently shows on screen."""
        canvas = self.panel.canvas
        canvas.update_idletasks()
        region = {
            "left": canvas.winfo_rootx(),
            "top": canvas.winfo_rooty(),
            "width": canvas.winfo_width(),
            "height": canvas.winfo_height(),
        }
        with mss.mss() as sct:
            shot = sct.grab(region)
        return Image.frombytes("RGB", (shot.width, shot.height), shot.rgb)

    # ---------- event handlers ----------

    def _on_press(self, event):
        self.redraw(interaction.pointer_down(self.state, (event.x, event.y)))

    def _on_motion(self, event):
        self.redraw(interaction.pointer_move(self.state, (event.x, event.y)))

    def _on_release(self, event):
        # Tk has no click event: a release ends the drag and then counts as a click
        self.redraw(interaction.pointer_up(self.state, (event.x, event.y)))
        if interaction.click(self.state):
            self.redraw(Redraw.FULL)
            if self._on_selection_change is not None:
                self._on_selection_change(self.state.selection.selected)

    def _on_leave(self, _event):
        self.redraw(interaction.pointer_leave(self.state))

    def _on_mouse_wheel(self, event):
        # positive Tk delta = wheel away from the user = zoom in
        if event.delta == 0:
            return "break"
        return self._on_wheel_step(event, -1 if event.delta > 0 else 1)

    def _on_wheel_step(self, _event, delta: int):
        self.redraw(interaction.scroll(self.state, delta))
        # keep the host from scrolling
        return "break"
