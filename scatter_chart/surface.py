from __future__ import annotations

import tkinter as tk
from typing import Dict, List, Optional, Sequence, Tuple

from PIL import Image, ImageTk

from .geometry import Vec
from .image_utils import apply_alpha, blend_color
from .ui_state import BASE, LAYERS, OVERLAY

FONT_FAMILY = "Courier"


class TkSurface:
    """
    Drawing surface over a tk.Canvas with two layers.

    Layers are canvas tags: the base layer holds axes, markers and halos, the
    overlay holds pointer feedback and always sits above the base. Clearing a
    layer deletes only that tag, so an overlay repaint leaves the base items
    untouched.
    """

    def __init__(self, canvas: tk.Canvas, *, background: str = "white") -> None:
        self.canvas = canvas
        self.background = background
        # PhotoImages must stay referenced while displayed
        self._photos: Dict[str, List[ImageTk.PhotoImage]] = {layer: [] for layer in LAYERS}

    def clear(self, layer: str) -> None:
        self.canvas.delete(layer)
        self._photos[layer] = []

    def raise_layer(self, layer: str) -> None:
        self.canvas.tag_raise(layer)

    def _fill(self, color: str, alpha: float) -> str:
        if alpha >= 1.0:
            return color
        return blend_color(color, alpha, self.background)

    def draw_line(
        self,
        points: Sequence[Vec],
        *,
        color: str = "black",
        width: float = 1,
        dash: Optional[Tuple[int, ...]] = None,
        layer: str = BASE,
    ) -> None:
        flat = [v for xy in points for v in xy]
        opts = {"fill": color, "width": width, "tags": (layer,)}
        if dash:
            opts["dash"] = dash
        self.canvas.create_line(*flat, **opts)

    def draw_point(
        self,
        loc: Vec,
        color: str = "black",
        size: float = 8,
        *,
        alpha: float = 1.0,
        layer: str = BASE,
    ) -> None:
        x, y = loc
        r = size / 2
        self.canvas.create_oval(
            x - r, y - r, x + r, y + r,
            fill=self._fill(color, alpha), outline="",
            tags=(layer,),
        )

    def draw_ring(
        self,
        loc: Vec,
        radius: float,
        *,
        color: str = "black",
        width: float = 1,
        layer: str = OVERLAY,
    ) -> None:
        x, y = loc
        self.canvas.create_oval(
            x - radius, y - radius, x + radius, y + radius,
            outline=color, width=width, fill="",
            tags=(layer,),
        )

    def draw_text(
        self,
        text: str,
        loc: Vec,
        *,
        size: float = 10,
        color: str = "black",
        anchor: str = "center",
        angle: float = 0.0,
        alpha: float = 1.0,
        layer: str = BASE,
    ) -> None:
        x, y = loc
        self.canvas.create_text(
            x, y,
            text=text,
            # negative size: pixels rather than points
            font=(FONT_FAMILY, -max(1, int(round(size))), "bold"),
            fill=self._fill(color, alpha),
            anchor=anchor,
            angle=angle,
            tags=(layer,),
        )

    def draw_image(
        self,
        image: Image.Image,
        loc: Vec,
        *,
        alpha: float = 1.0,
        layer: str = BASE,
    ) -> None:
        photo = ImageTk.PhotoImage(apply_alpha(image, alpha), master=self.canvas)
        self._photos[layer].append(photo)
        x, y = loc
        self.canvas.create_image(x, y, image=photo, anchor="center", tags=(layer,))
