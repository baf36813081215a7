from __future__ import annotations

from dataclasses import replace
from typing import Dict, Hashable, Tuple

import numpy as np
from PIL import Image, ImageColor, ImageDraw, ImageFont

from .data_model import SampleStyle, StyleMap


def to_rgb(color: str) -> Tuple[int, int, int]:
    r, g, b = ImageColor.getrgb(color)[:3]
    return int(r), int(g), int(b)


def blend_color(color: str, alpha: float, background: str = "white") -> str:
    """
    Flatten color at the given opacity onto background.

    Tk canvas vector items have no alpha channel, so marker opacity is
    realised by pre-blending against the surface background.
    """
    a = max(0.0, min(1.0, float(alpha)))
    fg = np.array(to_rgb(color), dtype=np.float64)
    bg = np.array(to_rgb(background), dtype=np.float64)
    r, g, b = np.rint(bg + (fg - bg) * a).astype(int)
    return f"#{r:02x}{g:02x}{b:02x}"


def apply_alpha(image: Image.Image, alpha: float) -> Image.Image:
    rgba = image.convert("RGBA")
    if alpha >= 1.0:
        return rgba
    arr = np.array(rgba, dtype=np.float32)
    arr[..., 3] *= max(0.0, float(alpha))
    return Image.fromarray(np.clip(arr, 0, 255).astype(np.uint8), "RGBA")


def radial_halo(color: str, radius: float, *, peak_alpha: float = 0.8) -> Image.Image:
    """
    Square RGBA image of side 2*radius: color at the center fading linearly
    to fully transparent at radius.
    """
    r = max(1, int(round(radius)))
    side = 2 * r
    yy, xx = np.mgrid[0:side, 0:side].astype(np.float64)
    # pixel centers, so the ramp is symmetric
    d = np.hypot(xx + 0.5 - r, yy + 0.5 - r) / r
    alpha = np.clip(1.0 - d, 0.0, 1.0) * (255.0 * peak_alpha)

    halo = Image.new("RGBA", (side, side), (*to_rgb(color), 0))
    halo.putalpha(Image.fromarray(alpha.astype(np.uint8), "L"))
    return halo


def glyph_image(text: str, color: str, size: int = 20) -> Image.Image:
    """Render a glyph in color on a transparent square canvas (size + 10 px)."""
    side = int(size) + 10
    mask = Image.new("L", (side, side), 0)
    draw = ImageDraw.Draw(mask)
    font = ImageFont.load_default(size=int(size))
    draw.text((side / 2, side / 2), text, fill=255, font=font, anchor="mm")

    img = Image.new("RGBA", (side, side), (*to_rgb(color), 0))
    img.putalpha(mask)
    return img


def generate_images(styles: StyleMap, size: int = 20) -> Dict[Hashable, SampleStyle]:
    """Return a copy of styles where every entry carries a rendered glyph image."""
    out: Dict[Hashable, SampleStyle] = {}
    for label, style in styles.items():
        out[label] = replace(style, image=glyph_image(style.text or "?", style.color, size))
    return out
