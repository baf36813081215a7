from __future__ import annotations

from .data_model import ChartOptions, Sample
from .errors import MissingStyle
from .geometry import format_number
from .image_utils import radial_halo
from .ui_state import BASE, OVERLAY, ChartState

AXIS_COLOR = "lightgrey"
AXIS_DASH = (5, 4)
CROSSHAIR_COLOR = "#555555"
POINT_SIZE = 8
GLYPH_SIZE = 26


def draw_full(surface, state: ChartState, options: ChartOptions) -> None:
    draw_base(surface, state, options)
    draw_overlay(surface, state)


def draw_base(surface, state: ChartState, options: ChartOptions) -> None:
    surface.clear(BASE)
    draw_axes(surface, state, options)
    draw_samples(surface, state, options)
    draw_emphasis(surface, state, options)


def draw_axes(surface, state: ChartState, options: ChartOptions) -> None:
    margin = state.margin
    size = state.size
    p = state.bounds.pixel
    x_label, y_label = options.axes_labels

    surface.draw_text(x_label, (size / 2, p.bottom + margin / 2), size=margin * 0.6)
    surface.draw_text(y_label, (p.left - margin / 2, size / 2), size=margin * 0.6, angle=90)

    surface.draw_line(
        [(p.left, p.top), (p.left, p.bottom), (p.right, p.bottom)],
        color=AXIS_COLOR, width=2, dash=AXIS_DASH,
    )

    data_min, data_max = state.bounds.corners()
    small = margin * 0.3
    surface.draw_text(format_number(data_min[0], 2), (p.left, p.bottom), size=small, anchor="nw")
    surface.draw_text(format_number(data_max[0], 2), (p.right, p.bottom), size=small, anchor="ne")
    # vertical axis values read bottom-to-top, like the axis name
    surface.draw_text(format_number(data_min[1], 2), (p.left, p.bottom), size=small, anchor="sw", angle=90)
    surface.draw_text(format_number(data_max[1], 2), (p.left, p.top), size=small, anchor="se", angle=90)


def draw_samples(surface, state: ChartState, options: ChartOptions) -> None:
    alpha = options.transparency
    for sample in state.samples:
        style = options.style_for(sample.label)
        loc = state.bounds.to_pixel(sample.point)
        if options.icon == "text":
            surface.draw_text(style.text, loc, size=GLYPH_SIZE, alpha=alpha)
        elif options.icon == "image":
            if style.image is None:
                raise MissingStyle(sample.label, "has no image for the 'image' icon mode")
            surface.draw_image(style.image, loc, alpha=alpha)
        else:
            surface.draw_point(loc, style.color, POINT_SIZE, alpha=alpha)


def _draw_halo(surface, state: ChartState, sample: Sample, color: str) -> None:
    loc = state.bounds.to_pixel(sample.point)
    surface.draw_image(radial_halo(color, state.margin), loc)


def draw_emphasis(surface, state: ChartState, options: ChartOptions) -> None:
    sel = state.selection
    if sel.hovered is not None:
        style = options.style_for(sel.hovered.label)
        _draw_halo(surface, state, sel.hovered, style.color)
    if sel.selected is not None and sel.selected is not sel.hovered:
        _draw_halo(surface, state, sel.selected, options.highlight_color)


def draw_overlay(surface, state: ChartState) -> None:
    surface.clear(OVERLAY)
    if state.pointer is None:
        return
    draw_crosshair(surface, state)


def draw_crosshair(surface, state: ChartState) -> None:
    x, y = state.pointer
    p = state.bounds.pixel
    r = state.hover_radius

    segments = [
        ((p.left, y), (x - r, y)),
        ((x + r, y), (p.right, y)),
        ((x, p.top), (x, y - r)),
        ((x, y + r), (x, p.bottom)),
    ]
    for a, b in segments:
        # segments fully swallowed by the ring (pointer near an edge) are skipped
        if (b[0] - a[0]) + (b[1] - a[1]) > 0:
            surface.draw_line([a, b], color=CROSSHAIR_COLOR, width=1, dash=(2, 2), layer=OVERLAY)
    surface.draw_ring((x, y), r, color=CROSSHAIR_COLOR, width=1, layer=OVERLAY)

    dx, dy = state.bounds.to_data((x, y))
    readout = f"{format_number(dx, 2)}, {format_number(dy, 2)}"
    surface.draw_text(
        readout, (x + r, y - r),
        size=state.margin * 0.3, anchor="sw", layer=OVERLAY,
    )
