from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import pytest

from scatter_chart.data_model import ChartOptions, Sample, SampleStyle
from scatter_chart.ui_state import BASE, OVERLAY
from scatter_chart.ui_state import ChartState


@dataclass
class Call:
    name: str
    layer: str
    args: Tuple[Any, ...]
    kwargs: Dict[str, Any] = field(default_factory=dict)


class RecordingSurface:
    """Stands in for TkSurface; keeps every draw call per layer."""

    def __init__(self) -> None:
        self.calls: List[Call] = []
        self.cleared: List[str] = []

    def _record(self, name, layer, *args, **kwargs) -> None:
        self.calls.append(Call(name, layer, args, kwargs))

    def clear(self, layer: str) -> None:
        self.cleared.append(layer)
        self.calls = [c for c in self.calls if c.layer != layer]

    def raise_layer(self, layer: str) -> None:
        pass

    def draw_line(self, points, *, layer=BASE, **kwargs) -> None:
        self._record("line", layer, list(points), **kwargs)

    def draw_point(self, loc, color="black", size=8, *, alpha=1.0, layer=BASE) -> None:
        self._record("point", layer, loc, color=color, size=size, alpha=alpha)

    def draw_ring(self, loc, radius, *, layer=OVERLAY, **kwargs) -> None:
        self._record("ring", layer, loc, radius, **kwargs)

    def draw_text(self, text, loc, *, layer=BASE, **kwargs) -> None:
        self._record("text", layer, text, loc, **kwargs)

    def draw_image(self, image, loc, *, alpha=1.0, layer=BASE) -> None:
        self._record("image", layer, image, loc, alpha=alpha)

    def on(self, layer: str, name: str = None) -> List[Call]:
        return [c for c in self.calls if c.layer == layer and (name is None or c.name == name)]

    def texts(self, layer: str = BASE) -> List[str]:
        return [c.args[0] for c in self.on(layer, "text")]


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def diagonal_samples():
    """Three samples on the diagonal: (0,0), (1,1), (2,2)."""
    return [
        Sample(point=(0.0, 0.0), label="a"),
        Sample(point=(1.0, 1.0), label="b"),
        Sample(point=(2.0, 2.0), label="a"),
    ]


@pytest.fixture
def styles():
    return {
        "a": SampleStyle(color="red", text="A"),
        "b": SampleStyle(color="blue", text="B"),
    }


@pytest.fixture
def options(styles):
    return ChartOptions(size=400, axes_labels=("width", "height"), styles=styles)


@pytest.fixture
def state(diagonal_samples):
    """Size 400 -> margin 40, plot area 40..360 on both axes."""
    return ChartState.create(diagonal_samples, 400)
