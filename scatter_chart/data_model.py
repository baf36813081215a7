from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Literal, Mapping, Optional, Tuple, TYPE_CHECKING

from .errors import InvalidOptions, MissingStyle

if TYPE_CHECKING:
    from PIL import Image


IconMode = Literal["point", "text", "image"]
ICON_MODES: Tuple[str, ...] = ("point", "text", "image")


@dataclass(frozen=True)
class Sample:
    point: Tuple[float, float]
    label: Hashable


@dataclass(frozen=True)
class SampleStyle:
    color: str = "black"
    # glyph drawn in "text" icon mode
    text: str = ""
    # PIL image drawn in "image" icon mode (see image_utils.generate_images)
    image: Optional["Image.Image"] = field(default=None, compare=False)


StyleMap = Mapping[Hashable, SampleStyle]


@dataclass(frozen=True)
class ChartOptions:
    size: int = 400
    axes_labels: Tuple[str, str] = ("x", "y")
    styles: StyleMap = field(default_factory=dict)
    icon: IconMode = "point"
    # global opacity of sample markers
    transparency: float = 1.0
    # selection halo color
    highlight_color: str = "#FFB000"
    background: str = "white"

    def __post_init__(self) -> None:
        try:
            size = int(self.size)
        except (TypeError, ValueError) as e:
            raise InvalidOptions(f"size must be an integer, got {self.size!r}.") from e
        if size <= 0:
            raise InvalidOptions(f"size must be positive, got {size}.")
        object.__setattr__(self, "size", size)

        labels = tuple(self.axes_labels)
        if len(labels) != 2:
            raise InvalidOptions(f"axes_labels needs exactly 2 entries, got {len(labels)}.")
        object.__setattr__(self, "axes_labels", (str(labels[0]), str(labels[1])))

        if self.icon not in ICON_MODES:
            raise InvalidOptions(f"icon must be one of {ICON_MODES}, got {self.icon!r}.")

        try:
            alpha = float(self.transparency)
        except (TypeError, ValueError) as e:
            raise InvalidOptions(f"transparency must be a number, got {self.transparency!r}.") from e
        if not 0.0 <= alpha <= 1.0:
            raise InvalidOptions(f"transparency must lie in [0, 1], got {alpha}.")
        object.__setattr__(self, "transparency", alpha)

    def style_for(self, label: Any) -> SampleStyle:
        try:
            return self.styles[label]
        except KeyError:
            raise MissingStyle(label) from None
