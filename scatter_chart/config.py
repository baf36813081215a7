from __future__ import annotations

import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

from .data_model import ChartOptions, SampleStyle, StyleMap
from .errors import InvalidOptions

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

_OPTION_KEYS = {f.name for f in fields(ChartOptions)}
_STYLE_KEYS = ("color", "text")


def _style_from_dict(label: str, d: Any) -> SampleStyle:
    if isinstance(d, str):
        # shorthand: "label": "red"
        return SampleStyle(color=d)
    if not isinstance(d, dict):
        raise InvalidOptions(f"Style for {label!r} must be an object or a color string.")
    return SampleStyle(**{k: str(d[k]) for k in _STYLE_KEYS if k in d})


def options_from_dict(data: Dict[str, Any], styles: Optional[StyleMap] = None) -> ChartOptions:
    """
    Build ChartOptions from a JSON-like dict merged over the defaults.

    Unknown keys are ignored. styles, when given, wins over the dict's own
    "styles" section (e.g. styles that already carry images).
    """
    merged = {k: v for k, v in data.items() if k in _OPTION_KEYS}
    raw_styles = merged.pop("styles", None)
    if styles is None and raw_styles is not None:
        if not isinstance(raw_styles, dict):
            raise InvalidOptions("'styles' must be an object mapping label -> style.")
        styles = {label: _style_from_dict(label, s) for label, s in raw_styles.items()}
    if styles is not None:
        merged["styles"] = dict(styles)
    if "axes_labels" in merged:
        labels = merged["axes_labels"]
        if not isinstance(labels, (list, tuple)):
            raise InvalidOptions("'axes_labels' must be a list of two strings.")
        merged["axes_labels"] = tuple(labels)
    return ChartOptions(**merged)


def options_to_dict(options: ChartOptions) -> Dict[str, Any]:
    d = {f.name: getattr(options, f.name) for f in fields(options)}
    d["axes_labels"] = list(options.axes_labels)
    # images are runtime-only
    d["styles"] = {
        str(label): {k: getattr(style, k) for k in _STYLE_KEYS}
        for label, style in options.styles.items()
    }
    return d


def load_options(path: Path | str, styles: Optional[StyleMap] = None) -> ChartOptions:
    path = Path(path)
    if not path.exists():
        return options_from_dict({}, styles)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        # A corrupt file must not keep the chart from opening.
        logger.warning("Ignoring unreadable options file %s: %s", path, e)
        return options_from_dict({}, styles)
    if not isinstance(data, dict):
        logger.warning("Ignoring options file %s: top level is not an object", path)
        return options_from_dict({}, styles)
    return options_from_dict(data, styles)


def save_options(path: Path | str, options: ChartOptions) -> None:
    Path(path).write_text(json.dumps(options_to_dict(options), indent=2), encoding="utf-8")
