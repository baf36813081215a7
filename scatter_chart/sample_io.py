from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Dict, Hashable, Iterable, List, Sequence

from .data_model import Sample, SampleStyle

PALETTE = (
    "#1f77b4", "#d62728", "#2ca02c", "#ff7f0e", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
)


def samples_from_rows(rows: Iterable[Dict[str, str]]) -> List[Sample]:
    samples: List[Sample] = []
    # header is line 1
    for lineno, row in enumerate(rows, start=2):
        if row.get(None):
            raise ValueError(f"Line {lineno}: more fields than the header.")
        if not any((v or "").strip() for k, v in row.items() if k is not None):
            continue
        try:
            x = float(row["x"])
            y = float(row["y"])
        except (TypeError, ValueError) as e:
            raise ValueError(f"Line {lineno}: x and y must be numbers ({e}).") from e
        samples.append(Sample(point=(x, y), label=(row.get("label") or "").strip()))
    return samples


def _reader(f) -> csv.DictReader:
    reader = csv.DictReader(f)
    cols = {c.strip().lower() for c in (reader.fieldnames or [])}
    missing = {"x", "y", "label"} - cols
    if missing:
        raise ValueError(f"CSV header is missing column(s): {', '.join(sorted(missing))}.")
    reader.fieldnames = [c.strip().lower() for c in reader.fieldnames]
    return reader


def samples_from_csv_string(text: str) -> List[Sample]:
    return samples_from_rows(_reader(io.StringIO(text)))


def read_samples_csv(path: Path | str) -> List[Sample]:
    with open(path, "r", newline="", encoding="utf-8") as f:
        return samples_from_rows(_reader(f))


def samples_to_csv_string(samples: Sequence[Sample], delimiter: str = ",") -> str:
    buf = io.StringIO()
    w = csv.writer(buf, delimiter=delimiter, lineterminator="\n")
    w.writerow(["x", "y", "label"])
    for s in samples:
        w.writerow([s.point[0], s.point[1], s.label])
    return buf.getvalue().rstrip()


def write_samples_csv(path: Path | str, samples: Sequence[Sample], delimiter: str = ",") -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        f.write(samples_to_csv_string(samples, delimiter) + "\n")


def default_styles(labels: Iterable[Hashable]) -> Dict[Hashable, SampleStyle]:
    """One palette color and a first-letter glyph per distinct label, in first-seen order."""
    styles: Dict[Hashable, SampleStyle] = {}
    for label in labels:
        if label in styles:
            continue
        color = PALETTE[len(styles) % len(PALETTE)]
        glyph = (str(label)[:1] or "?").upper()
        styles[label] = SampleStyle(color=color, text=glyph)
    return styles
