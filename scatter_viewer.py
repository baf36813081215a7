import argparse
import logging
import traceback
from pathlib import Path
from typing import List, Optional, Sequence

import tkinter as tk
from tkinter import ttk, filedialog, messagebox

from scatter_chart.chart import Chart
from scatter_chart.config import load_options, options_from_dict, options_to_dict
from scatter_chart.data_model import ICON_MODES, ChartOptions, Sample
from scatter_chart.geometry import format_number
from scatter_chart.image_utils import generate_images
from scatter_chart.sample_io import default_styles, read_samples_csv

logger = logging.getLogger("scatter_viewer")

# -----------------------------
# Options
# -----------------------------

CONFIG_PATH = Path.home() / ".scatter_viewer.json"


def build_options(
    samples: Sequence[Sample],
    options_path: Optional[Path] = None,
    *,
    icon: Optional[str] = None,
) -> ChartOptions:
    """
    Resolve chart options for a sample set.

    Options come from options_path (or CONFIG_PATH); labels the file has no
    style for get a palette default. The "image" icon mode renders glyph
    images from the styles' text.
    """
    base = load_options(options_path or CONFIG_PATH)
    styles = dict(default_styles(s.label for s in samples))
    styles.update(base.styles)

    data = options_to_dict(base)
    if icon is not None:
        data["icon"] = icon
    if data["icon"] == "image":
        styles = generate_images(styles)
    return options_from_dict(data, styles)


# -----------------------------
# Main App
# -----------------------------

class ScatterViewerApp(tk.Tk):
    def __init__(self, samples_path: Optional[Path] = None, *, options_path: Optional[Path] = None,
                 icon: Optional[str] = None):
        super().__init__()
        self.title("Scatter Viewer")
        self.resizable(False, False)

        self._options_path = options_path
        self._icon = icon
        self.chart: Optional[Chart] = None

        self._build_ui()

        if samples_path is not None:
            self.after(0, lambda: self.open_samples(samples_path))

    def _build_ui(self):
        toolbar = ttk.Frame(self, padding=(8, 8, 8, 4))
        toolbar.pack(side="top", fill="x")

        ttk.Button(toolbar, text="Open CSV…", command=self.ask_open).pack(side="left")
        ttk.Button(toolbar, text="Reset view", command=self.reset_view).pack(side="left", padx=(8, 0))
        ttk.Button(toolbar, text="Save snapshot…", command=self.save_snapshot).pack(side="left", padx=(8, 0))

        self.status_var = tk.StringVar(value="Open a CSV with x,y,label columns.")
        ttk.Label(toolbar, textvariable=self.status_var).pack(side="right", padx=(12, 0))

        self.body = ttk.Frame(self, padding=(8, 4, 8, 8))
        self.body.pack(side="top", fill="both", expand=True)

        footer = ttk.Frame(self, padding=(8, 0, 8, 8))
        footer.pack(side="bottom", fill="x")
        ttk.Label(
            footer,
            text="Tips: Drag to pan, wheel to zoom, click a point to select it (click again to clear)."
        ).pack(side="left")

    def set_status(self, msg: str):
        self.status_var.set(msg)

    def ask_open(self):
        path = filedialog.askopenfilename(
            filetypes=[("CSV files", "*.csv"), ("All files", "*.*")],
            title="Open samples…",
        )
        if path:
            self.open_samples(Path(path))

    def open_samples(self, path: Path):
        try:
            samples = read_samples_csv(path)
            options = build_options(samples, self._options_path, icon=self._icon)
            for w in list(self.body.winfo_children()):
                w.destroy()
            self.chart = Chart(self.body, samples, options, on_selection_change=self.on_selection_change)
        except (OSError, ValueError) as e:
            # ChartError is a ValueError
            logger.error("Could not open %s: %s", path, e)
            messagebox.showerror("Open failed", str(e))
            return
        self.set_status(f"{path.name}: {len(samples)} samples.")

    def on_selection_change(self, sample: Optional[Sample]):
        if sample is None:
            self.set_status("No selection.")
            return
        x, y = sample.point
        self.set_status(f"Selected {sample.label!r} at ({format_number(x, 2)}, {format_number(y, 2)}).")

    def reset_view(self):
        if self.chart is not None:
            self.chart.reset_view()

    def save_snapshot(self):
        if self.chart is None:
            messagebox.showinfo("Save snapshot", "Nothing to save yet. Open a CSV first.")
            return
        path = filedialog.asksaveasfilename(
            defaultextension=".png",
            filetypes=[("PNG images", "*.png"), ("All files", "*.*")],
            title="Save chart snapshot as…",
        )
        if not path:
            return
        try:
            self.chart.snapshot().save(path)
        except Exception as e:
            traceback.print_exc()
            messagebox.showerror("Save failed", str(e))
            return
        logger.info("Saved snapshot %s", path)
        self.set_status(f"Saved: {Path(path).name}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="scatter-viewer", description="Interactive scatter plot of labeled points.")
    p.add_argument("samples", nargs="?", type=Path, help="CSV file with x,y,label columns")
    p.add_argument("--options", type=Path, default=None, help=f"chart options JSON (default: {CONFIG_PATH})")
    p.add_argument("--icon", choices=ICON_MODES, default=None, help="marker mode, overrides the options file")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug logging")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = ScatterViewerApp(args.samples, options_path=args.options, icon=args.icon)
    app.mainloop()


if __name__ == "__main__":
    main()
