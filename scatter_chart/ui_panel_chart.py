from __future__ import annotations

import tkinter as tk


class ChartPanel:
    def __init__(self, parent: tk.Widget, *, size: int, background: str, actor) -> None:
        self.actor = actor

        canvas = tk.Canvas(
            parent,
            width=size,
            height=size,
            background=background,
            highlightthickness=0,
        )
        self.canvas = canvas
        canvas.pack(side="top")

        canvas.bind("<ButtonPress-1>", actor._on_press)
        canvas.bind("<Motion>", actor._on_motion)
        canvas.bind("<B1-Motion>", actor._on_motion)
        canvas.bind("<ButtonRelease-1>", actor._on_release)
        canvas.bind("<Leave>", actor._on_leave)
        canvas.bind("<MouseWheel>", actor._on_mouse_wheel)
        # X11 delivers the wheel as buttons 4 (away) and 5 (towards)
        canvas.bind("<Button-4>", lambda e: actor._on_wheel_step(e, -1))
        canvas.bind("<Button-5>", lambda e: actor._on_wheel_step(e, 1))
