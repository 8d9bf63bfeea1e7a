"""
Fractal Garden
A tkinter window with the tree parameters, a canvas and Start/Stop buttons.
"""

import tkinter as tk
from tkinter import messagebox

from config.garden_config import GardenConfig
from garden.director import GardenDirector
from garden.ticker import TkTicker
from rendering.tk_surface import TkCanvasSurface

CANVAS_SIZE = 600


class GardenApp:

    def __init__(self, root, defaults: GardenConfig = None):
        self.root = root
        self.root.title("Fractal Garden")
        self.defaults = defaults or GardenConfig(width=CANVAS_SIZE, height=CANVAS_SIZE)
        self.director = None

        self.setup_ui()

    def setup_ui(self):
        main_frame = tk.Frame(self.root)
        main_frame.pack(padx=10, pady=10)

        canvas_frame = tk.Frame(main_frame, relief=tk.SUNKEN, borderwidth=2)
        canvas_frame.grid(row=0, column=0, rowspan=10, padx=(0, 10))

        self.canvas = tk.Canvas(canvas_frame, width=self.defaults.width,
                                height=self.defaults.height, bg='white')
        self.canvas.pack()

        controls_frame = tk.Frame(main_frame)
        controls_frame.grid(row=0, column=1, sticky='n')

        self.trunk_height = self._add_entry(controls_frame, "Trunk Height (px):", self.defaults.trunk_height)
        self.branch_ratio = self._add_entry(controls_frame, "Branch Ratio:", self.defaults.branch_ratio)
        self.branch_angle = self._add_entry(controls_frame, "Branch Angle (deg):", self.defaults.branch_angle)

        tk.Button(controls_frame, text="Start", command=self.start, width=15).pack(pady=(20, 5))
        tk.Button(controls_frame, text="Stop", command=self.stop, width=15).pack(pady=5)

    def _add_entry(self, parent, label: str, value) -> tk.Entry:
        tk.Label(parent, text=label).pack(pady=(10, 2), anchor='w')
        entry = tk.Entry(parent, width=15)
        entry.insert(0, str(value))
        entry.pack()
        return entry

    def read_config(self) -> GardenConfig:
        return GardenConfig(
            trunk_height=float(self.trunk_height.get()),
            branch_ratio=float(self.branch_ratio.get()),
            branch_angle=float(self.branch_angle.get()),
            width=int(self.canvas.cget('width')),
            height=int(self.canvas.cget('height')),
            interval_ms=self.defaults.interval_ms,
        )

    def start(self):
        if self.director is None:
            try:
                config = self.read_config()
            except ValueError as e:
                messagebox.showerror("Invalid parameters", str(e))
                return
            surface = TkCanvasSurface(self.canvas, config.width, config.height)
            self.director = GardenDirector(config, surface, TkTicker(self.root))
        self.director.start()

    def stop(self):
        if self.director is not None:
            self.director.stop()
        self.director = None


def main():
    root = tk.Tk()
    root.resizable(False, False)
    app = GardenApp(root)
    root.mainloop()


if __name__ == '__main__':
    main()
