"""
Cairo-backed drawing surface for resolution-independent output.
"""

import cairo
import numpy as np
import imageio
from pathlib import Path

from config.render_config import GardenRenderConfig
from .surface import DrawingSurface
from .utils import hex_to_rgba


class CairoSurface(DrawingSurface):
    def __init__(self, width: int, height: int, config: GardenRenderConfig = None):
        self.width = int(width)
        self.height = int(height)
        self.config = config or GardenRenderConfig()

        self.surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, self.width, self.height)
        self.ctx = cairo.Context(self.surface)
        if self.config.antialiasing:
            self.ctx.set_antialias(cairo.ANTIALIAS_BEST)
        self.ctx.set_line_width(self.config.line_width)
        self.ctx.set_line_cap(cairo.LINE_CAP_ROUND)

        self.clear_rect(0, 0, self.width, self.height)

    def begin_path(self):
        self.ctx.new_path()

    def set_stroke_style(self, color: str):
        self.ctx.set_source_rgba(*hex_to_rgba(color))

    def move_to(self, x: float, y: float):
        self.ctx.move_to(x, y)

    def line_to(self, x: float, y: float):
        self.ctx.line_to(x, y)

    def stroke(self):
        self.ctx.stroke()

    def clear_rect(self, x: float, y: float, width: float, height: float):
        ctx = self.ctx
        ctx.save()
        ctx.new_path()
        ctx.rectangle(x, y, width, height)
        ctx.set_operator(cairo.OPERATOR_SOURCE)
        ctx.set_source_rgba(*self.config.background_color)
        ctx.fill()
        ctx.restore()

    def to_numpy(self) -> np.ndarray:
        """Copy the surface into an RGBA uint8 array of shape (H, W, 4)."""
        self.surface.flush()
        buf = self.surface.get_data()
        stride = self.surface.get_stride()
        arr = np.ndarray(
            shape=(self.height, stride // 4, 4),
            dtype=np.uint8,
            buffer=buf
        )[:, :self.width, :]
        arr_copy = arr.copy()
        # Cairo stores BGRA on little-endian machines
        arr_rgba = np.zeros_like(arr_copy)
        arr_rgba[:, :, 0] = arr_copy[:, :, 2]  # R
        arr_rgba[:, :, 1] = arr_copy[:, :, 1]  # G
        arr_rgba[:, :, 2] = arr_copy[:, :, 0]  # B
        arr_rgba[:, :, 3] = arr_copy[:, :, 3]  # A
        return arr_rgba

    def save_png(self, output_path: str):
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        imageio.imwrite(output_path, self.to_numpy())
