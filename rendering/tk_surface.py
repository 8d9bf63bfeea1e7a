"""
Drawing surface on top of a tkinter Canvas.
"""

from typing import List, Optional, Tuple

from .surface import DrawingSurface


class TkCanvasSurface(DrawingSurface):
    TAG = 'garden'

    def __init__(self, canvas, width: Optional[int] = None, height: Optional[int] = None):
        self.canvas = canvas
        self.width = int(width if width is not None else canvas.cget('width'))
        self.height = int(height if height is not None else canvas.cget('height'))
        self._color = '#000000'
        self._path: List[List[Tuple[float, float]]] = []

    def begin_path(self):
        self._path = []

    def set_stroke_style(self, color: str):
        self._color = color

    def move_to(self, x: float, y: float):
        self._path.append([(x, y)])

    def line_to(self, x: float, y: float):
        if not self._path:
            self._path.append([(x, y)])
        else:
            self._path[-1].append((x, y))

    def stroke(self):
        for polyline in self._path:
            if len(polyline) < 2:
                continue
            coords = [c for point in polyline for c in point]
            self.canvas.create_line(*coords, fill=self._color, tags=self.TAG)

    def clear_rect(self, x: float, y: float, width: float, height: float):
        if x <= 0 and y <= 0 and x + width >= self.width and y + height >= self.height:
            self.canvas.delete(self.TAG)
            return
        for item in self.canvas.find_overlapping(x, y, x + width, y + height):
            if self.TAG in self.canvas.gettags(item):
                self.canvas.delete(item)
