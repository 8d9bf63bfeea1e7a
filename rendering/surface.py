"""
The drawing-surface contract used by the garden director, and a recording
implementation that keeps every call for inspection and export.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple


class DrawingSurface(ABC):
    """Imperative 2D path API: the only operations the director issues."""

    width: int
    height: int

    @abstractmethod
    def begin_path(self):
        pass

    @abstractmethod
    def set_stroke_style(self, color: str):
        pass

    @abstractmethod
    def move_to(self, x: float, y: float):
        pass

    @abstractmethod
    def line_to(self, x: float, y: float):
        pass

    @abstractmethod
    def stroke(self):
        pass

    @abstractmethod
    def clear_rect(self, x: float, y: float, width: float, height: float):
        pass


@dataclass(frozen=True)
class Segment:
    start: Tuple[float, float]
    end: Tuple[float, float]
    color: str

    def to_dict(self) -> dict:
        return {'start': list(self.start), 'end': list(self.end), 'color': self.color}


class RecordingSurface(DrawingSurface):
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self.segments: List[Segment] = []
        self._color = '#000000'
        self._path: List[Tuple[float, float]] = []
        self._cursor: Optional[Tuple[float, float]] = None

    def begin_path(self):
        self.calls.append(('begin_path', ()))
        self._path = []
        self._cursor = None

    def set_stroke_style(self, color: str):
        self.calls.append(('set_stroke_style', (color,)))
        self._color = color

    def move_to(self, x: float, y: float):
        self.calls.append(('move_to', (x, y)))
        self._cursor = (x, y)

    def line_to(self, x: float, y: float):
        self.calls.append(('line_to', (x, y)))
        if self._cursor is not None:
            self._path.append((self._cursor, (x, y)))
        self._cursor = (x, y)

    def stroke(self):
        self.calls.append(('stroke', ()))
        self.segments.extend(Segment(start, end, self._color) for start, end in self._path)

    def clear_rect(self, x: float, y: float, width: float, height: float):
        self.calls.append(('clear_rect', (x, y, width, height)))
        self.segments = [
            s for s in self.segments
            if not (_inside(s.start, x, y, width, height) and _inside(s.end, x, y, width, height))
        ]

    @property
    def operations(self) -> List[str]:
        return [name for name, _ in self.calls]


def _inside(point: Tuple[float, float], x: float, y: float, width: float, height: float) -> bool:
    px, py = point
    return x <= px <= x + width and y <= py <= y + height
