"""
Configuration for rendering module.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class GardenRenderConfig:
    background_color: Tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    line_width: float = 1.0

    fps: int = 30
    frame_skip: int = 2  # ticks between recorded frames

    antialiasing: bool = True
