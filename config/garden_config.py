"""
Configuration for the fractal garden.

The host supplies the trunk height, the branch ratio, the branch angle
(degrees) and the canvas size. All output paths are derived from output_dir.
"""

from dataclasses import dataclass, asdict
from typing import Tuple
from pathlib import Path
import json
import math


@dataclass
class GardenConfig:
    # ==================== TREE SETTINGS ====================
    trunk_height: float = 120.0   # pixels
    branch_ratio: float = 0.7     # shrink factor per generation, in (0, 1)
    branch_angle: float = 30.0    # spread between the two children, degrees

    # ==================== CANVAS SETTINGS ====================
    width: int = 600
    height: int = 600

    # ==================== SCHEDULING ====================
    interval_ms: int = 10

    # ==================== OUTPUT SETTINGS ====================
    output_dir: str = 'outputs/garden'

    def __post_init__(self):
        for name in ('trunk_height', 'branch_ratio', 'branch_angle', 'width', 'height', 'interval_ms'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")

        if self.trunk_height <= 0:
            raise ValueError(f"trunk_height must be positive, got {self.trunk_height}")
        if not 0 < self.branch_ratio < 1:
            raise ValueError(f"branch_ratio must be between 0 and 1, got {self.branch_ratio}")
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be positive, got {self.height}")
        if self.interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {self.interval_ms}")

    @property
    def branch_angle_radians(self) -> float:
        return self.branch_angle * math.pi / 180

    @property
    def root_position(self) -> Tuple[float, float]:
        """Horizontally centered, near the bottom of the canvas."""
        return (self.width / 2, self.height * 0.88)

    # ==================== DERIVED PATHS ====================
    @property
    def output_path(self) -> Path:
        return Path(self.output_dir)

    @property
    def animation_path(self) -> Path:
        return self.output_path / 'garden_growth.gif'

    @property
    def frame_path(self) -> Path:
        return self.output_path / 'garden_final.png'

    @property
    def plot_path(self) -> Path:
        return self.output_path / 'garden_plot.png'

    @property
    def render_data_path(self) -> Path:
        return self.output_path / 'garden_render_data.json'

    def create_output_dirs(self):
        self.output_path.mkdir(parents=True, exist_ok=True)


def load_config(path: str = 'config/garden.json') -> GardenConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return GardenConfig()

    with open(config_path, 'r') as f:
        data = json.load(f)

    return GardenConfig(**data)


def save_config(config: GardenConfig, path: str = 'config/garden.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        json.dump(asdict(config), f, indent=2)

    print(f"Saved config to {config_path}")
