"""
Garden renderer using Cairo.
Runs a director offline with a manual ticker and captures frames as it grows.
"""

import numpy as np
import imageio
from tqdm import tqdm
from typing import List
from pathlib import Path

from config.garden_config import GardenConfig
from config.render_config import GardenRenderConfig
from garden.director import GardenDirector, MAX_GENERATIONS
from garden.ticker import ManualTicker
from .cairo_surface import CairoSurface


class GardenRenderer:
    def __init__(self, config: GardenRenderConfig = None):
        self.config = config or GardenRenderConfig()

    def _create_director(self, garden_config: GardenConfig):
        surface = CairoSurface(garden_config.width, garden_config.height, self.config)
        ticker = ManualTicker()
        director = GardenDirector(garden_config, surface, ticker)
        return director, surface, ticker

    @staticmethod
    def _max_ticks() -> int:
        # Generous upper bound on work units, including one extra generation
        # whose length can land exactly on the threshold.
        return 2 ** (MAX_GENERATIONS + 3)

    def render_frame(self, garden_config: GardenConfig) -> np.ndarray:
        """Grow the whole tree and return the final image."""
        director, surface, ticker = self._create_director(garden_config)
        director.start()
        ticker.run_until(lambda: director.is_complete, max_ticks=self._max_ticks())
        director.ticker.cancel()
        return surface.to_numpy()

    def save_frame(self, garden_config: GardenConfig, output_path: str):
        frame = self.render_frame(garden_config)
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        imageio.imwrite(output_path, frame)

    def collect_frames(self, garden_config: GardenConfig, frame_skip: int = None) -> List[np.ndarray]:
        """One frame every `frame_skip` ticks, plus the first and the final state."""
        frame_skip = max(1, frame_skip or self.config.frame_skip)
        director, surface, ticker = self._create_director(garden_config)

        frames = [surface.to_numpy()]
        director.start()
        with tqdm(total=self._max_ticks(), desc="Growing garden") as progress:
            while not director.is_complete and ticker.ticks < self._max_ticks():
                fired = ticker.tick(frame_skip)
                progress.update(fired)
                frames.append(surface.to_numpy())
        ticker.cancel()
        return frames

    def render_animation(self, garden_config: GardenConfig, output_path: str,
                         fps: int = None, frame_skip: int = None):
        """
        Render growth animation, one work unit per tick.
        """
        fps = fps or self.config.fps
        frames = self.collect_frames(garden_config, frame_skip)

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        if Path(output_path).suffix.lower() == '.gif':
            # RGB keeps the GIF palette free of an alpha channel
            imageio.mimsave(output_path, [f[:, :, :3] for f in frames], duration=1000 / fps)
        else:
            imageio.mimsave(output_path, [f[:, :, :3] for f in frames], fps=fps)
        print(f"  Saved animation: {output_path} ({len(frames)} frames)")
        return frames
