"""
Visualization utilities for the fractal garden.
"""

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.animation import FuncAnimation
from typing import List, Optional, Tuple
from pathlib import Path

from config.garden_config import GardenConfig
from rendering.surface import RecordingSurface, Segment
from .director import GardenDirector, MAX_GENERATIONS
from .ticker import ManualTicker


def grow_segments(config: GardenConfig) -> RecordingSurface:
    """Run a complete growth on a recording surface and return it."""
    surface = RecordingSurface(config.width, config.height)
    ticker = ManualTicker()
    director = GardenDirector(config, surface, ticker)
    director.start()
    ticker.run_until(lambda: director.is_complete, max_ticks=2 ** (MAX_GENERATIONS + 3))
    ticker.cancel()
    return surface


def _prepare_axes(ax, width: int, height: int):
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('equal')
    ax.axis('off')


def visualize_garden(
    segments: List[Segment],
    width: int,
    height: int,
    line_width: float = 1.0,
    figsize: Tuple[int, int] = (8, 8),
    save_path: Optional[str] = None,
    show: bool = True
):
    """Draw recorded segments with their stroke colors."""
    fig, ax = plt.subplots(figsize=figsize)

    if segments:
        lc = LineCollection(
            [[s.start, s.end] for s in segments],
            colors=[s.color for s in segments],
            linewidths=line_width
        )
        ax.add_collection(lc)

    _prepare_axes(ax, width, height)
    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor='white', edgecolor='none')
        print(f"Saved visualization to {save_path}")

    if show:
        plt.show()
    return fig, ax


def animate_growth(
    config: GardenConfig,
    interval: Optional[int] = None,
    line_width: float = 1.0,
    figsize: Tuple[int, int] = (8, 8),
    save_path: Optional[str] = None,
    show: bool = True
) -> FuncAnimation:
    """
    Preview the growth with matplotlib: every animation frame is one tick.
    """
    surface = RecordingSurface(config.width, config.height)
    ticker = ManualTicker()
    director = GardenDirector(config, surface, ticker)

    fig, ax = plt.subplots(figsize=figsize)
    _prepare_axes(ax, config.width, config.height)

    collection = LineCollection([], linewidths=line_width)
    ax.add_collection(collection)
    title = ax.set_title('Trees drawn: 0')

    def init():
        collection.set_segments([])
        return [collection]

    def update(frame_idx):
        ticker.tick()
        collection.set_segments([[s.start, s.end] for s in surface.segments])
        collection.set_color([s.color for s in surface.segments])
        title.set_text(f"Trees drawn: {director.drawn_count}")
        return [collection]

    director.start()
    anim = FuncAnimation(
        fig, update,
        frames=2 ** (MAX_GENERATIONS + 2),
        init_func=init,
        interval=interval or config.interval_ms,
        blit=False,
        repeat=False
    )

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        print("Saving animation...")
        anim.save(save_path, writer='pillow', fps=20)
        print(f"Saved animation to {save_path}")

    if show:
        plt.show()
    return anim
