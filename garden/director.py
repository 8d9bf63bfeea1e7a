"""
GardenDirector - grows the fractal tree one descriptor per tick.

The director owns a FIFO queue of Tree descriptors seeded with a single root.
Each tick pops the front descriptor, draws it and appends its two children,
so the tree grows breadth-first. Descriptors shorter than the root trunk
scaled by branch_ratio ** MAX_GENERATIONS are dropped without drawing, which
ends the recursion.
"""

from collections import deque
from typing import TYPE_CHECKING, Deque, Optional

from config.garden_config import GardenConfig
from .point import Point
from .ticker import Ticker
from .tree import Tree, next_trees

if TYPE_CHECKING:
    from rendering.surface import DrawingSurface

MAX_GENERATIONS = 7

TRUNK_STYLE = '#333344'
RIGHT_BRANCH_STYLE = '#AA3340'


def initial_tree(config: GardenConfig) -> Tree:
    """The root descriptor for a garden configuration."""
    return Tree(
        Point(*config.root_position),
        config.trunk_height,
        config.branch_ratio,
        config.branch_angle_radians,
        0.0,
    )


class GardenDirector:
    def __init__(
        self,
        config: GardenConfig,
        surface: 'DrawingSurface',
        ticker: Ticker,
        root: Optional[Tree] = None,
    ):
        self.config = config
        self.surface = surface
        self.ticker = ticker

        root = root if root is not None else initial_tree(config)
        self.trees: Deque[Tree] = deque([root])
        self.min_trunk_height = root.trunk_height * root.branch_ratio ** MAX_GENERATIONS

        self.work_count = 0
        self.drawn_count = 0

    @property
    def running(self) -> bool:
        return self.ticker.running

    @property
    def pending(self) -> int:
        return len(self.trees)

    @property
    def is_complete(self) -> bool:
        return not self.trees

    def work(self) -> bool:
        """
        Draw a single tree and plan the next trees.
        Returns True if a tree was drawn.
        """
        if not self.trees:
            return False

        tree = self.trees.popleft()
        self.work_count += 1
        if tree.trunk_height < self.min_trunk_height:
            return False

        self.draw_tree(tree)
        self.trees.extend(next_trees(tree))
        self.drawn_count += 1
        return True

    def draw_tree(self, tree: Tree):
        p0, p1, p2, p3 = tree.p0, tree.p1, tree.p2, tree.p3
        self._draw_line(p0, p1, TRUNK_STYLE)
        self._draw_line(p1, p2, TRUNK_STYLE)
        self._draw_line(p1, p3, RIGHT_BRANCH_STYLE)

    def _draw_line(self, start: Point, end: Point, style: str):
        surface = self.surface
        surface.begin_path()
        surface.set_stroke_style(style)
        surface.move_to(start.x, start.y)
        surface.line_to(end.x, end.y)
        surface.stroke()

    def start(self):
        """Begin growing. Has no effect while already running."""
        if self.running:
            return
        self.ticker.start(self.config.interval_ms, self.work)

    def stop(self):
        """Cancel the ticks, drop unfinished trees and blank the surface."""
        self.ticker.cancel()
        self.trees.clear()
        self.surface.clear_rect(0, 0, self.surface.width, self.surface.height)
