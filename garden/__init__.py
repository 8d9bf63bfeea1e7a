"""
Fractal garden: a recursive Y-shaped tree that grows one branch per tick.
"""

from .point import Point
from .tree import Tree, trunk_end, left_child_end, right_child_end, next_trees
from .ticker import Ticker, ManualTicker, TkTicker
from .director import GardenDirector, initial_tree, MAX_GENERATIONS
from .visualization import grow_segments, visualize_garden, animate_growth

__all__ = [
    'Point',
    'Tree',
    'trunk_end',
    'left_child_end',
    'right_child_end',
    'next_trees',
    'Ticker',
    'ManualTicker',
    'TkTicker',
    'GardenDirector',
    'initial_tree',
    'MAX_GENERATIONS',
    'grow_segments',
    'visualize_garden',
    'animate_growth',
]
