import matplotlib

matplotlib.use('Agg')

import math

import pytest

from config.garden_config import GardenConfig
from garden.director import GardenDirector
from garden.point import Point
from garden.ticker import ManualTicker
from garden.tree import Tree
from rendering.surface import RecordingSurface


@pytest.fixture
def scenario_tree():
    return Tree(Point(100, 100), 100.0, 0.7, math.pi / 6, 0.0)


@pytest.fixture
def small_config():
    return GardenConfig(trunk_height=30.0, branch_ratio=0.7, branch_angle=40.0, width=120, height=120)


@pytest.fixture
def make_director():
    def _make(config=None, root=None):
        config = config or GardenConfig()
        surface = RecordingSurface(config.width, config.height)
        ticker = ManualTicker()
        return GardenDirector(config, surface, ticker, root=root), surface, ticker
    return _make
