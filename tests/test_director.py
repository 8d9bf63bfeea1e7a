import math

import pytest

from config.garden_config import GardenConfig
from garden.director import (
    GardenDirector,
    initial_tree,
    MAX_GENERATIONS,
    RIGHT_BRANCH_STYLE,
    TRUNK_STYLE,
)
from garden.point import Point
from garden.tree import Tree


def test_threshold_is_seven_generations(make_director, scenario_tree):
    director, _, _ = make_director(root=scenario_tree)
    assert MAX_GENERATIONS == 7
    assert director.min_trunk_height == pytest.approx(100 * 0.7 ** 7)
    assert director.min_trunk_height == pytest.approx(8.23543)


def test_initial_tree_from_config():
    config = GardenConfig(trunk_height=80, branch_ratio=0.6, branch_angle=90, width=400, height=500)
    tree = initial_tree(config)
    assert tree.root == Point(200, 440)
    assert tree.trunk_height == 80
    assert tree.branch_ratio == 0.6
    assert tree.branch_angle == pytest.approx(math.pi / 2)
    assert tree.incline == 0.0


def test_work_draws_three_strokes(make_director, scenario_tree):
    director, surface, _ = make_director(root=scenario_tree)

    assert director.work() is True

    assert surface.operations == ['begin_path', 'set_stroke_style', 'move_to', 'line_to', 'stroke'] * 3
    styles = [args[0] for op, args in surface.calls if op == 'set_stroke_style']
    assert styles == [TRUNK_STYLE, TRUNK_STYLE, RIGHT_BRANCH_STYLE]

    trunk, left, right = surface.segments
    assert trunk.start == (100.0, 100.0)
    assert trunk.end == pytest.approx((100.0, 0.0), abs=1e-9)
    assert left.start == right.start == trunk.end
    assert right.color == RIGHT_BRANCH_STYLE


def test_children_are_queued_breadth_first(make_director, scenario_tree):
    director, _, _ = make_director(root=scenario_tree)
    director.work()

    assert director.pending == 2
    left, right = director.trees
    assert left.incline < 0 < right.incline

    director.work()
    # Left child drawn, its children appended behind the right child
    assert director.pending == 3
    assert director.trees[0] is right
    assert director.trees[1].trunk_height == pytest.approx(49.0)


def test_empty_queue_is_idle(make_director):
    director, surface, _ = make_director()
    director.trees.clear()

    assert director.work() is False
    assert surface.calls == []
    assert director.work_count == 0


def test_small_tree_is_discarded_without_drawing(make_director, scenario_tree):
    director, surface, _ = make_director(root=scenario_tree)
    director.trees.clear()
    director.trees.append(Tree(Point(0, 0), 5.0, 0.7, 0.5, 0.0))

    assert director.work() is False
    assert surface.calls == []
    assert director.is_complete
    assert director.work_count == 1


def test_exact_ratio_grows_every_generation(make_director):
    # Powers of two are exact: the eighth generation lands on the threshold
    root = Tree(Point(0, 0), 100.0, 0.5, 0.4, 0.0)
    director, _, ticker = make_director(root=root)

    director.start()
    ticker.run_until(lambda: director.is_complete, max_ticks=10_000)

    assert director.drawn_count == 2 ** 8 - 1
    assert director.work_count == 2 ** 9 - 1


@pytest.mark.parametrize('ratio', [0.3, 0.5, 0.618, 0.7, 0.9, 0.99])
def test_growth_terminates(make_director, ratio):
    config = GardenConfig(branch_ratio=ratio)
    director, surface, ticker = make_director(config=config)

    director.start()
    ticker.run_until(lambda: director.is_complete, max_ticks=10_000)

    assert director.is_complete
    assert ticker.ticks <= 2 ** 9 - 1
    assert director.drawn_count in (2 ** 7 - 1, 2 ** 8 - 1)
    assert director.work_count == 2 * director.drawn_count + 1
    assert len(surface.segments) == 3 * director.drawn_count


def test_drawn_trunks_never_below_threshold(make_director, scenario_tree):
    director, surface, ticker = make_director(root=scenario_tree)
    director.start()
    ticker.run_until(lambda: director.is_complete)

    trunks = surface.segments[0::3]
    lengths = [math.dist(s.start, s.end) for s in trunks]
    assert min(lengths) >= director.min_trunk_height - 1e-9
    assert max(lengths) == pytest.approx(100.0)
    # Generations 0 through 6 are always drawn
    assert director.drawn_count >= 2 ** 7 - 1


def test_start_uses_interval_and_is_idempotent(make_director):
    director, _, ticker = make_director()

    director.start()
    director.start()
    assert director.running
    assert ticker.interval_ms == 10

    ticker.tick()
    assert director.work_count == 1
    assert director.drawn_count == 1


def test_stop_resets_everything(make_director):
    config = GardenConfig()
    director, surface, ticker = make_director(config=config)
    director.start()
    ticker.tick(5)
    assert surface.segments

    director.stop()

    assert not director.running
    assert director.is_complete
    assert surface.calls[-1] == ('clear_rect', (0, 0, config.width, config.height))
    assert surface.segments == []
    assert ticker.tick() == 0


def test_stop_twice_matches_stop_once(make_director):
    director, surface, ticker = make_director()
    director.start()
    ticker.tick(3)

    director.stop()
    state = (director.running, director.pending, list(surface.segments), director.work_count)
    director.stop()

    assert (director.running, director.pending, list(surface.segments), director.work_count) == state
    assert surface.operations[-2:] == ['clear_rect', 'clear_rect']


def test_stop_when_idle_only_clears(make_director):
    director, surface, _ = make_director()
    director.stop()

    assert surface.operations == ['clear_rect']
    assert not director.running
    assert director.pending == 0
