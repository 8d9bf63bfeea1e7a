import matplotlib.pyplot as plt

from garden.visualization import grow_segments, visualize_garden


def test_grow_segments_draws_whole_tree(small_config):
    surface = grow_segments(small_config)

    assert len(surface.segments) % 3 == 0
    assert len(surface.segments) // 3 in (2 ** 7 - 1, 2 ** 8 - 1)
    assert surface.segments[0].start == small_config.root_position


def test_visualize_garden_saves_plot(tmp_path, small_config):
    surface = grow_segments(small_config)
    path = tmp_path / 'plots' / 'garden.png'

    fig, ax = visualize_garden(surface.segments, small_config.width, small_config.height,
                               save_path=str(path), show=False)

    assert path.exists()
    assert len(ax.collections) == 1
    plt.close(fig)


def test_visualize_empty_garden(small_config):
    fig, ax = visualize_garden([], small_config.width, small_config.height, show=False)
    assert len(ax.collections) == 0
    plt.close(fig)
