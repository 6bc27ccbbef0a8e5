import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

from ring360.convert import to_360
from ring360.viz import plot_positions


def test_plot_positions_polar():
    fig = plot_positions([to_360(10.0), to_360(400.0), to_360(-60.0)], show=False)
    ax = fig.axes[0]
    assert ax.name == "polar"
    assert len(ax.collections[0].get_offsets()) == 3
    matplotlib.pyplot.close(fig)
