from __future__ import annotations
from typing import Iterable
from .models.ring import Ring360

def plot_positions(values: Iterable[Ring360], *, show: bool = True):
    """Minimal polar scatter of angular positions for sanity-checking."""
    import matplotlib.pyplot as plt
    values = list(values)
    thetas = [v.to_radians() for v in values]
    # one ring further out per full turn travelled
    radii = [1.0 + 0.25 * abs(v.rotations) for v in values]
    fig = plt.figure()
    ax = fig.add_subplot(projection="polar")
    # compass layout: 0° at north, clockwise
    ax.set_theta_zero_location("N")
    ax.set_theta_direction(-1)
    ax.scatter(thetas, radii, s=12)
    ax.set_title("Ring360 positions")
    if show:
        plt.show()
    return fig
