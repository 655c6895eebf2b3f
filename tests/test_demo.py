import matplotlib.pyplot as plt
import pytest

from polycube_solver.demo import demo_validate_patterns


def test_demo_builds_one_axis_per_layer(tripod_pieces):
    fig = demo_validate_patterns(tripod_pieces, show=False)
    try:
        assert len(fig.axes) == 2 * 2
        assert fig.axes[0].get_title() == "Piece A z=0"
        assert fig.axes[3].get_title() == "Piece B z=1"
    finally:
        plt.close(fig)


def test_demo_rejects_empty():
    with pytest.raises(ValueError):
        demo_validate_patterns([], show=False)
