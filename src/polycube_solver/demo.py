from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns
from matplotlib.colors import ListedColormap
from matplotlib.figure import Figure

from .types import Piece


def plot_layer(
    layer: list[list[int]],
    *,
    ax: plt.Axes,
    title: str,
    true_color: str = "#222222",
    false_color: str = "#ffffff",
) -> None:
    """Plot one z-slice of a piece as square cells (dark = occupied)."""
    data = np.clip(np.array(layer, dtype=int), 0, 1)
    cmap = ListedColormap([false_color, true_color])
    sns.heatmap(
        data,
        ax=ax,
        cmap=cmap,
        vmin=0,
        vmax=1,
        cbar=False,
        square=True,
        linewidths=0.8,
        linecolor="#cccccc",
        xticklabels=False,
        yticklabels=False,
    )
    ax.set_title(title)
    ax.set_aspect("equal")
    ax.set_xlabel("")
    ax.set_ylabel("")


def demo_validate_patterns(pieces: list[Piece], *, show: bool = True) -> Figure:
    """One row per piece, one column per z-layer."""
    if not pieces:
        raise ValueError("pieces is empty")
    sns.set_theme(style="white")

    size = pieces[0].grid.size
    nrows = len(pieces)
    fig, axes = plt.subplots(
        nrows=nrows,
        ncols=size,
        figsize=(2.4 * size, 2.4 * nrows),
        squeeze=False,
    )

    for row, piece in enumerate(pieces):
        for z in range(size):
            plot_layer(
                piece.grid.layer(z),
                ax=axes[row][z],
                title=f"Piece {piece.name} z={z}",
            )

    fig.tight_layout()
    if show:
        plt.show()
    return fig
