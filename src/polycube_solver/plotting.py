from collections.abc import Sequence

import plotly.graph_objects as go

from .types import Placement, Voxel

_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def qualitative_palette(n: int) -> list[str]:
    base = [
        "#636EFA",
        "#EF553B",
        "#00CC96",
        "#AB63FA",
        "#FFA15A",
        "#19D3F3",
        "#FF6692",
        "#B6E880",
        "#FF97FF",
        "#FECB52",
    ]
    if n <= len(base):
        return base[:n]
    return [base[i % len(base)] for i in range(n)]


def _labels_by_voxel(placements: Sequence[Placement]) -> dict[Voxel, str]:
    labels: dict[Voxel, str] = {}
    for idx, p in enumerate(placements):
        ch = _LETTERS[idx % len(_LETTERS)]
        for voxel in p.grid.occupied():
            labels[voxel] = ch
    return labels


def render_solution(size: int, placements: Sequence[Placement]) -> str:
    """Combined text dump, one letter per placed piece ('.' = empty).

    Same layout as `VoxelGrid.render`: one line per y, z-blocks side by side.
    """
    labels = _labels_by_voxel(placements)
    lines = []
    for y in range(size):
        blocks = [
            "".join(f"{labels.get((x, y, z), '.')} " for x in range(size))
            for z in range(size)
        ]
        lines.append("   ".join(blocks) + "   ")
    return "\n".join(lines) + "\n"


def print_solution(size: int, placements: Sequence[Placement]) -> None:
    for idx, p in enumerate(placements):
        ch = _LETTERS[idx % len(_LETTERS)]
        print(
            f"{ch}: piece {p.name} face={p.face} spin={p.spin} "
            f"offset={p.offset}"
        )
        print(p.grid.render())
    print(render_solution(size, placements))


def _add_voxel_cube_to_mesh(
    *,
    x0: float,
    y0: float,
    z0: float,
    size: float,
    xs: list[float],
    ys: list[float],
    zs: list[float],
    ii: list[int],
    jj: list[int],
    kk: list[int],
) -> None:
    """Append a unit cube (12 triangles) to a growing Mesh3d buffer."""
    base = len(xs)
    x1, y1, z1 = x0 + size, y0 + size, z0 + size

    verts = [
        (x0, y0, z0),
        (x0, y1, z0),
        (x1, y1, z0),
        (x1, y0, z0),
        (x0, y0, z1),
        (x0, y1, z1),
        (x1, y1, z1),
        (x1, y0, z1),
    ]
    for x, y, z in verts:
        xs.append(x)
        ys.append(y)
        zs.append(z)

    i_loc = [7, 0, 0, 0, 4, 4, 6, 6, 4, 0, 3, 2]
    j_loc = [3, 4, 1, 2, 5, 6, 5, 2, 0, 1, 6, 3]
    k_loc = [0, 7, 2, 3, 6, 7, 1, 1, 5, 5, 7, 6]
    for a, b, c in zip(i_loc, j_loc, k_loc, strict=True):
        ii.append(base + a)
        jj.append(base + b)
        kk.append(base + c)


def plot_cube_solution(size: int, placements: Sequence[Placement]) -> go.Figure:
    """Return a Plotly 3D figure of the packed cube, one mesh per piece."""
    palette = qualitative_palette(max(6, len(placements)))
    inset = 0.02  # keeps faces of adjacent cubes from z-fighting

    data: list[object] = []
    for idx, p in enumerate(placements):
        xs: list[float] = []
        ys: list[float] = []
        zs: list[float] = []
        ii: list[int] = []
        jj: list[int] = []
        kk: list[int] = []
        for x, y, z in sorted(p.grid.occupied()):
            _add_voxel_cube_to_mesh(
                x0=float(x) + inset,
                y0=float(y) + inset,
                z0=float(z) + inset,
                size=1.0 - 2 * inset,
                xs=xs,
                ys=ys,
                zs=zs,
                ii=ii,
                jj=jj,
                kk=kk,
            )
        data.append(
            go.Mesh3d(
                x=xs,
                y=ys,
                z=zs,
                i=ii,
                j=jj,
                k=kk,
                color=palette[idx],
                opacity=1.0,
                flatshading=True,
                name=p.name,
                hovertemplate=f"{p.name}<extra></extra>",
                showscale=False,
            )
        )

    fig = go.Figure(data=data)
    axis_range = [-0.25, size + 0.25]
    fig.update_layout(
        title="Cube solution",
        margin=dict(l=10, r=10, t=50, b=10),
        height=600,
        scene=dict(
            xaxis=dict(range=axis_range, dtick=1, title="x"),
            yaxis=dict(range=axis_range, dtick=1, title="y"),
            zaxis=dict(range=axis_range, dtick=1, title="z"),
            aspectmode="cube",
        ),
        showlegend=True,
    )
    return fig
