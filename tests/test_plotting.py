import plotly.graph_objects as go

from polycube_solver.plotting import (
    plot_cube_solution,
    print_solution,
    qualitative_palette,
    render_solution,
)


def test_render_solution_letters(tripod_solution):
    assert render_solution(2, tripod_solution) == (
        "A A    A B    \n"
        "A B    B B    \n"
    )


def test_render_solution_marks_empty_cells(tripod_solution):
    assert render_solution(2, tripod_solution[:1]) == (
        "A A    A .    \n"
        "A .    . .    \n"
    )


def test_print_solution(tripod_solution, capsys):
    print_solution(2, tripod_solution)
    out = capsys.readouterr().out
    assert "A: piece A face=0 spin=0 offset=(0, 0, 0)" in out
    assert "B: piece B" in out
    assert "A A    A B    " in out


def test_plot_cube_solution(tripod_solution):
    fig = plot_cube_solution(2, tripod_solution)
    assert isinstance(fig, go.Figure)
    assert [t.name for t in fig.data] == ["A", "B"]
    for trace in fig.data:
        # 4 voxels per tripod, 8 vertices and 12 triangles each
        assert len(trace.x) == 4 * 8
        assert len(trace.i) == 4 * 12
    assert fig.data[0].color != fig.data[1].color
    assert list(fig.layout.scene.xaxis.range) == [-0.25, 2.25]


def test_qualitative_palette_cycles():
    assert len(qualitative_palette(3)) == 3
    colors = qualitative_palette(12)
    assert len(colors) == 12
    assert colors[10] == colors[0]
