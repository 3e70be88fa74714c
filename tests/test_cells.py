from faemaze.grid import Grid
from faemaze.mapgen.cells import (
    Edge, build_edges, cell_dims, cell_to_grid, edge_count, open_cells, wall_between
)

def test_cell_dims():
    assert cell_dims(3, 3) == (1, 1)
    assert cell_dims(5, 5) == (2, 2)
    assert cell_dims(6, 9) == (2, 4)
    assert cell_dims(31, 21) == (15, 10)

def test_edge_list_size_and_uniqueness():
    for cw, ch in [(1, 1), (1, 5), (2, 2), (4, 3), (15, 10)]:
        edges = build_edges(cw, ch)
        assert len(edges) == edge_count(cw, ch) == cw * (ch - 1) + (cw - 1) * ch
        assert len({frozenset(e) for e in edges}) == len(edges)

def test_edges_only_join_orthogonal_neighbours():
    cw = 4
    for e in build_edges(cw, 3):
        assert e.b - e.a in (1, cw)
        if e.b - e.a == 1:
            assert e.a % cw != cw - 1

def test_edge_order_right_then_down():
    assert build_edges(2, 2) == [Edge(0, 1), Edge(0, 2), Edge(1, 3), Edge(2, 3)]

def test_wall_between_is_midpoint():
    assert cell_to_grid(1, 2) == (3, 5)
    assert wall_between(Edge(0, 1), 3) == (2, 1)
    assert wall_between(Edge(1, 4), 3) == (3, 2)

def test_open_cells_marks_odd_coordinates():
    g = Grid.filled(7, 5, "#")
    open_cells(g, *cell_dims(7, 5))
    assert g.rows() == [
        "#######",
        "#.#.#.#",
        "#######",
        "#.#.#.#",
        "#######",
    ]
