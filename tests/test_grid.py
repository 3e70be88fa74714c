from faemaze.grid import Grid

def test_row_major_addressing():
    g = Grid.filled(4, 3, "#")
    g.set(3, 2, ".")
    assert g.idx(3, 2) == 11
    assert g.buf[11] == "."
    assert g.rows() == ["####", "####", "###."]

def test_border_visits_each_edge_tile_once():
    g = Grid.filled(5, 4, "#")
    coords = list(g.border())
    assert len(coords) == len(set(coords)) == 2 * 5 + 2 * (4 - 2)
    assert all(g.is_border(x, y) for x, y in coords)
    assert not g.is_border(1, 1)

def test_as_matrix_and_coords_of():
    g = Grid.filled(3, 3, "#")
    g.set(1, 1, "H")
    assert g.as_matrix()[1] == ["#", "H", "#"]
    assert g.coords_of("H") == [(1, 1)]
