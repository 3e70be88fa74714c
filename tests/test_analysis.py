from faemaze.analysis import carved_walls, cell_centers, flood_fill, tile_census
from faemaze.serialize import parse_grid

GRID = parse_grid("\n".join([
    "#######",
    "#...#.#",
    "#;#~#.#",
    "#.#H..#",
    "#######",
]))

def test_flood_fill_stops_at_non_walkable():
    reached = flood_fill(GRID, (1, 1))
    assert reached == {(1, 1), (2, 1), (3, 1)}
    assert (5, 3) in flood_fill(GRID, (3, 3))

def test_flood_fill_from_blocked_or_outside():
    assert flood_fill(GRID, (0, 0)) == set()
    assert flood_fill(GRID, (2, 2)) == set()
    assert flood_fill(GRID, (99, 1)) == set()

def test_cell_centers_and_carved():
    assert cell_centers(GRID) == [(1, 1), (3, 1), (5, 1), (1, 3), (3, 3), (5, 3)]
    assert carved_walls(GRID) == [(2, 1), (5, 2), (4, 3)]

def test_tile_census():
    c = tile_census(GRID)
    assert c["H"] == 1 and c[";"] == 1 and c["~"] == 1
    assert sum(c.values()) == 35
