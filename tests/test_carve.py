from faemaze.analysis import carved_walls, cell_centers, flood_fill
from faemaze.grid import Grid
from faemaze.mapgen.carve import carve_spanning_tree
from faemaze.mapgen.cells import cell_dims, open_cells
from faemaze.rng import make_random

def carve(width, height, seed):
    g = Grid.filled(width, height, "#")
    cw, ch = cell_dims(width, height)
    open_cells(g, cw, ch)
    carved = carve_spanning_tree(g, cw, ch, make_random(seed))
    return g, cw, ch, carved

def test_spanning_tree_size_is_fixed():
    for (w, h) in [(3, 3), (5, 5), (6, 8), (21, 11), (31, 31)]:
        for seed in range(5):
            g, cw, ch, carved = carve(w, h, seed)
            assert len(carved) == cw * ch - 1
            assert sorted(carved_walls(g)) == sorted(carved)

def test_every_cell_reachable_and_acyclic():
    for seed in (1, 2, 3, 42):
        g, cw, ch, carved = carve(25, 17, seed)
        centers = cell_centers(g)
        reached = flood_fill(g, centers[0])
        assert all(c in reached for c in centers)
        # nodes = cells + carved walls, edges = 2 per carved wall -> a tree
        assert len(reached) == len(centers) + len(carved)

def test_topology_depends_on_seed():
    a = carve(21, 21, 1)[3]
    b = carve(21, 21, 2)[3]
    assert sorted(a) != sorted(b)

def test_border_untouched_by_carving():
    g, *_ = carve(12, 9, 5)
    assert all(g.get(x, y) == "#" for x, y in g.border())
