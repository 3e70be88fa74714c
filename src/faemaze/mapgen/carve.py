# src/faemaze/mapgen/carve.py
# Randomized Kruskal: shuffle the lattice edges, open the wall of every edge
# that joins two separate components.

from typing import List, Tuple
from ..grid import Grid
from ..rng import RandomSource, shuffle
from ..tiles import PATH
from .cells import build_edges, wall_between
from .disjoint_set import DisjointSet

def carve_spanning_tree(
    grid: Grid,
    cell_width: int,
    cell_height: int,
    rng: RandomSource,
) -> List[Tuple[int, int]]:
    """
    Carve a spanning tree over the cell lattice and return the opened wall
    tiles in carve order. Always cell_width*cell_height - 1 of them; only which
    walls get opened depends on the shuffle.
    """
    edges = build_edges(cell_width, cell_height)
    shuffle(edges, rng)

    dsu = DisjointSet.of_size(cell_width * cell_height)
    carved = []
    for e in edges:
        if not dsu.union(e.a, e.b):
            continue
        wx, wy = wall_between(e, cell_width)
        grid.set(wx, wy, PATH)
        carved.append((wx, wy))
    return carved
