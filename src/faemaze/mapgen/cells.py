# src/faemaze/mapgen/cells.py
# Cell lattice embedded in the tile grid: cells sit on odd coordinates,
# the even rows/columns between them are the walls Kruskal may knock out.

from typing import List, NamedTuple, Tuple
from ..grid import Grid
from ..tiles import PATH

class Edge(NamedTuple):
    a: int
    b: int

def cell_dims(width: int, height: int) -> Tuple[int, int]:
    return (width - 1) // 2, (height - 1) // 2

def cell_id(cx: int, cy: int, cell_width: int) -> int:
    return cy * cell_width + cx

def cell_of(cid: int, cell_width: int) -> Tuple[int, int]:
    return cid % cell_width, cid // cell_width

def cell_to_grid(cx: int, cy: int) -> Tuple[int, int]:
    return 2 * cx + 1, 2 * cy + 1

def edge_count(cell_width: int, cell_height: int) -> int:
    return cell_width * (cell_height - 1) + (cell_width - 1) * cell_height

def build_edges(cell_width: int, cell_height: int) -> List[Edge]:
    """
    Every lattice edge once: for each cell (row-major) its right neighbour,
    then its down neighbour.
    """
    edges = []
    for cy in range(cell_height):
        for cx in range(cell_width):
            cid = cell_id(cx, cy, cell_width)
            if cx < cell_width - 1:
                edges.append(Edge(cid, cid + 1))
            if cy < cell_height - 1:
                edges.append(Edge(cid, cid + cell_width))
    return edges

def wall_between(e: Edge, cell_width: int) -> Tuple[int, int]:
    ax, ay = cell_to_grid(*cell_of(e.a, cell_width))
    bx, by = cell_to_grid(*cell_of(e.b, cell_width))
    return (ax + bx) // 2, (ay + by) // 2

def open_cells(grid: Grid, cell_width: int, cell_height: int) -> None:
    # Cell centres start as path; the centre one may be promoted to goal later.
    for cy in range(cell_height):
        for cx in range(cell_width):
            gx, gy = cell_to_grid(cx, cy)
            grid.set(gx, gy, PATH)
