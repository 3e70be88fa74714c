# src/faemaze/analysis.py
# Read-only checks over a finished grid (used by the tools and the tests).

from collections import Counter, deque
from typing import List, Set, Tuple
from .grid import Grid
from .tiles import is_path_like

Coord = Tuple[int, int]
DIRS = ((1, 0), (-1, 0), (0, 1), (0, -1))

def flood_fill(grid: Grid, start: Coord) -> Set[Coord]:
    """4-way reachable path-like tiles from start (empty if start is blocked)."""
    sx, sy = start
    if not grid.in_bounds(sx, sy) or not is_path_like(grid.get(sx, sy)):
        return set()
    seen = {start}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for dx, dy in DIRS:
            nx, ny = x + dx, y + dy
            if (nx, ny) in seen or not grid.in_bounds(nx, ny):
                continue
            if is_path_like(grid.get(nx, ny)):
                seen.add((nx, ny))
                q.append((nx, ny))
    return seen

def cell_centers(grid: Grid) -> List[Coord]:
    cw, ch = (grid.width - 1) // 2, (grid.height - 1) // 2
    return [(2 * cx + 1, 2 * cy + 1) for cy in range(ch) for cx in range(cw)]

def carved_walls(grid: Grid) -> List[Coord]:
    """
    Interior walkable tiles sitting between two cells (exactly one odd
    coordinate). On a generated maze these are the Kruskal passages.
    """
    out = []
    for y in range(1, grid.height - 1):
        for x in range(1, grid.width - 1):
            if (x % 2) == (y % 2):
                continue
            if is_path_like(grid.get(x, y)):
                out.append((x, y))
    return out

def tile_census(grid: Grid) -> Counter:
    return Counter(grid.buf)
