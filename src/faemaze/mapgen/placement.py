# src/faemaze/mapgen/placement.py
from typing import List, Optional, Tuple
from ..grid import Grid
from ..rng import RandomSource, pick, shuffle
from ..tiles import GOAL, PATH, is_path_like
from .cells import cell_to_grid

Coord = Tuple[int, int]

def mark_center(grid: Grid, cell_width: int, cell_height: int) -> Optional[Coord]:
    """
    Promote the centre cell to the goal. Only a plain path tile is promoted;
    anything else is left alone and None is returned.
    """
    gx, gy = cell_to_grid(cell_width // 2, cell_height // 2)
    if not grid.in_bounds(gx, gy):
        return None
    if grid.get(gx, gy) != PATH:
        return None
    grid.set(gx, gy, GOAL)
    return (gx, gy)

def central_band(length: int, divisor: int = 4) -> Tuple[int, int]:
    """
    Inclusive [lo, hi] range of the middle of one side, trimming length//divisor
    from each end and never touching the corners. Falls back to the whole inner
    side when the trimmed band is empty.
    """
    margin = length // divisor
    lo = max(1, margin)
    hi = min(length - 2, length - 1 - margin)
    if lo > hi:
        lo, hi = 1, length - 2
    return lo, hi

def side_candidates(grid: Grid, divisor: int = 4) -> List[List[Coord]]:
    """
    Border positions (top, bottom, left, right) inside each side's band whose
    inward neighbour is walkable. Always four lists, some possibly empty.
    """
    w, h = grid.width, grid.height
    x_lo, x_hi = central_band(w, divisor)
    y_lo, y_hi = central_band(h, divisor)

    top = [(x, 0) for x in range(x_lo, x_hi + 1) if is_path_like(grid.get(x, 1))]
    bottom = [(x, h - 1) for x in range(x_lo, x_hi + 1) if is_path_like(grid.get(x, h - 2))]
    left = [(0, y) for y in range(y_lo, y_hi + 1) if is_path_like(grid.get(1, y))]
    right = [(w - 1, y) for y in range(y_lo, y_hi + 1) if is_path_like(grid.get(w - 2, y))]
    return [top, bottom, left, right]

def place_entrances(
    grid: Grid,
    rng: RandomSource,
    count: int,
    divisor: int = 4,
) -> List[Coord]:
    """
    Open up to `count` border tiles, at most one per side:
      1) collect the non-empty side groups
      2) shuffle the group order
      3) take the first min(count, groups) and open one random candidate each
    Returns the opened positions in selection order.
    """
    groups = [g for g in side_candidates(grid, divisor) if g]
    if not groups:
        return []
    shuffle(groups, rng)

    opened = []
    for group in groups[:min(count, len(groups))]:
        x, y = pick(rng, group)
        grid.set(x, y, PATH)
        opened.append((x, y))
    return opened
