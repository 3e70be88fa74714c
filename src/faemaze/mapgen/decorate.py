# src/faemaze/mapgen/decorate.py
from typing import Dict
from ..config import DEFAULT_CONFIG, MazeConfig
from ..grid import Grid
from ..rng import RandomSource
from ..tiles import PATH, UNDERGROWTH, WALL, WATER

def decorate_terrain(
    grid: Grid,
    rng: RandomSource,
    config: MazeConfig = DEFAULT_CONFIG,
) -> Dict[str, int]:
    """
    Recolour leftover walls, row-major. Each wall tile draws once:
    [0, water) -> water, [water, water+undergrowth) -> undergrowth, else wall.
    Non-wall tiles are skipped without drawing. Returns how many of each
    decoration were placed.
    """
    water_cut = config.water_chance
    undergrowth_cut = config.water_chance + config.undergrowth_chance
    placed = {WATER: 0, UNDERGROWTH: 0}
    buf = grid.buf
    for i, tile in enumerate(buf):
        if tile != WALL:
            continue
        roll = rng.random()
        if roll < water_cut:
            buf[i] = WATER
        elif roll < undergrowth_cut:
            buf[i] = UNDERGROWTH
        else:
            continue
        placed[buf[i]] += 1
    return placed

def enforce_edge_tiles(grid: Grid) -> int:
    # Border may only hold wall or an entrance path; returns tiles reset.
    fixed = 0
    for x, y in grid.border():
        tile = grid.get(x, y)
        if tile != PATH and tile != WALL:
            fixed += 1
        if tile != PATH:
            grid.set(x, y, WALL)
    return fixed
