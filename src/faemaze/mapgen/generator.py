# src/faemaze/mapgen/generator.py
# Forest-maze generator: validate, carve, mark, open, decorate, seal, serialize.

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config import DEFAULT_CONFIG, MazeConfig
from ..errors import InvalidDimension, InvalidEntranceCount, UnsupportedGridSize
from ..grid import Grid
from ..rng import RandomSource, make_random
from ..serialize import to_text
from ..tiles import WALL
from .carve import carve_spanning_tree
from .cells import cell_dims, open_cells
from .decorate import decorate_terrain, enforce_edge_tiles
from .placement import mark_center, place_entrances

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]

@dataclass
class MazeLayout:
    grid: Grid
    cell_width: int
    cell_height: int
    goal: Optional[Coord] = None
    entrances: List[Coord] = field(default_factory=list)
    carved: List[Coord] = field(default_factory=list)
    seed: Optional[int] = None

    def to_text(self) -> str:
        return to_text(self.grid)

def validate(width: int, height: int, number_of_entrances: int) -> Tuple[int, int]:
    """Check the arguments and return the cell lattice size; nothing is allocated."""
    if width < 3 or height < 3:
        raise InvalidDimension(width, height)
    if number_of_entrances < 1:
        raise InvalidEntranceCount(number_of_entrances)
    cw, ch = cell_dims(width, height)
    if cw <= 0 or ch <= 0:
        raise UnsupportedGridSize(cw, ch)
    return cw, ch

def generate_layout(
    width: int,
    height: int,
    number_of_entrances: int,
    seed: Optional[int] = None,
    *,
    rng: Optional[RandomSource] = None,
    config: MazeConfig = DEFAULT_CONFIG,
) -> MazeLayout:
    """
    Build one maze and keep the bookkeeping (goal, entrances, carved walls).

    Stage order is fixed:
      1) wall-filled grid with cell centres opened
      2) Kruskal carve over shuffled lattice edges
      3) centre cell promoted to goal
      4) entrances in the central band of up to N sides
      5) leftover walls decorated with water/undergrowth
      6) border forced back to wall/path
    """
    cw, ch = validate(width, height, number_of_entrances)
    if rng is None:
        rng = make_random(seed)

    grid = Grid.filled(width, height, WALL)
    open_cells(grid, cw, ch)

    carved = carve_spanning_tree(grid, cw, ch, rng)
    logger.debug("carved %d walls over %dx%d cells", len(carved), cw, ch)

    goal = mark_center(grid, cw, ch)
    if goal is None:
        logger.warning("centre cell is not a path tile; no goal placed")

    entrances = place_entrances(grid, rng, number_of_entrances, config.band_divisor)
    logger.debug("entrances requested=%d opened=%s", number_of_entrances, entrances)

    placed = decorate_terrain(grid, rng, config)
    fixed = enforce_edge_tiles(grid)
    logger.debug("decorated %s, %d border tiles reset", placed, fixed)

    return MazeLayout(
        grid=grid,
        cell_width=cw,
        cell_height=ch,
        goal=goal,
        entrances=entrances,
        carved=carved,
        seed=seed,
    )

def generate(
    width: int,
    height: int,
    number_of_entrances: int,
    seed: Optional[int] = None,
    *,
    rng: Optional[RandomSource] = None,
    config: MazeConfig = DEFAULT_CONFIG,
) -> str:
    """Maze as `height` newline-joined rows of `width` tile characters."""
    layout = generate_layout(
        width, height, number_of_entrances, seed, rng=rng, config=config
    )
    return layout.to_text()
