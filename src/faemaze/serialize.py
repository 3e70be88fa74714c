"""
Text form of a maze: one line per row, one character per tile, no trailing
newline. The reader side mirrors what the game does when it loads a maze file.
"""

import logging
from typing import List, Optional, Tuple

from .errors import MazeFormatError
from .grid import Grid
from .tiles import GOAL, PATH, WALL, is_known

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]

def to_text(grid: Grid) -> str:
    return "\n".join(grid.rows())

def parse_grid(text: str) -> Grid:
    """
    Read maze text back into a Grid.
    - CR characters and blank lines are ignored
    - width is the longest line; shorter lines are padded with wall
    - unknown characters are read as wall (logged)
    """
    lines = [ln for ln in text.replace("\r", "").split("\n") if ln.strip()]
    if not lines:
        raise MazeFormatError("maze text is empty")

    width = max(len(ln) for ln in lines)
    grid = Grid.filled(width, len(lines), WALL)
    for y, line in enumerate(lines):
        for x, ch in enumerate(line):
            if not is_known(ch):
                logger.warning("unknown tile %r at (%d, %d), treating as wall", ch, x, y)
                continue
            grid.set(x, y, ch)
    return grid

def find_goal(grid: Grid) -> Optional[Coord]:
    hits = grid.coords_of(GOAL)
    return hits[0] if hits else None

def find_entrances(grid: Grid) -> List[Coord]:
    # Border path tiles, row-major.
    found = [(x, y) for (x, y) in grid.border() if grid.get(x, y) == PATH]
    return sorted(found, key=lambda c: (c[1], c[0]))
