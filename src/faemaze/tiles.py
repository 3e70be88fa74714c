# Canonical tile characters (one per terrain kind)

WALL = "#"
PATH = "."
GOAL = "H"         # heart of the maze
UNDERGROWTH = ";"
WATER = "~"

ALL_TILES = (WALL, PATH, GOAL, UNDERGROWTH, WATER)
DECORATIONS = (UNDERGROWTH, WATER)

def is_path_like(tile: str) -> bool:
    # Walkable tiles: plain path and the goal.
    return tile == PATH or tile == GOAL

def is_known(tile: str) -> bool:
    return tile in ALL_TILES
