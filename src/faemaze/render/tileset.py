# src/faemaze/render/tileset.py
from __future__ import annotations
import os
import pygame
from functools import lru_cache
from typing import Dict, Tuple

from ..tiles import GOAL, PATH, UNDERGROWTH, WALL, WATER

ASSET_DIR = os.path.join("assets", "tiles")

# Filename stem per tile character (characters like '#' make poor filenames)
TILE_NAMES: Dict[str, str] = {
    WALL: "wall",
    PATH: "path",
    GOAL: "heart",
    UNDERGROWTH: "undergrowth",
    WATER: "water",
}

COLORS: Dict[str, Tuple[int, int, int, int]] = {
    WALL:        ( 34,  68,  34, 255),   # dark forest
    PATH:        (194, 178, 128, 255),   # dirt
    GOAL:        (220,  40,  90, 255),   # heart
    UNDERGROWTH: ( 90, 140,  60, 255),
    WATER:       ( 50, 110, 200, 255),
}
UNKNOWN_COLOR = (255, 0, 255, 255)

def _path_candidates(tile: str) -> Tuple[str, ...]:
    name = TILE_NAMES.get(tile, f"tile_{ord(tile)}")
    return (
        os.path.join(ASSET_DIR, f"{name}.png"),
        os.path.join(ASSET_DIR, f"tile_{name}.png"),
    )

class Tileset:
    """
    Cached tile surfaces for the viewer:
      - loads assets/tiles/<name>.png when present
      - otherwise a flat colour swatch (with the tile character on unknown tiles)
    """
    def __init__(self, tile_size: int, font=None):
        self.tile_size = tile_size
        self.font = font or pygame.font.SysFont(None, max(10, tile_size // 2))

    @lru_cache(maxsize=64)
    def get(self, tile: str) -> pygame.Surface:
        for p in _path_candidates(tile):
            if os.path.exists(p):
                return pygame.image.load(p).convert_alpha()
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(COLORS.get(tile, UNKNOWN_COLOR))
        if tile not in COLORS:
            txt = self.font.render(tile, True, (0, 0, 0))
            img.blit(txt, txt.get_rect(center=(self.tile_size // 2, self.tile_size // 2)))
        return img

    @lru_cache(maxsize=256)
    def view(self, tile: str, size: int) -> pygame.Surface:
        base = self.get(tile)
        if base.get_size() == (size, size):
            return base
        return pygame.transform.scale(base, (size, size))
