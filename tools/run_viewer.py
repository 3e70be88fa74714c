#!/usr/bin/env python3
# Minimal interactive viewer for generated mazes (no gameplay).
# - RIGHT/LEFT: next/previous seed
# - UP/DOWN: more/fewer entrances
# - R: random (unseeded) maze
# - F: toggle reachability overlay (tiles reachable from the heart)
# - 60 Hz fixed loop

import argparse, logging
import pygame
from faemaze.analysis import flood_fill
from faemaze.mapgen.generator import generate_layout
from faemaze.render.tileset import Tileset

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--width", type=int, default=31)
    ap.add_argument("--height", type=int, default=21)
    ap.add_argument("--entrances", type=int, default=2)
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--tile", type=int, default=20, help="Tile size in pixels")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    pygame.init()
    pygame.display.set_caption("Forest Maze Viewer")
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((args.width * args.tile, args.height * args.tile))

    tiles = Tileset(args.tile)
    seed, entrances = args.seed, args.entrances
    show_flood = False

    def load():
        return generate_layout(args.width, args.height, entrances, seed)

    layout = load()
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_RIGHT:
                    seed = (seed or 0) + 1
                    layout = load()
                elif ev.key == pygame.K_LEFT:
                    seed = max(0, (seed or 0) - 1)
                    layout = load()
                elif ev.key == pygame.K_UP:
                    entrances = min(4, entrances + 1)
                    layout = load()
                elif ev.key == pygame.K_DOWN:
                    entrances = max(1, entrances - 1)
                    layout = load()
                elif ev.key == pygame.K_r:
                    seed = None
                    layout = load()
                elif ev.key == pygame.K_f:
                    show_flood = not show_flood

        grid = layout.grid
        reach = flood_fill(grid, layout.goal) if (show_flood and layout.goal) else set()

        screen.fill((0, 0, 0))
        for y in range(grid.height):
            for x in range(grid.width):
                screen.blit(tiles.view(grid.get(x, y), args.tile), (x * args.tile, y * args.tile))
                if (x, y) in reach:
                    shade = pygame.Surface((args.tile, args.tile), pygame.SRCALPHA)
                    shade.fill((255, 255, 0, 70))
                    screen.blit(shade, (x * args.tile, y * args.tile))

        pygame.display.set_caption(
            f"Forest Maze Viewer | {grid.width}x{grid.height}  seed {seed}  entrances {len(layout.entrances)}/{entrances}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
