#!/usr/bin/env python3
# Render maze text files to PNGs using Pillow.
# Looks for tile images under assets/tiles/ (wall.png, path.png, ...),
# falling back to flat colours.

import argparse, glob, logging, os
from PIL import Image, ImageDraw, ImageFont
from faemaze.serialize import parse_grid
from faemaze.tiles import GOAL, PATH, UNDERGROWTH, WALL, WATER

ASSET_DIR = os.path.join("assets", "tiles")

TILE_NAMES = {WALL: "wall", PATH: "path", GOAL: "heart", UNDERGROWTH: "undergrowth", WATER: "water"}
COLORS = {
    WALL: (34, 68, 34, 255),
    PATH: (194, 178, 128, 255),
    GOAL: (220, 40, 90, 255),
    UNDERGROWTH: (90, 140, 60, 255),
    WATER: (50, 110, 200, 255),
}

_cache = {}

def tile_image(tile, tile_size):
    key = (tile, tile_size)
    if key in _cache:
        return _cache[key]
    name = TILE_NAMES.get(tile)
    path = os.path.join(ASSET_DIR, f"{name}.png") if name else None
    if path and os.path.exists(path):
        img = Image.open(path).convert("RGBA")
        if img.size != (tile_size, tile_size):
            img = img.resize((tile_size, tile_size), Image.NEAREST)
    else:
        img = Image.new("RGBA", (tile_size, tile_size), color=COLORS.get(tile, (255, 0, 255, 255)))
        if tile == GOAL:
            # mark the heart so it stands out at small tile sizes
            draw = ImageDraw.Draw(img)
            font = ImageFont.load_default()
            tw = draw.textlength(tile, font=font)
            draw.text(((tile_size - tw) / 2, (tile_size - 8) / 2), tile, fill=(255, 255, 255, 255), font=font)
    _cache[key] = img
    return img

def render_grid(txt_path, out_png, tile_size=16, margin=0):
    with open(txt_path, encoding="utf-8") as f:
        grid = parse_grid(f.read())
    w, h = grid.width * tile_size + 2*margin, grid.height * tile_size + 2*margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    for y in range(grid.height):
        for x in range(grid.width):
            img = tile_image(grid.get(x, y), tile_size)
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            canvas.paste(img, (x0, y0, x0 + tile_size, y0 + tile_size), img)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("inputs", nargs="+", help="Maze .txt files or directories of them")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    ap.add_argument("--margin", type=int, default=0)
    args = ap.parse_args()
    logging.basicConfig(level=logging.WARNING)

    paths = []
    for p in args.inputs:
        paths.extend(sorted(glob.glob(os.path.join(p, "*.txt"))) if os.path.isdir(p) else [p])
    for txt in paths:
        stem = os.path.splitext(os.path.basename(txt))[0]
        render_grid(txt, os.path.join(args.outdir, f"{stem}.png"), tile_size=args.tile, margin=args.margin)
    print(f"Wrote {len(paths)} PNGs to {args.outdir}")

if __name__ == "__main__":
    main()
