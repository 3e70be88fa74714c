#!/usr/bin/env python3
import argparse, logging, os, sys
from faemaze.analysis import carved_walls, cell_centers, flood_fill, tile_census
from faemaze.errors import MazeError
from faemaze.mapgen.generator import generate
from faemaze.serialize import find_entrances, find_goal, parse_grid

def write_text(text, path):
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(text)

def parse_seed_range(s):
    # "10..20" (inclusive) or a single seed
    if '..' in s:
        lo, hi = s.split('..', 1)
        return range(int(lo), int(hi) + 1)
    return range(int(s), int(s) + 1)

def cmd_emit(args):
    text = generate(args.width, args.height, args.entrances, args.seed)
    if args.out:
        write_text(text, args.out)
        print(f"Wrote {args.out}")
    else:
        print(text)

def cmd_batch(args):
    os.makedirs(args.outdir, exist_ok=True)
    seeds = parse_seed_range(args.seeds)
    for seed in seeds:
        text = generate(args.width, args.height, args.entrances, seed)
        path = os.path.join(args.outdir, f"{args.width}x{args.height}_{seed:06d}.txt")
        write_text(text, path)
    print(f"Wrote {len(seeds)} mazes to {args.outdir}")

def cmd_stats(args):
    with open(args.path, encoding='utf-8') as f:
        grid = parse_grid(f.read())
    goal = find_goal(grid)
    entrances = find_entrances(grid)
    start = goal or (entrances[0] if entrances else None)
    reached = flood_fill(grid, start) if start else set()
    centers = cell_centers(grid)
    print(f"size       {grid.width}x{grid.height}")
    print(f"goal       {goal}")
    print(f"entrances  {entrances}")
    print(f"carved     {len(carved_walls(grid))}")
    print(f"reachable  {sum(1 for c in centers if c in reached)}/{len(centers)} cells")
    for tile, n in sorted(tile_census(grid).items()):
        print(f"  {tile!r:5} {n}")

def main():
    p = argparse.ArgumentParser(description="Forest maze generator")
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--width', type=int, required=True)
    p1.add_argument('--height', type=int, required=True)
    p1.add_argument('--entrances', type=int, default=1)
    p1.add_argument('--seed', type=int, default=None)
    p1.add_argument('--out', type=str, default=None)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('batch')
    p2.add_argument('--width', type=int, required=True)
    p2.add_argument('--height', type=int, required=True)
    p2.add_argument('--entrances', type=int, default=1)
    p2.add_argument('--seeds', type=str, required=True, help="e.g. 1..25")
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_batch)
    p3 = sub.add_parser('stats')
    p3.add_argument('path', type=str)
    p3.set_defaults(func=cmd_stats)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        args.func(args)
    except MazeError as e:
        sys.exit(f"error: {e}")

if __name__ == '__main__':
    main()
