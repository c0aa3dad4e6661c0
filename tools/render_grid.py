#!/usr/bin/env python3
# Render generated mazes to PNGs using Pillow.

import argparse, os
from glmaze.config import GeneratorKind
from glmaze.mapgen.generator import generate_maze
from glmaze.render.image import save_png

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--generator", type=str, default="RD", help="DFS or RD")
    ap.add_argument("--size", type=int, default=21, help="Maze edge length")
    ap.add_argument("--seed", type=str, action="append", required=True,
                    help="Seed string (repeat for several mazes)")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--cell", type=int, default=8, help="Cell size in pixels")
    args = ap.parse_args()

    kind = GeneratorKind.parse(args.generator)
    for seed in args.seed:
        result = generate_maze(kind, args.size, seed)
        png = os.path.join(args.outdir, f"{kind.value.lower()}_{result.size}_{seed}.png")
        save_png(result, png, cell_px=args.cell)
        print(f"Wrote {png}")

if __name__ == "__main__":
    main()
