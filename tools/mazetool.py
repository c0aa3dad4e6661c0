#!/usr/bin/env python3
import argparse, csv
from glmaze.config import GeneratorKind
from glmaze.mapgen.generator import generate_maze
from glmaze.mapgen.analysis import border_openings, flood_fill, is_perfect, open_cells

def write_tsv(result, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(result.size)))
        for y in range(result.size):
            w.writerow([1 if result.is_wall(x, y) else 0 for x in range(result.size)])

def cmd_emit(args):
    result = generate_maze(GeneratorKind.parse(args.generator), args.size, args.seed)
    write_tsv(result, args.out, include_header=args.header)
    print(f"Wrote {args.out} ({result.size}x{result.size})")

def cmd_check(args):
    result = generate_maze(GeneratorKind.parse(args.generator), args.size, args.seed)
    cells, size = result.cells, result.size
    opened = open_cells(cells, size)
    reached = flood_fill(cells, size, result.start)
    holes = border_openings(cells, size)
    print(f"Generator: {result.kind.label}")
    print(f"Size:      {size}")
    print(f"Start:     ({result.start.x}, {result.start.y})")
    print(f"Exit:      ({result.exit.x}, {result.exit.y}) via {result.exit_border.value}")
    print(f"Open:      {len(opened)} cells, {len(reached)} reachable from start")
    print(f"Border:    {len(holes)} opening(s)")
    ok = len(reached) == len(opened) and len(holes) == 1 and result.exit in reached
    if result.kind is GeneratorKind.DFS:
        perfect = is_perfect(cells, size)
        print(f"Perfect:   {perfect}")
        ok = ok and perfect
    print("OK" if ok else "FAILED")
    if not ok:
        raise SystemExit(1)

def main():
    p = argparse.ArgumentParser()
    sub = p.add_subparsers(dest='cmd', required=True)
    for name, func in (('emit', cmd_emit), ('check', cmd_check)):
        sp = sub.add_parser(name)
        sp.add_argument('--generator', type=str, default='RD', help='DFS or RD')
        sp.add_argument('--size', type=int, required=True)
        sp.add_argument('--seed', type=str, required=True)
        if name == 'emit':
            sp.add_argument('--out', type=str, required=True)
            sp.add_argument('--header', action='store_true')
        sp.set_defaults(func=func)
    args = p.parse_args()
    args.func(args)

if __name__ == '__main__':
    main()
