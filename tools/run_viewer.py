#!/usr/bin/env python3
# Minimal top-down viewer for generated mazes (no gameplay).
# - N: regenerate with a fresh random seed
# - G: toggle generator (DFS <-> RD)
# - ESC: quit

import argparse
import pygame
from glmaze.config import GeneratorKind, MazeConfig, random_seed
from glmaze.mapgen.generator import MazeGenerator
from glmaze.render.palette import CellPalette

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--generator", type=str, default="RD", help="DFS or RD")
    ap.add_argument("--size", type=int, default=20, help="Maze edge length")
    ap.add_argument("--seed", type=str, default="", help="Seed (random if empty)")
    ap.add_argument("--cell", type=int, default=16, help="Cell size in pixels")
    args = ap.parse_args()

    config = MazeConfig(GeneratorKind.parse(args.generator), args.size, args.seed).resolved()

    pygame.init()
    clock = pygame.time.Clock()
    palette = CellPalette(args.cell)

    def build(cfg):
        result = MazeGenerator.from_config(cfg).generate()
        side = result.size * args.cell
        return result, pygame.display.set_mode((side, side))

    result, screen = build(config)
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_n:
                    config = MazeConfig(config.kind, config.size, random_seed())
                    result, screen = build(config)
                elif ev.key == pygame.K_g:
                    other = GeneratorKind.DFS if config.kind is GeneratorKind.RD else GeneratorKind.RD
                    config = MazeConfig(other, config.size, config.seed)
                    result, screen = build(config)

        screen.fill((0, 0, 0))
        palette.blit_maze(screen, result)
        pygame.display.set_caption(
            f"glmaze viewer - {config.kind.label}  size {result.size}  seed {config.seed}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
