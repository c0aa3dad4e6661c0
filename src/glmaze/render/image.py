# src/glmaze/render/image.py
# Top-down PNG of a generated maze using Pillow. One square per cell.

import os

from PIL import Image, ImageDraw

from .colors import COLORS, cell_kind


def render_maze(result, cell_px: int = 8, margin: int = 0) -> Image.Image:
    if cell_px < 1:
        raise ValueError("cell_px must be >= 1")
    side = result.size * cell_px + 2 * margin
    canvas = Image.new("RGBA", (side, side), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    for y in range(result.size):
        for x in range(result.size):
            x0 = margin + x * cell_px
            y0 = margin + y * cell_px
            draw.rectangle((x0, y0, x0 + cell_px - 1, y0 + cell_px - 1),
                           fill=COLORS[cell_kind(result, x, y)])
    return canvas


def save_png(result, out_png: str, cell_px: int = 8, margin: int = 0) -> None:
    folder = os.path.dirname(out_png)
    if folder:
        os.makedirs(folder, exist_ok=True)
    render_maze(result, cell_px=cell_px, margin=margin).save(out_png)
