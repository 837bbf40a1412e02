"""
Raster renderer: cells → (H, W, 3) uint8 frame with numpy. Cells are filled, then
grid lines are painted line_thickness wide, centred on each edge and clipped to the canvas.
"""
import numpy as np

from ..composition.schema import Cell, MondrianConfig
from .grid import grid_lines


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """'#RGB' or '#RRGGBB' → (R, G, B) in 0–255."""
    h = color.strip().lstrip("#")
    if len(h) == 3:
        h = "".join(ch * 2 for ch in h)
    if len(h) != 6:
        raise ValueError(f"Expected #RGB or #RRGGBB color, got {color!r}")
    try:
        return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
    except ValueError:
        raise ValueError(f"Expected #RGB or #RRGGBB color, got {color!r}") from None


def _band(center: int, thickness: int, limit: int) -> tuple[int, int]:
    start = center - thickness // 2
    return max(0, start), min(limit, start + thickness)


def render_frame(cells: list[Cell], config: MondrianConfig) -> np.ndarray:
    """One RGB frame the size of the canvas."""
    height, width = int(config.canvas_height), int(config.canvas_width)
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    frame[:, :] = hex_to_rgb(config.color_palette[0]) if config.color_palette else (255, 255, 255)

    rgb_cache: dict[str, tuple[int, int, int]] = {}
    for c in cells:
        if c.color not in rgb_cache:
            rgb_cache[c.color] = hex_to_rgb(c.color)
        frame[c.y:c.bottom, c.x:c.right] = rgb_cache[c.color]

    line_rgb = hex_to_rgb(config.line_color)
    thickness = max(1, int(config.line_thickness))
    horizontal, vertical = grid_lines(cells)
    for y, spans in horizontal.items():
        y0, y1 = _band(y, thickness, height)
        for x0, x1 in spans:
            frame[y0:y1, max(0, x0 - thickness // 2):min(width, x1 + thickness // 2)] = line_rgb
    for x, spans in vertical.items():
        x0, x1 = _band(x, thickness, width)
        for sy0, sy1 in spans:
            frame[max(0, sy0 - thickness // 2):min(height, sy1 + thickness // 2), x0:x1] = line_rgb
    return frame
