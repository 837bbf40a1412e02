"""
Pure checks over a finished composition: area, overlap, palette use.
"""
from collections import Counter
from itertools import combinations

from ..composition.schema import Cell, MondrianConfig


def total_area(cells: list[Cell]) -> int:
    return sum(c.area for c in cells)


def overlapping_pairs(cells: list[Cell]) -> list[tuple[int, int]]:
    """Index pairs (i, j), i < j, whose interiors intersect."""
    return [(i, j) for (i, a), (j, b) in combinations(enumerate(cells), 2) if a.overlaps(b)]


def color_counts(cells: list[Cell]) -> dict[str, int]:
    """Cells per color, most used first."""
    return dict(Counter(c.color for c in cells).most_common())


def missing_palette_colors(cells: list[Cell], config: MondrianConfig) -> list[str]:
    """Foreground palette colors no cell carries, in palette order."""
    present = {c.color for c in cells}
    return [color for color in dict.fromkeys(config.foreground_colors) if color not in present]


def out_of_bounds(cells: list[Cell], config: MondrianConfig) -> list[int]:
    """Indices of cells that leave the canvas or have a non-positive side."""
    bad = []
    for i, c in enumerate(cells):
        if c.width <= 0 or c.height <= 0:
            bad.append(i)
        elif c.x < 0 or c.y < 0 or c.right > config.canvas_width or c.bottom > config.canvas_height:
            bad.append(i)
    return bad
