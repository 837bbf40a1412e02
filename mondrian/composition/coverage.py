"""
Palette coverage enforcer: recolor the whole composition, then make sure every
foreground color shows up by taking over background cells (best effort).
"""
import logging

from ..random_utils import RandomSource
from .colors import pick_cell_color
from .schema import Cell, MondrianConfig

logger = logging.getLogger(__name__)


def recolor_cells(cells: list[Cell], config: MondrianConfig, rng: RandomSource) -> list[Cell]:
    """Re-roll every cell's color with the leaf-coloring rule."""
    return [cell.with_color(pick_cell_color(config, rng)) for cell in cells]


def ensure_palette_coverage(cells: list[Cell], config: MondrianConfig, rng: RandomSource) -> list[Cell]:
    """
    Full recolor pass, then for each foreground color not present take one background
    cell (chosen at random, without replacement) and give it that color.
    Colors that find no background cell left stay unrepresented.
    """
    result = recolor_cells(cells, config, rng)
    foreground = config.foreground_colors
    if not foreground:
        return result

    background = config.background_color
    present = {cell.color for cell in result}
    candidates = [i for i, cell in enumerate(result) if cell.color == background]
    unmet: list[str] = []
    for color in dict.fromkeys(foreground):
        if color in present:
            continue
        if not candidates:
            unmet.append(color)
            continue
        i = candidates.pop(int(rng.random() * len(candidates)))
        result[i] = result[i].with_color(color)
        present.add(color)
        logger.debug("Palette coverage: cell %d recolored to %s", i, color)
    if unmet:
        logger.warning(
            "No background cells left for palette colors %s (%d cells total)",
            ", ".join(unmet), len(result),
        )
    return result
