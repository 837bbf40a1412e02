"""
Complexity enforcer: re-split the largest cells until the composition has at least
min_splits cells. Soft guarantee; gives up after a fixed number of attempts.
"""
import logging

from ..random_utils import RandomSource
from .colors import can_cut
from .partitioner import split_cell
from .schema import UNSET_COLOR, Cell, MondrianConfig, SplitTrace

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 10


def largest_cell_index(cells: list[Cell], floor: int = 1) -> int:
    """
    Index of the max-area cell that still has a side long enough to cut at `floor`;
    ties go to the first one in list order. -1 if no cell can be cut.
    """
    best, best_area = -1, -1
    for i, cell in enumerate(cells):
        if not (can_cut(cell.width, floor) or can_cut(cell.height, floor)):
            continue
        if cell.area > best_area:
            best, best_area = i, cell.area
    return best


def enforce_min_splits(
    cells: list[Cell],
    config: MondrianConfig,
    rng: RandomSource,
    *,
    max_attempts: int = MAX_ATTEMPTS,
    trace: SplitTrace | None = None,
) -> list[Cell]:
    """Return a new list with the largest cells force-split until len >= min_splits (or attempts run out)."""
    target = config.resolved_min_splits()
    result = list(cells)
    attempts = 0
    while len(result) < target and attempts < max_attempts:
        attempts += 1
        i = largest_cell_index(result, config.size_floor)
        if i < 0:
            break
        largest = result.pop(i).with_color(UNSET_COLOR)
        pieces = split_cell(largest, config, rng, depth=0, force_split=True, trace=trace)
        result[i:i] = pieces
        logger.debug(
            "Forced split %d: %dx%d at (%d, %d) -> %d cells (total %d)",
            attempts, largest.width, largest.height, largest.x, largest.y, len(pieces), len(result),
        )
    if len(result) < target:
        logger.warning(
            "Composition has %d cells after %d forced splits; wanted at least %d",
            len(result), attempts, target,
        )
    return result
