"""
Recursive partitioner: one cell in, a flat list of colored leaf cells out.
Cells are split 2 or 4 ways at 1/2, 1/3 or 2/3 of a side until depth, size or the
split draw stops them. No tree is kept; children are concatenated in place.
"""
import logging

from ..random_utils import RandomSource, chance
from .colors import can_cut, cut_position, pick_cell_color, pick_cut_ratio
from .schema import Cell, MondrianConfig, SplitTrace

logger = logging.getLogger(__name__)

# Aspect ratios (width / height) beyond which the cut direction is no longer random
WIDE_ASPECT = 1.3
TALL_ASPECT = 0.7
FOUR_WAY_PROBABILITY = 0.4


def split_cell(
    cell: Cell,
    config: MondrianConfig,
    rng: RandomSource,
    depth: int = 0,
    force_split: bool = False,
    trace: SplitTrace | None = None,
) -> list[Cell]:
    """
    Partition `cell` and return its colored leaves in a fixed order.
    force_split bypasses the depth/size/probability stop checks for this call only
    (the complexity enforcer uses it); the cell still stays whole if no side can be cut.
    """
    if not force_split and _should_stop(cell, config, rng, depth):
        return [_leaf(cell, config, rng)]

    floor = config.size_floor
    cut_x = can_cut(cell.width, floor)
    cut_y = can_cut(cell.height, floor)
    if not cut_x and not cut_y:
        if force_split:
            logger.debug("No valid cut for %dx%d cell (floor %d); keeping it whole", cell.width, cell.height, floor)
        return [_leaf(cell, config, rng)]

    if cut_x and cut_y and _wants_four_way(cell, config, rng, depth):
        children = _split_four(cell, rng, floor)
    else:
        children = _split_two(cell, rng, floor, cut_x, cut_y)

    if trace is not None:
        trace.record(depth, len(children), force_split)

    leaves: list[Cell] = []
    for child in children:
        leaves.extend(split_cell(child, config, rng, depth + 1, trace=trace))
    return leaves


def _should_stop(cell: Cell, config: MondrianConfig, rng: RandomSource, depth: int) -> bool:
    if depth >= config.max_depth:
        return True
    min_side = config.min_cell_size * 1.5
    if cell.width < min_side or cell.height < min_side:
        return True
    return not chance(rng, config.split_probability)


def _wants_four_way(cell: Cell, config: MondrianConfig, rng: RandomSource, depth: int) -> bool:
    limit = config.min_cell_size * 3
    if cell.width <= limit or cell.height <= limit:
        return False
    if depth >= config.max_depth - 1:
        return False
    return chance(rng, FOUR_WAY_PROBABILITY)


def _split_four(cell: Cell, rng: RandomSource, floor: int) -> list[Cell]:
    """Top-left, top-right, bottom-left, bottom-right."""
    sx = cut_position(cell.x, cell.width, pick_cut_ratio(rng), floor)
    sy = cut_position(cell.y, cell.height, pick_cut_ratio(rng), floor)
    left_w, right_w = sx - cell.x, cell.right - sx
    top_h, bottom_h = sy - cell.y, cell.bottom - sy
    return [
        Cell(cell.x, cell.y, left_w, top_h),
        Cell(sx, cell.y, right_w, top_h),
        Cell(cell.x, sy, left_w, bottom_h),
        Cell(sx, sy, right_w, bottom_h),
    ]


def _split_two(cell: Cell, rng: RandomSource, floor: int, cut_x: bool, cut_y: bool) -> list[Cell]:
    """Left-then-right for a side-by-side cut, top-then-bottom for a stacked cut."""
    aspect = cell.width / cell.height
    if aspect > WIDE_ASPECT:
        side_by_side = True
    elif aspect < TALL_ASPECT:
        side_by_side = False
    else:
        side_by_side = chance(rng, 0.5)
    # Fall back to the other direction when the chosen side is too short to cut
    if side_by_side and not cut_x:
        side_by_side = False
    elif not side_by_side and not cut_y:
        side_by_side = True

    ratio = pick_cut_ratio(rng)
    if side_by_side:
        sx = cut_position(cell.x, cell.width, ratio, floor)
        return [
            Cell(cell.x, cell.y, sx - cell.x, cell.height),
            Cell(sx, cell.y, cell.right - sx, cell.height),
        ]
    sy = cut_position(cell.y, cell.height, ratio, floor)
    return [
        Cell(cell.x, cell.y, cell.width, sy - cell.y),
        Cell(cell.x, sy, cell.width, cell.bottom - sy),
    ]


def _leaf(cell: Cell, config: MondrianConfig, rng: RandomSource) -> Cell:
    return cell.with_color(pick_cell_color(config, rng))
