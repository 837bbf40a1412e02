"""
Composition generator: configuration (+ random source) → flat list of colored cells.
Partitioner → complexity enforcer → palette coverage enforcer. No state between calls.
"""
import logging

from ..random_utils import RandomSource, make_rng
from .complexity import enforce_min_splits
from .coverage import ensure_palette_coverage
from .partitioner import split_cell
from .schema import Cell, MondrianConfig, SplitTrace

logger = logging.getLogger(__name__)


def canvas_cell(config: MondrianConfig) -> Cell:
    """Uncolored cell covering the whole canvas."""
    return Cell(0, 0, int(config.canvas_width), int(config.canvas_height))


def generate_mondrian(
    config: MondrianConfig | None = None,
    *,
    seed: int | None = None,
    rng: RandomSource | None = None,
    trace: SplitTrace | None = None,
) -> list[Cell]:
    """
    Generate one composition. Pass `seed` for a reproducible run or `rng` to supply
    the random source directly (rng wins if both are given).
    """
    cfg = config or MondrianConfig()
    if rng is None:
        rng = make_rng(seed)

    cells = split_cell(canvas_cell(cfg), cfg, rng, trace=trace)
    partitioned = len(cells)
    cells = enforce_min_splits(cells, cfg, rng, trace=trace)
    cells = ensure_palette_coverage(cells, cfg, rng)
    logger.debug(
        "Generated %d cells (%d from partitioning) on %dx%d canvas",
        len(cells), partitioned, cfg.canvas_width, cfg.canvas_height,
    )
    return cells
