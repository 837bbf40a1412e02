# Composition generator: recursive partitioning plus complexity and palette passes

from .schema import Cell, MondrianConfig, SplitEvent, SplitTrace, UNSET_COLOR
from .colors import pick_cell_color
from .partitioner import split_cell
from .complexity import enforce_min_splits
from .coverage import ensure_palette_coverage
from .generator import generate_mondrian

__all__ = [
    "Cell",
    "MondrianConfig",
    "SplitEvent",
    "SplitTrace",
    "UNSET_COLOR",
    "pick_cell_color",
    "split_cell",
    "enforce_min_splits",
    "ensure_palette_coverage",
    "generate_mondrian",
]
