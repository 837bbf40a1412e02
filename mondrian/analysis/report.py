"""
Composition report: one structured summary of a generated composition (our checks only).
"""
from dataclasses import dataclass, field
from typing import Any

from ..composition.schema import Cell, MondrianConfig
from .metrics import (
    color_counts,
    missing_palette_colors,
    out_of_bounds,
    overlapping_pairs,
    total_area,
)


@dataclass
class CompositionReport:
    """Invariant checks and color statistics for one composition."""
    num_cells: int
    min_splits: int
    total_area: int
    canvas_area: int
    overlapping_pairs: int
    out_of_bounds: int
    # Color
    background_share: float  # fraction of canvas area left in the background color
    colors: dict[str, int] = field(default_factory=dict)
    missing_colors: list[str] = field(default_factory=list)
    # Geometry
    smallest_side: int = 0
    largest_side: int = 0

    @property
    def is_complete_tiling(self) -> bool:
        return self.total_area == self.canvas_area and self.overlapping_pairs == 0 and self.out_of_bounds == 0

    @property
    def meets_min_splits(self) -> bool:
        return self.num_cells >= self.min_splits

    def to_dict(self) -> dict[str, Any]:
        return {
            "num_cells": self.num_cells,
            "min_splits": self.min_splits,
            "total_area": self.total_area,
            "canvas_area": self.canvas_area,
            "overlapping_pairs": self.overlapping_pairs,
            "out_of_bounds": self.out_of_bounds,
            "is_complete_tiling": self.is_complete_tiling,
            "meets_min_splits": self.meets_min_splits,
            "background_share": self.background_share,
            "colors": dict(self.colors),
            "missing_colors": list(self.missing_colors),
            "smallest_side": self.smallest_side,
            "largest_side": self.largest_side,
        }


def analyze_composition(cells: list[Cell], config: MondrianConfig) -> CompositionReport:
    canvas_area = config.canvas_width * config.canvas_height
    background = config.background_color
    background_area = sum(c.area for c in cells if c.color == background)
    sides = [s for c in cells for s in (c.width, c.height)]
    return CompositionReport(
        num_cells=len(cells),
        min_splits=config.resolved_min_splits(),
        total_area=total_area(cells),
        canvas_area=canvas_area,
        overlapping_pairs=len(overlapping_pairs(cells)),
        out_of_bounds=len(out_of_bounds(cells, config)),
        background_share=background_area / canvas_area if canvas_area else 0.0,
        colors=color_counts(cells),
        missing_colors=missing_palette_colors(cells, config),
        smallest_side=min(sides, default=0),
        largest_side=max(sides, default=0),
    )
