# Analysis: check and summarize a generated composition

from .report import analyze_composition, CompositionReport
from .metrics import total_area, overlapping_pairs, color_counts, missing_palette_colors

__all__ = [
    "analyze_composition",
    "CompositionReport",
    "total_area",
    "overlapping_pairs",
    "color_counts",
    "missing_palette_colors",
]
