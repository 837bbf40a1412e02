"""
Rendering: grid lines, SVG markup, numpy raster, file export.
"""
from .grid import grid_lines
from .svg import render_svg
from .raster import render_frame, hex_to_rgb
from .export import export_composition, SUPPORTED_FORMATS

__all__ = [
    "grid_lines",
    "render_svg",
    "render_frame",
    "hex_to_rgb",
    "export_composition",
    "SUPPORTED_FORMATS",
]
