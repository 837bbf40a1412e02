"""
SVG markup for a composition: filled rectangles first, grid lines on top.
"""
from ..composition.schema import Cell, MondrianConfig
from .grid import grid_lines


def _num(v: float) -> str:
    return f"{v:g}"


def render_svg(cells: list[Cell], config: MondrianConfig, *, scale: float = 1.0) -> str:
    """Standalone SVG document; `scale` multiplies every coordinate (1.0 = canvas pixels)."""
    width = config.canvas_width * scale
    height = config.canvas_height * scale
    svg = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{_num(width)}" height="{_num(height)}" '
        f'viewBox="0 0 {_num(width)} {_num(height)}">'
    ]
    for c in cells:
        svg.append(
            f'<rect x="{_num(c.x * scale)}" y="{_num(c.y * scale)}" '
            f'width="{_num(c.width * scale)}" height="{_num(c.height * scale)}" fill="{c.color}"/>'
        )

    horizontal, vertical = grid_lines(cells)
    stroke = f'stroke="{config.line_color}" stroke-width="{_num(config.line_thickness * scale)}"'
    svg.append(f'<g {stroke} stroke-linecap="square">')
    for y, spans in horizontal.items():
        for x0, x1 in spans:
            svg.append(
                f'<line x1="{_num(x0 * scale)}" y1="{_num(y * scale)}" x2="{_num(x1 * scale)}" y2="{_num(y * scale)}"/>'
            )
    for x, spans in vertical.items():
        for y0, y1 in spans:
            svg.append(
                f'<line x1="{_num(x * scale)}" y1="{_num(y0 * scale)}" x2="{_num(x * scale)}" y2="{_num(y1 * scale)}"/>'
            )
    svg.append("</g>")
    svg.append("</svg>")
    return "".join(svg)
