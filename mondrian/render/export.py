"""
Write a composition to disk: .svg as markup, .png as a raster through imageio.
"""
from pathlib import Path

import numpy as np

from ..composition.schema import Cell, MondrianConfig
from .raster import render_frame
from .svg import render_svg

SUPPORTED_FORMATS = ("svg", "png")


def export_composition(
    cells: list[Cell],
    config: MondrianConfig,
    output_path: Path,
    *,
    scale: float = 1.0,
) -> Path:
    """
    Render and write the composition; the format comes from the file suffix
    (.svg if there is none). PNG scale is rounded to a whole pixel factor.
    """
    output_path = Path(output_path)
    if output_path.suffix == "":
        output_path = output_path.with_suffix(".svg")
    fmt = output_path.suffix.lower().lstrip(".")
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"export_composition: unsupported format {output_path.suffix!r} (use .svg or .png)")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "svg":
        output_path.write_text(render_svg(cells, config, scale=scale), encoding="utf-8")
        return output_path

    try:
        import imageio
    except ImportError:
        raise ImportError(
            "PNG export needs 'imageio'. Install with: pip install imageio"
        ) from None
    frame = render_frame(cells, config)
    factor = max(1, int(round(scale)))
    if factor > 1:
        frame = np.repeat(np.repeat(frame, factor, axis=0), factor, axis=1)
    imageio.imwrite(str(output_path), frame)
    return output_path
