"""
Load and expose app config (YAML). Used by the CLI to build a MondrianConfig and to
find the output directory.
"""
from pathlib import Path
from typing import Any

import yaml

from .composition.schema import MondrianConfig
from .data.palettes import DEFAULT_PALETTE, PALETTES
from .random_utils import secure_choice
from .render.raster import hex_to_rgb


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    merged = _defaults()
    for section, values in data.items():
        if values is None and isinstance(merged.get(section), dict):
            continue
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section] = {**merged[section], **values}
        else:
            merged[section] = values
    return merged


def _defaults() -> dict[str, Any]:
    return {
        "composition": {
            "canvas_width": 800,
            "canvas_height": 600,
            "min_cell_size": 50,
            "max_cell_size": 200,
            "line_thickness": 8,
            "line_color": "#000000",
            "palette": DEFAULT_PALETTE,
            "color_probability": 0.3,
            "split_probability": 0.7,
            "max_depth": 5,
            "min_splits": None,
            "prominent_color": None,
            "prominent_color_boost": 0.0,
        },
        "output": {
            "dir": "output",
            "filename_prefix": "mondrian",
            "format": "svg",
            "scale": 1.0,
        },
    }


def resolve_palette(palette: str | list[str] | tuple[str, ...] | None) -> tuple[str, ...]:
    """Palette name ("random" picks one), or an explicit list of colors; background first."""
    if palette is None:
        palette = DEFAULT_PALETTE
    if isinstance(palette, str):
        name = secure_choice(PALETTES) if palette == "random" else palette
        if name not in PALETTES:
            raise ValueError(f"Unknown palette {palette!r}; choose from {', '.join(sorted(PALETTES))}")
        return tuple(PALETTES[name])
    return tuple(str(c) for c in palette)


def composition_config_from_dict(
    config: dict[str, Any],
    overrides: dict[str, Any] | None = None,
) -> MondrianConfig:
    """
    Build a MondrianConfig from the `composition` section of a loaded config.
    Overrides (e.g. from CLI flags) replace keys whose value is not None.
    """
    comp = {**_defaults()["composition"], **(config.get("composition") or {})}
    for key, value in (overrides or {}).items():
        if value is not None:
            comp[key] = value
    min_splits = comp.get("min_splits")
    prominent = comp.get("prominent_color")
    return MondrianConfig(
        canvas_width=int(comp["canvas_width"]),
        canvas_height=int(comp["canvas_height"]),
        min_cell_size=int(comp["min_cell_size"]),
        max_cell_size=int(comp["max_cell_size"]),
        line_thickness=int(comp["line_thickness"]),
        line_color=str(comp["line_color"]),
        color_palette=resolve_palette(comp.get("palette")),
        color_probability=float(comp["color_probability"]),
        split_probability=float(comp["split_probability"]),
        max_depth=int(comp["max_depth"]),
        min_splits=int(min_splits) if min_splits is not None else None,
        prominent_color=str(prominent) if prominent else None,
        prominent_color_boost=float(comp.get("prominent_color_boost") or 0.0),
    )


def _is_hex_color(color: str) -> bool:
    try:
        hex_to_rgb(color)
    except ValueError:
        return False
    return color.startswith("#")


def validate_config(cfg: MondrianConfig) -> MondrianConfig:
    """Raise ValueError listing every problem with cfg; returns cfg unchanged when valid."""
    errors: list[str] = []
    if cfg.canvas_width <= 0 or cfg.canvas_height <= 0:
        errors.append("Canvas dimensions must be positive.")
    if cfg.min_cell_size < 0:
        errors.append("min_cell_size must not be negative.")
    if cfg.max_cell_size < cfg.min_cell_size:
        errors.append("max_cell_size must be at least min_cell_size.")
    if cfg.line_thickness < 1:
        errors.append("line_thickness must be at least 1.")
    if not cfg.color_palette:
        errors.append("color_palette needs at least a background color.")
    bad_colors = [c for c in (*cfg.color_palette, cfg.line_color, cfg.prominent_color) if c and not _is_hex_color(c)]
    if bad_colors:
        errors.append(f"Colors must be #RGB or #RRGGBB (got {', '.join(map(repr, bad_colors))}).")
    for name in ("color_probability", "split_probability", "prominent_color_boost"):
        value = getattr(cfg, name)
        if not 0.0 <= value <= 1.0:
            errors.append(f"{name} must be in [0, 1] (got {value}).")
    if cfg.max_depth < 0:
        errors.append("max_depth must not be negative.")
    if cfg.min_splits is not None and cfg.min_splits < 1:
        errors.append("min_splits must be at least 1.")
    if errors:
        raise ValueError("Invalid composition config: " + " ".join(errors))
    return cfg


def get_output_dir(config: dict[str, Any]) -> Path:
    """Resolve output directory (relative to project root if needed)."""
    out = config.get("output") or {}
    d = out.get("dir") or "output"
    p = Path(d)
    if not p.is_absolute():
        p = _project_root() / p
    return p
