"""
Pipeline: app config (+ overrides) → validated composition config → cells → one file on disk.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .analysis import CompositionReport, analyze_composition
from .composition import Cell, MondrianConfig, generate_mondrian
from .config import composition_config_from_dict, get_output_dir, load_config, validate_config
from .render import export_composition


@dataclass
class GenerationResult:
    """Everything one run produced."""
    path: Path
    cells: list[Cell]
    composition: MondrianConfig
    report: CompositionReport


def generate_to_file(
    *,
    output_path: Path | None = None,
    seed: int | None = None,
    config: dict[str, Any] | None = None,
    overrides: dict[str, Any] | None = None,
    fmt: str | None = None,
) -> GenerationResult:
    """
    Generate one composition and write it. Raises ValueError on invalid configuration.
    Without output_path the file goes to the configured output dir with a timestamped name.
    """
    if config is None:
        config = load_config()
    composition = validate_config(composition_config_from_dict(config, overrides))
    out_cfg = config.get("output") or {}
    fmt = (fmt or out_cfg.get("format") or "svg").lower()

    if output_path is None:
        out_dir = get_output_dir(config)
        out_dir.mkdir(parents=True, exist_ok=True)
        output_path = out_dir / _next_filename(config, "mondrian", fmt)
    output_path = Path(output_path)
    if output_path.suffix == "":
        output_path = output_path.with_suffix(f".{fmt}")

    cells = generate_mondrian(composition, seed=seed)
    path = export_composition(cells, composition, output_path, scale=float(out_cfg.get("scale", 1.0) or 1.0))
    return GenerationResult(
        path=path,
        cells=cells,
        composition=composition,
        report=analyze_composition(cells, composition),
    )


def _next_filename(config: dict[str, Any], default_prefix: str, fmt: str) -> str:
    """Simple next filename: prefix + timestamp to avoid overwrites."""
    from datetime import datetime
    prefix = (config.get("output") or {}).get("filename_prefix") or default_prefix
    return f"{prefix}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.{fmt}"
