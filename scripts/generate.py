#!/usr/bin/env python3
"""
CLI: Generate one Mondrian-style composition and write it as SVG or PNG.
Usage:
  python scripts/generate.py
  python scripts/generate.py --seed 7 --output my_composition.png
  python scripts/generate.py --palette classic --max-depth 3 --min-splits 6 --log
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from mondrian.config import load_config
from mondrian.data import PALETTES
from mondrian.pipeline import generate_to_file


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate one Mondrian-style composition (recursive rectangle partitioning)."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output path; suffix picks the format (default: output/mondrian_<timestamp>.<format>).",
    )
    parser.add_argument(
        "--format",
        choices=["svg", "png"],
        default=None,
        help="Output format when --output has no suffix (default: from config, svg).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional random seed for reproducibility.",
    )
    parser.add_argument("--width", type=int, default=None, help="Canvas width.")
    parser.add_argument("--height", type=int, default=None, help="Canvas height.")
    parser.add_argument("--min-cell-size", type=int, default=None, help="Smallest cell side a split may leave.")
    parser.add_argument("--max-depth", type=int, default=None, help="Maximum recursion depth.")
    parser.add_argument("--min-splits", type=int, default=None, help="Minimum number of cells (default: from depth).")
    parser.add_argument("--color-probability", type=float, default=None, help="Chance a cell is colored (0-1).")
    parser.add_argument("--split-probability", type=float, default=None, help="Chance a cell is split (0-1).")
    parser.add_argument(
        "--palette",
        type=str,
        default=None,
        help=f"Palette name: {', '.join(sorted(PALETTES))} or random.",
    )
    parser.add_argument("--prominent-color", type=str, default=None, help="Foreground color to favor (e.g. #D13C37).")
    parser.add_argument("--prominent-boost", type=float, default=None, help="Chance the prominent color wins a pick (0-1).")
    parser.add_argument(
        "--log",
        action="store_true",
        help="Append the run (config + report) to the generation log.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    config = load_config(args.config)
    overrides = {
        "canvas_width": args.width,
        "canvas_height": args.height,
        "min_cell_size": args.min_cell_size,
        "max_depth": args.max_depth,
        "min_splits": args.min_splits,
        "color_probability": args.color_probability,
        "split_probability": args.split_probability,
        "palette": args.palette,
        "prominent_color": args.prominent_color,
        "prominent_color_boost": args.prominent_boost,
    }

    try:
        result = generate_to_file(
            output_path=args.output,
            seed=args.seed,
            config=config,
            overrides=overrides,
            fmt=args.format,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    report = result.report
    comp = result.composition
    print(f"Canvas: {comp.canvas_width}x{comp.canvas_height}, palette: {', '.join(comp.color_palette)}")
    print(f"Cells: {report.num_cells} (min {report.min_splits}), complete tiling: {report.is_complete_tiling}")
    if report.missing_colors:
        print(f"Missing colors: {', '.join(report.missing_colors)}")
    print(f"Done. Composition: {result.path}")

    if args.log:
        from mondrian.learning import log_run

        log_path = log_run(
            comp.to_dict(),
            report.to_dict(),
            output_path=str(result.path),
            seed=args.seed,
            config=config,
        )
        print(f"Logged: {log_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
