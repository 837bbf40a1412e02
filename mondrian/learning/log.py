"""
Log each generation run (composition config, report, output path) as JSONL.
"""
import json
from pathlib import Path
from typing import Any

from ..config import load_config, get_output_dir


def get_log_path(config: dict[str, Any] | None = None) -> Path:
    """Path to the generation log file (JSONL)."""
    if config is None:
        config = load_config()
    out_dir = get_output_dir(config)
    return out_dir.parent / "generation_log.jsonl"


def log_run(
    composition: dict[str, Any],
    report: dict[str, Any],
    *,
    output_path: str | None = None,
    seed: int | None = None,
    config: dict[str, Any] | None = None,
    log_path: Path | None = None,
) -> Path:
    """
    Append one run to the log: the composition config we used, its report, where it
    was written and the seed (if any). Returns the path to the log file.
    """
    if log_path is None:
        log_path = get_log_path(config)
    log_path = Path(log_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    entry = {
        "composition": composition,
        "report": report,
        "output_path": output_path,
        "seed": seed,
    }
    with open(log_path, "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, ensure_ascii=False) + "\n")
    return log_path


def _is_run_entry(entry: Any) -> bool:
    """A run entry carries the composition config and its report as JSON objects."""
    return (
        isinstance(entry, dict)
        and isinstance(entry.get("composition"), dict)
        and isinstance(entry.get("report"), dict)
    )


def read_log(log_path: Path | None = None) -> list[dict[str, Any]]:
    """
    Read run entries from the generation log, oldest first. Blank lines, malformed JSON
    and lines without a composition/report pair are skipped.
    """
    if log_path is None:
        log_path = get_log_path()
    log_path = Path(log_path)
    if not log_path.exists():
        return []
    entries = []
    with open(log_path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                entry = json.loads(line)
            except json.JSONDecodeError:
                continue
            if _is_run_entry(entry):
                entries.append(entry)
    return entries


def seeds_for_complete_tilings(entries: list[dict[str, Any]]) -> list[int]:
    """Seeds of logged runs whose report shows a complete tiling (to regenerate them)."""
    return [
        e["seed"] for e in entries
        if e.get("seed") is not None and e["report"].get("is_complete_tiling")
    ]
