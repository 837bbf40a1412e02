# Run log: one JSON line per generated composition

from .log import log_run, get_log_path, read_log, seeds_for_complete_tilings

__all__ = ["log_run", "get_log_path", "read_log", "seeds_for_complete_tilings"]
