# Our data: palettes only

from .palettes import PALETTES, DEFAULT_PALETTE

__all__ = ["PALETTES", "DEFAULT_PALETTE"]
