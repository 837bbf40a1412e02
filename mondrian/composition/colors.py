"""
Shared draws for the partitioner and the post-processing passes: leaf colors and cut positions.
"""
from ..random_utils import RandomSource, chance
from .schema import MondrianConfig

# Cut ratios as (numerator, denominator) so cut coordinates stay integers
HALF = (1, 2)
THIRD = (1, 3)
TWO_THIRDS = (2, 3)


def pick_cell_color(config: MondrianConfig, rng: RandomSource) -> str:
    """
    Leaf-coloring rule: background with probability 1 - color_probability; otherwise the
    prominent color (if set, not the background, and its boost draw succeeds), else a
    uniform pick among the foreground colors.
    """
    background = config.background_color
    if rng.random() > config.color_probability:
        return background
    prominent = config.prominent_color
    if prominent and prominent != background and chance(rng, config.prominent_color_boost):
        return prominent
    foreground = config.foreground_colors
    if not foreground:
        return background
    return rng.choice(foreground)


def pick_cut_ratio(rng: RandomSource) -> tuple[int, int]:
    """1/2 half the time, otherwise 1/3 or 2/3 with equal chance."""
    if chance(rng, 0.5):
        return HALF
    return THIRD if chance(rng, 0.5) else TWO_THIRDS


def can_cut(size: int, floor: int) -> bool:
    """A side can be cut only if both pieces can keep at least `floor` units."""
    return size >= 2 * floor


def cut_position(origin: int, size: int, ratio: tuple[int, int], floor: int) -> int:
    """Absolute cut coordinate at `ratio` of the side, clamped so both pieces keep `floor`."""
    num, den = ratio
    raw = origin + size * num // den
    low = origin + floor
    high = origin + size - floor
    return max(low, min(raw, high))
