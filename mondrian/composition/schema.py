"""
Schema for one generation run: the configuration that drives it and the cells it produces.
"""
from dataclasses import asdict, dataclass, field, replace
from typing import Any

# Color of a cell the partitioner has created but not colored yet
UNSET_COLOR = ""


@dataclass(frozen=True)
class MondrianConfig:
    """
    Immutable input to one composition run.
    color_palette[0] is the background; color_palette[1:] are the foreground colors.
    """

    canvas_width: int = 800
    canvas_height: int = 600
    min_cell_size: int = 50
    max_cell_size: int = 200  # carried for renderers/validation; the partitioner ignores it
    line_thickness: int = 8
    line_color: str = "#000000"
    color_palette: tuple[str, ...] = ("#FFFFFF", "#FF0000", "#0000FF", "#FFFF00")
    color_probability: float = 0.3  # chance a leaf is not background
    split_probability: float = 0.7  # chance a cell is split further
    max_depth: int = 5
    min_splits: int | None = None  # None = derive from max_depth
    prominent_color: str | None = None
    prominent_color_boost: float = 0.0  # chance prominent_color overrides a foreground pick

    @property
    def background_color(self) -> str:
        return self.color_palette[0] if self.color_palette else UNSET_COLOR

    @property
    def foreground_colors(self) -> tuple[str, ...]:
        return tuple(self.color_palette[1:])

    @property
    def size_floor(self) -> int:
        """Smallest side a cut may leave on either side (never below one unit)."""
        return max(int(self.min_cell_size), 1)

    def resolved_min_splits(self) -> int:
        """Explicit min_splits, or derived from max_depth: <=2 -> 2, >=6 -> 10, else 5."""
        if self.min_splits is not None:
            return self.min_splits
        if self.max_depth <= 2:
            return 2
        if self.max_depth >= 6:
            return 10
        return 5

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["color_palette"] = list(self.color_palette)
        return d


@dataclass(frozen=True)
class Cell:
    """One axis-aligned rectangle of a composition. Integer geometry, origin top-left."""

    x: int
    y: int
    width: int
    height: int
    color: str = UNSET_COLOR

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def with_color(self, color: str) -> "Cell":
        return replace(self, color=color)

    def overlaps(self, other: "Cell") -> bool:
        """True when the interiors intersect; cells sharing only an edge do not overlap."""
        if self.right <= other.x or other.right <= self.x:
            return False
        if self.bottom <= other.y or other.bottom <= self.y:
            return False
        return True

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SplitEvent:
    """Record of one split performed by the partitioner (for instrumentation)."""

    depth: int
    ways: int  # 2 or 4
    forced: bool = False


@dataclass
class SplitTrace:
    """Collects SplitEvents across a whole run, including forced re-splits."""

    events: list[SplitEvent] = field(default_factory=list)

    def record(self, depth: int, ways: int, forced: bool) -> None:
        self.events.append(SplitEvent(depth=depth, ways=ways, forced=forced))

    def unforced(self) -> list[SplitEvent]:
        return [e for e in self.events if not e.forced]

    def max_depth(self) -> int:
        """Deepest split depth recorded, or -1 when nothing was split."""
        return max((e.depth for e in self.events), default=-1)
