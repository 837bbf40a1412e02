"""
Named color palettes (hex). Element 0 of every palette is the background color;
the rest are foreground colors picked by the leaf-coloring rule.
"""
PALETTES: dict[str, list[str]] = {
    # Pure primaries; the default palette
    "original": ["#FFFFFF", "#FF0000", "#0000FF", "#FFFF00"],
    # Pigments sampled from Composition with Red, Blue and Yellow (1930)
    "classic": ["#F2F0E6", "#D13C37", "#3755A1", "#F2D13A"],
    "red_blue": ["#FFFFFF", "#D13C37", "#3755A1"],
    "boogie_woogie": ["#EDEAE0", "#E2B93B", "#C1392B", "#2A4B8D", "#B8B5AE"],
    "gray_study": ["#F5F5F5", "#BDBDBD", "#8C8C8C", "#3A3A3A"],
    "night": ["#1A1A1A", "#D13C37", "#3755A1", "#F2D13A", "#FFFFFF"],
    "mono": ["#FFFFFF", "#000000"],
}

DEFAULT_PALETTE = "original"
