"""
Grid lines from cell boundaries: one entry per unique edge coordinate, holding the
merged spans of the cell edges that lie on it.
"""
Span = tuple[int, int]


def _merge_spans(spans: list[Span]) -> list[Span]:
    merged: list[Span] = []
    for start, end in sorted(spans):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def grid_lines(cells) -> tuple[dict[int, list[Span]], dict[int, list[Span]]]:
    """
    (horizontal, vertical): horizontal maps y → [(x0, x1), ...], vertical maps
    x → [(y0, y1), ...]. Keys are sorted; touching or overlapping spans are merged.
    """
    horizontal: dict[int, list[Span]] = {}
    vertical: dict[int, list[Span]] = {}
    for cell in cells:
        for y in (cell.y, cell.bottom):
            horizontal.setdefault(y, []).append((cell.x, cell.right))
        for x in (cell.x, cell.right):
            vertical.setdefault(x, []).append((cell.y, cell.bottom))
    return (
        {y: _merge_spans(horizontal[y]) for y in sorted(horizontal)},
        {x: _merge_spans(vertical[x]) for x in sorted(vertical)},
    )
