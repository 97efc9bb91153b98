from __future__ import annotations
import html
import math
from typing import Iterable, List, Sequence

from models import Board, Coord, PathPoint, PointKind
from logic.symbols import BLANK, MID_DOT

# The mask addresses an 8×8 board whose rows are flipped relative to the
# decoded window; highlight lookups use ``MASK_ROWS - 1 - row``.
MASK_ROWS = 8

HTML_HIGHLIGHT = (
    '<span style="background-color: yellow; color: black; font-weight: bold;">'
    "{symbol}</span> "
)
ANSI_HIGHLIGHT = "\x1b[43m{symbol}\x1b[0m "

START_SYMBOL = "S"
END_SYMBOL = "E"
PATH_ARROW = " → "


def border(cells: int) -> str:
    return "+" + "-" * (cells * 2 + 1) + "+\n"


def format_cell(symbol: str, highlighted: bool = False, markup: bool = False) -> str:
    """Return a single board cell followed by its separating space."""
    if not highlighted:
        return symbol + " "
    if markup:
        return HTML_HIGHLIGHT.format(symbol=symbol)
    return ANSI_HIGHLIGHT.format(symbol=symbol)


def _is_highlighted(highlights: Iterable[Coord], row: int, col: int) -> bool:
    return any(MASK_ROWS - 1 - r == row and c == col for r, c in highlights)


def render_board(
    board: Board,
    title: str = "",
    highlights: Iterable[Coord] = (),
    markup: bool = False,
) -> str:
    """Render ``board`` rotated 90° clockwise inside an ASCII frame.

    Source columns become output lines (last column first) and source rows
    run left to right within each line, so left reads as down and up reads as
    right.  ``markup`` selects HTML spans instead of ANSI escapes for
    highlighted cells and escapes the title and symbols for embedding in a page.
    """
    if not board:
        return ""

    highlights = set(highlights)
    rows = len(board)
    cols = len(board[0])

    output = ""
    if title:
        if markup:
            title = html.escape(title)
        output += f"\n=== {title} ===\n"
    output += border(rows)
    for col in range(cols - 1, -1, -1):
        line = "| "
        for row in range(rows):
            cells = board[row]
            symbol = (cells[col] if col < len(cells) else "") or BLANK
            if markup:
                symbol = html.escape(symbol)
            line += format_cell(symbol, _is_highlighted(highlights, row, col), markup)
        output += line + "|\n"
    output += border(rows)
    return output


def path_label(index: int) -> str:
    """Label of the ``index``-th path point: ``1``..``9`` then ``a``, ``b``..."""
    if index < 9:
        return str(index + 1)
    return chr(ord("a") + index - 9)


def format_number(value: float) -> str:
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(value)


def format_point(point: PathPoint) -> str:
    return f"({format_number(point.x)},{format_number(point.y)})"


def _in_bounds(point: PathPoint, width: int, height: int) -> bool:
    # nan compares false, so malformed points never plot
    return 0 <= point.x < width and 0 <= point.y < height


def render_path(
    points: Sequence[PathPoint],
    title: str,
    grid_width: int = 8,
    grid_height: int = 8,
) -> str:
    grid: List[List[str]] = [[MID_DOT] * grid_width for _ in range(grid_height)]

    path_index = 0
    for point in points:
        if not _in_bounds(point, grid_width, grid_height):
            continue
        row = grid_height - 1 - int(point.y)
        col = int(point.x)
        if point.kind is PointKind.START:
            grid[row][col] = START_SYMBOL
        elif point.kind is PointKind.END:
            grid[row][col] = END_SYMBOL
        else:
            grid[row][col] = path_label(path_index)
            path_index += 1

    output = f"{title}\n"
    output += border(grid_width)
    for cells in grid:
        output += "| " + "".join(format_cell(cell) for cell in cells) + "|\n"
    output += border(grid_width)

    starts = [p for p in points if p.kind is PointKind.START]
    steps = [p for p in points if p.kind is PointKind.PATH]
    ends = [p for p in points if p.kind is PointKind.END]
    if starts:
        output += f"Start Point(S): {', '.join(format_point(p) for p in starts)}\n"
    if steps:
        labels = [f"{path_label(i)}:{format_point(p)}" for i, p in enumerate(steps)]
        output += f"Path Points: {PATH_ARROW.join(labels)}\n"
    if ends:
        output += f"End Point(E): {', '.join(format_point(p) for p in ends)}\n"
    return output


__all__ = [
    "ANSI_HIGHLIGHT",
    "HTML_HIGHLIGHT",
    "border",
    "format_cell",
    "render_board",
    "path_label",
    "format_point",
    "render_path",
]
