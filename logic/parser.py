from __future__ import annotations
import logging
import math
import string
from typing import List, Mapping, Optional, Tuple

from models import Board, HighlightSet, PathPoint, PointKind
from logic.symbols import BLANK, SYMBOL_MAP, display_symbol


logger = logging.getLogger(__name__)

# Rows of a ``window`` string are separated by ``|``, cells by ``;`` and the
# fields of a single cell by ``,``.  Only the third field (the symbol) is used.
ROW_SEP = "|"
CELL_SEP = ";"
FIELD_SEP = ","
SYMBOL_FIELD = 2

MASK_BITS = 64
MASK_WIDTH = 8
HEX_DIGITS = frozenset(string.hexdigits)


class ReplayStructureError(ValueError):
    """Raised when a replay document lacks its required skeleton."""


def decode_cell(cell: str, symbols: Mapping[str, str] = SYMBOL_MAP) -> str:
    fields = cell.split(FIELD_SEP)
    if len(fields) <= SYMBOL_FIELD:
        return BLANK
    return display_symbol(fields[SYMBOL_FIELD], symbols)


def decode_board(encoded: Optional[str], symbols: Mapping[str, str] = SYMBOL_MAP) -> Board:
    """Decode a ``window`` string into rows of display symbols.

    Cells with fewer than three fields become a blank.  Rows are returned as
    found; jagged input stays jagged.
    """
    if not encoded:
        return ()
    return tuple(
        tuple(decode_cell(cell, symbols) for cell in row.split(CELL_SEP))
        for row in encoded.split(ROW_SEP)
    )


def decode_mask(mask: Optional[str]) -> HighlightSet:
    """Return board positions for every bit set in hexadecimal ``mask``.

    Bit ``i`` counted from the least significant end maps to
    ``(i // 8, i % 8)`` in unrotated board space.
    """
    if not mask:
        return frozenset()
    if not set(mask) <= HEX_DIGITS:
        logger.warning("Ignoring malformed mask %r", mask)
        return frozenset()
    value = int(mask.lstrip("0") or "0", 16)
    bits = format(value & ((1 << MASK_BITS) - 1), f"0{MASK_BITS}b")
    return frozenset(
        (i // MASK_WIDTH, i % MASK_WIDTH)
        for i in range(MASK_BITS)
        if bits[MASK_BITS - 1 - i] == "1"
    )


def _to_int(text: str) -> float:
    try:
        return int(text.strip())
    except ValueError:
        return math.nan


def decode_coord(text: str) -> Tuple[float, float]:
    """Parse ``"x,y"``; unparsable components become ``nan``."""
    parts = text.split(FIELD_SEP)
    x = _to_int(parts[0])
    y = _to_int(parts[1]) if len(parts) > 1 else math.nan
    return x, y


def decode_path_list(coords: Optional[str]) -> List[Tuple[float, float]]:
    if not coords:
        return []
    return [decode_coord(pair) for pair in coords.split(CELL_SEP)]


def assemble_step_points(
    prev_pos: Optional[str],
    path: Optional[str],
    pos: Optional[str],
) -> List[PathPoint]:
    """Build the ordered start/path/end points of a single step."""
    points: List[PathPoint] = []
    if prev_pos:
        points.append(PathPoint(*decode_coord(prev_pos), PointKind.START))
    for x, y in decode_path_list(path):
        points.append(PathPoint(x, y, PointKind.PATH))
    if pos:
        points.append(PathPoint(*decode_coord(pos), PointKind.END))
    return points


__all__ = [
    "ReplayStructureError",
    "decode_cell",
    "decode_board",
    "decode_mask",
    "decode_coord",
    "decode_path_list",
    "assemble_step_points",
]
