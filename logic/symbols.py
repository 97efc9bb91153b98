from __future__ import annotations
from types import MappingProxyType
from typing import Mapping

# placeholder glyph for empty cells, shared with the path grid
MID_DOT = "·"
BLANK = " "

# Symbols coming from the replay ``window`` encoding mapped to the glyph shown
# on the board.  Anything not listed here is displayed unchanged.
SYMBOL_MAP: Mapping[str, str] = MappingProxyType(
    {
        **{digit: digit for digit in "0123456789"},
        **{letter: letter for letter in "abcdwMX"},
        "e": "E",
        "f": "F",
        "B": "F",
        "-": MID_DOT,
    }
)


def display_symbol(raw: str, symbols: Mapping[str, str] = SYMBOL_MAP) -> str:
    return symbols.get(raw, raw)


__all__ = ["SYMBOL_MAP", "MID_DOT", "BLANK", "display_symbol"]
