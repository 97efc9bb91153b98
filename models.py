from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple, Union


Coord = Tuple[int, int]  # row, col indexes
Board = Tuple[Tuple[str, ...], ...]
HighlightSet = FrozenSet[Coord]


class PointKind(str, Enum):
    START = "S"
    PATH = "P"
    END = "E"


@dataclass(frozen=True)
class PathPoint:
    # coordinates may be ``nan`` when the source pair was malformed
    x: float
    y: float
    kind: PointKind


@dataclass(frozen=True)
class StepAttributes:
    """Raw attributes captured from a ``STEP`` element.

    Values are kept exactly as found in the replay so the presentation layer
    can show them next to the decoded path.  ``is_first_step`` and
    ``is_last_step`` hold the raw flag strings; presence means the flag is set.
    """

    path: Optional[str] = None
    symbol: Optional[str] = None
    position: Optional[str] = None
    previous_position: Optional[str] = None
    win_amount: Optional[str] = None
    is_first_step: Optional[str] = None
    is_last_step: Optional[str] = None
    special_marker: Optional[str] = None


@dataclass(frozen=True)
class BoardState:
    sequence_number: int
    title: str
    board: Board
    highlights: HighlightSet
    raw: str
    action_name: Optional[str] = None
    mask: Optional[str] = None
    kind: str = "window"


@dataclass(frozen=True)
class PathState:
    sequence_number: int
    title: str
    points: Tuple[PathPoint, ...]
    rendering: str
    raw: str
    action_name: Optional[str] = None
    step: StepAttributes = field(default_factory=StepAttributes)
    kind: str = "path"


GameState = Union[BoardState, PathState]
