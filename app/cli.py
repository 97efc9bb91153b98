"""Print the decoded boards and step paths of a replay file."""
from __future__ import annotations

import argparse
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Sequence

from models import BoardState, GameState, PathState
from logic.parser import ReplayStructureError
from logic.render import render_board
from logic.xml_tree import load_replay_states
from app.config import LOG_LEVEL


logger = logging.getLogger(__name__)


def render_state(state: GameState, *, markup: bool = False) -> str:
    if isinstance(state, BoardState):
        return render_board(state.board, state.title, state.highlights, markup=markup)
    if isinstance(state, PathState):
        return f"\n=== {state.title} ===\n{state.rendering}"
    raise TypeError(f"Unsupported game state {type(state).__name__}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render replay boards and step paths as text.")
    parser.add_argument("replay", type=Path, help="XML replay file to decode")
    parser.add_argument(
        "--markup",
        action="store_true",
        help="Highlight cells with HTML spans instead of terminal colours",
    )
    parser.add_argument(
        "--no-paths",
        action="store_true",
        help="Only print board snapshots",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL)

    try:
        states = load_replay_states(args.replay.read_bytes())
    except (OSError, ET.ParseError, ReplayStructureError) as exc:
        logger.error("Unable to decode %s: %s", args.replay, exc)
        return 1

    for state in states:
        if args.no_paths and isinstance(state, PathState):
            continue
        print(render_state(state, markup=args.markup))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
