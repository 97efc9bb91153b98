from __future__ import annotations
import logging
from typing import Any, Dict, List, Mapping, Optional

from models import BoardState, GameState, PathState, StepAttributes
from logic.parser import (
    ReplayStructureError,
    assemble_step_points,
    decode_board,
    decode_mask,
)
from logic.render import render_path


logger = logging.getLogger(__name__)

UNKNOWN_ACTION = "Unknown"
NOT_AVAILABLE = "N/A"


def as_list(value: Any) -> List[Any]:
    """Normalise a single child element into a one-element list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _attrs(node: Any) -> Dict[str, str]:
    if isinstance(node, Mapping):
        attrs = node.get("$")
        if isinstance(attrs, Mapping):
            return dict(attrs)
    return {}


def _child(node: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


def _purchase(document: Any) -> Any:
    purchases = _child(document, "PURCHASES")
    if not isinstance(purchases, Mapping):
        raise ReplayStructureError("Replay has no PURCHASES element")
    purchase = purchases.get("PURCHASE")
    if purchase is None:
        raise ReplayStructureError("Replay has no PURCHASE element")
    if isinstance(purchase, list):
        # only the first purchase of a round is replayed
        purchase = purchase[0]
    return purchase


def step_attributes(attrs: Mapping[str, str]) -> StepAttributes:
    return StepAttributes(
        path=attrs.get("path"),
        symbol=attrs.get("sym"),
        position=attrs.get("pos"),
        previous_position=attrs.get("prev-pos"),
        win_amount=attrs.get("win"),
        is_first_step=attrs.get("first-step"),
        is_last_step=attrs.get("last-step"),
        special_marker=attrs.get("angry-birds"),
    )


def step_summary(step: StepAttributes) -> str:
    return (
        f"Path: {step.path or NOT_AVAILABLE}, "
        f"Position: {step.position or NOT_AVAILABLE}, "
        f"Previous: {step.previous_position or NOT_AVAILABLE}"
    )


class _Walker:
    """Single pass over one replay with its own sequence counter."""

    def __init__(self) -> None:
        self.sequence = 1
        self.states: List[GameState] = []

    def _next_sequence(self) -> int:
        number = self.sequence
        self.sequence += 1
        return number

    def visit_action(self, action: Any, result_index: int) -> None:
        attrs = _attrs(action)
        name: Optional[str] = attrs.get("name")
        label = name or UNKNOWN_ACTION

        window = attrs.get("window")
        if window:
            mask = attrs.get("mask")
            highlights = decode_mask(mask)
            mask_info = f" (Mask: {mask}, {len(highlights)} positions)" if mask else ""
            seq = self._next_sequence()
            self.states.append(
                BoardState(
                    sequence_number=seq,
                    title=f"{seq}. Result {result_index} - Action: {label}{mask_info}",
                    board=decode_board(window),
                    highlights=highlights,
                    raw=window,
                    action_name=name,
                    mask=mask,
                )
            )

        for step_index, step in enumerate(as_list(_child(action, "STEP"))):
            step_attrs = _attrs(step)
            if not step_attrs:
                continue
            points = assemble_step_points(
                step_attrs.get("prev-pos"), step_attrs.get("path"), step_attrs.get("pos")
            )
            if not points:
                continue
            step_data = step_attributes(step_attrs)
            seq = self._next_sequence()
            self.states.append(
                PathState(
                    sequence_number=seq,
                    title=(
                        f"{seq}. Result {result_index} - Action: {label}"
                        f" - Step {step_index + 1} Path"
                    ),
                    points=tuple(points),
                    rendering=render_path(
                        points, f"Action: {label} - Step {step_index + 1}"
                    ),
                    raw=step_summary(step_data),
                    action_name=name,
                    step=step_data,
                )
            )

    def visit_result(self, result: Any, result_index: int) -> None:
        actions = as_list(_child(result, "ACTIONS", "ORDERED", "ACTION"))
        logger.debug("Result %d has %d action(s)", result_index, len(actions))
        for action in actions:
            self.visit_action(action, result_index)


def walk(document: Mapping[str, Any]) -> List[GameState]:
    """Return every board and path state of a parsed replay in document order.

    ``document`` is the object tree produced by
    :func:`logic.xml_tree.parse_payload`.  A missing ``PURCHASES/PURCHASE``
    skeleton raises :class:`ReplayStructureError`; results, actions and steps
    without recognised attributes simply contribute nothing.
    """
    purchase = _purchase(document)
    results = as_list(_child(purchase, "RESULT"))
    logger.debug("Found %d RESULT(s)", len(results))

    walker = _Walker()
    for result_index, result in enumerate(results):
        walker.visit_result(result, result_index)
    logger.info("Decoded %d game state(s)", len(walker.states))
    return walker.states


__all__ = ["walk", "as_list", "step_attributes", "step_summary"]
