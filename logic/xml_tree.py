"""Two-stage loading of replay XML files.

A replay file is an outer ``<response>`` envelope whose ``game/pubdata``
element carries the real game record as a CDATA-wrapped XML string.  Loading
therefore happens in two explicit steps: :func:`parse_envelope` extracts the
payload string and :func:`parse_payload` turns it into a nested object tree.

The tree mirrors what the replay tooling has always consumed: attributes of an
element live under ``"$"``, child elements are keyed by tag (a single child is
a dict, repeated children become a list) and plain text elements collapse to
their string.  Syntax errors from :mod:`xml.etree.ElementTree` propagate to
the caller unchanged.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any, Dict, List

from models import GameState
from logic.parser import ReplayStructureError
from logic.replay import walk


logger = logging.getLogger(__name__)

ATTRS_KEY = "$"
TEXT_KEY = "_"
ENVELOPE_TAG = "response"


def element_to_tree(element: ET.Element) -> Any:
    text = (element.text or "").strip()
    children = list(element)
    if not element.attrib and not children:
        return text

    node: Dict[str, Any] = {}
    if element.attrib:
        node[ATTRS_KEY] = dict(element.attrib)
    for child in children:
        value = element_to_tree(child)
        if child.tag not in node:
            node[child.tag] = value
        elif isinstance(node[child.tag], list):
            node[child.tag].append(value)
        else:
            node[child.tag] = [node[child.tag], value]
    if text:
        node[TEXT_KEY] = text
    return node


def parse_envelope(xml_text: str | bytes) -> str:
    """Return the inner game payload carried by the outer envelope."""
    root = ET.fromstring(xml_text)
    if root.tag != ENVELOPE_TAG:
        raise ReplayStructureError(f"Expected <{ENVELOPE_TAG}> envelope, found <{root.tag}>")
    pubdata = root.find("game/pubdata")
    if pubdata is None:
        raise ReplayStructureError("Envelope has no game/pubdata element")
    payload = (pubdata.text or "").strip()
    if not payload:
        raise ReplayStructureError("Envelope game/pubdata is empty")
    return payload


def parse_payload(payload: str) -> Dict[str, Any]:
    root = ET.fromstring(payload)
    return {root.tag: element_to_tree(root)}


def load_replay(xml_text: str | bytes) -> Dict[str, Any]:
    payload = parse_envelope(xml_text)
    logger.debug("Extracted payload of %d characters", len(payload))
    return parse_payload(payload)


def load_replay_states(xml_text: str | bytes) -> List[GameState]:
    return walk(load_replay(xml_text))


__all__ = [
    "element_to_tree",
    "parse_envelope",
    "parse_payload",
    "load_replay",
    "load_replay_states",
]
