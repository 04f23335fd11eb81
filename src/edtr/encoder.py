"""Encode document trees into EDTR JSON.

The wire shape lives on the models: field aliases carry the camelCase
names, and their serializers add envelopes and ``type`` tags and drop unset
styling flags.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from edtr.schemas import PLUGIN_TYPES, Node

logger = logging.getLogger(__name__)


def encode(node: Node, *, indent: int | None = None) -> bytes:
    """Serialize a node tree to UTF-8 JSON.

    Args:
        node: Root of the tree.
        indent: Indentation for pretty output; compact if None.

    Returns:
        The encoded document.
    """
    payload = json.dumps(to_wire(node), ensure_ascii=False, indent=indent).encode("utf-8")
    logger.debug("Encoded %s document (%d bytes)", node.plugin, len(payload))
    return payload


def to_wire(node: Node) -> dict[str, Any]:
    """Convert a node tree to its JSON-compatible wire value."""
    if type(node) not in PLUGIN_TYPES:
        raise TypeError(f"Unsupported node type: {type(node)!r}")
    return node.model_dump(mode="json", by_alias=True)
