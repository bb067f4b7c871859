"""Node lookup over a Figma document tree."""

import re
from collections.abc import Mapping
from typing import Any, Iterator, List, Optional
from urllib.parse import parse_qs, urlparse


def _get_attr(node: Any, key: str, default: Any = None) -> Any:
    """Read a field from a raw JSON node or a FigmaNode model."""
    if isinstance(node, Mapping):
        return node.get(key, default)
    return getattr(node, key, default)


def _get_children(node: Any) -> List[Any]:
    return _get_attr(node, "children") or []


def iter_nodes(root: Any) -> Iterator[Any]:
    """Yield every node of the tree in depth-first pre-order.

    A node is yielded before its descendants, and the whole subtree of a
    child is yielded before its next sibling. Uses an explicit stack, so
    tree depth is not limited by the interpreter's recursion limit.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        # Reversed so the leftmost child is popped first
        stack.extend(reversed(_get_children(node)))


def find_node_by_id(root: Any, target_id: str) -> Optional[Any]:
    """Find the first node whose ``id`` equals ``target_id``.

    Args:
        root: Document root, either a raw dict from the API or a FigmaNode
        target_id: Node ID in API form (e.g. ``"12:34"``)

    Returns:
        The matching node object from the tree itself (not a copy), or
        None when no node matches.
    """
    for node in iter_nodes(root):
        if _get_attr(node, "id") == target_id:
            return node
    return None


def normalize_node_id(node_id: str) -> str:
    """Convert a URL-style node ID (``12-34``) to the API form (``12:34``)."""
    return node_id.strip().replace("-", ":")


def extract_node_id(node_id_or_url: str) -> str:
    """Extract the node ID from a Figma URL or normalize a raw ID."""
    if re.search(r"figma\.com/", node_id_or_url):
        query = parse_qs(urlparse(node_id_or_url).query)
        values = query.get("node-id")
        if values:
            return normalize_node_id(values[0])
    return normalize_node_id(node_id_or_url)
