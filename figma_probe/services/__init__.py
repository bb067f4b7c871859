"""Services package initialization."""

from figma_probe.services.figma_client import FigmaClient, FigmaAPIError
from figma_probe.services.node_locator import (
    find_node_by_id,
    iter_nodes,
    normalize_node_id,
    extract_node_id,
)
from figma_probe.services.display import display, render_lines

__all__ = [
    "FigmaClient",
    "FigmaAPIError",
    "find_node_by_id",
    "iter_nodes",
    "normalize_node_id",
    "extract_node_id",
    "display",
    "render_lines",
]
