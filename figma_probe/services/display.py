"""Pretty-printer for JSON-like values returned by the Figma API."""

import json
import sys
from collections.abc import Mapping
from typing import Any, Iterator, Optional, TextIO

from pydantic import BaseModel
from pydantic_core import to_jsonable_python

INDENT_UNIT = "  "


def _compact(value: Any) -> str:
    """Serialize a value as single-line JSON, models included at any nesting."""
    return json.dumps(to_jsonable_python(value), ensure_ascii=False, separators=(",", ":"))


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _format_primitive(value: Any) -> str:
    if isinstance(value, str):
        return value
    return _compact(value)


def _to_plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    return value


def _render(
    value: Any, indent: int, depth: int, max_depth: Optional[int]
) -> Iterator[str]:
    prefix = INDENT_UNIT * indent
    value = _to_plain(value)

    # Depth cutoff: remaining structure goes on one line
    if max_depth is not None and depth >= max_depth:
        yield f"{prefix}{_compact(value)}"
        return

    if value is None:
        yield f"{prefix}(empty)"
        return

    if _is_sequence(value):
        if not value:
            yield f"{prefix}(empty array)"
            return
        for index, item in enumerate(value):
            yield f"{prefix}[{index}]:"
            yield from _render(item, indent + 1, depth + 1, max_depth)
        return

    if isinstance(value, Mapping):
        if not value:
            yield f"{prefix}(empty object)"
            return
        for key, item in value.items():
            item = _to_plain(item)
            if _is_sequence(item) or (isinstance(item, Mapping) and item):
                yield f"{prefix}{key}:"
                yield from _render(item, indent + 1, depth + 1, max_depth)
            else:
                yield f"{prefix}{key}: {_compact(item)}"
        return

    yield f"{prefix}{_format_primitive(value)}"


def render_lines(
    value: Any,
    title: Optional[str] = None,
    indent: int = 0,
    max_depth: Optional[int] = None,
) -> Iterator[str]:
    """Yield the lines ``display`` would print, in order.

    Args:
        value: Any JSON-compatible value (pydantic models are dumped first)
        title: Header line emitted once before the value
        indent: Starting indentation level, two spaces per level
        max_depth: Depth at which remaining structure is printed as compact
            JSON instead of being expanded. None means unlimited.
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError("max_depth must be a non-negative integer")
    if title:
        yield title
    yield from _render(value, indent, 0, max_depth)


def display(
    value: Any,
    title: Optional[str] = None,
    indent: int = 0,
    max_depth: Optional[int] = None,
    file: Optional[TextIO] = None,
) -> None:
    """Print any JSON-compatible value as indented, human-readable text.

    Objects and arrays are expanded recursively, one line per entry.

    Example:
        file_data = await client.get_file(file_id)
        display(file_data, title="✓ File fetched", max_depth=2)
    """
    out = file or sys.stdout
    for line in render_lines(value, title=title, indent=indent, max_depth=max_depth):
        print(line, file=out)
