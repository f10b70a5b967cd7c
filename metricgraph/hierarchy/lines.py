"""
Line classification and depth resolution.

Turns raw document lines into (kind, depth, label) triples. Headings
carry their own depth; list items are placed relative to the most
recent heading.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

# "#" to "#######" followed by whitespace
_HEADING_RE = re.compile(r"^(#{1,7})\s+(.*)$")
# "- item"
_LIST_ITEM_RE = re.compile(r"^-\s+(.*)$")
# Outline numbering: "2", "2.1.3", "2.1.3."
_OUTLINE_PREFIX_RE = re.compile(r"^\d+(?:\.\d+)*\.?\s*")

INDENT_WIDTH = 2
TAB_SIZE = 4


class LineKind(Enum):
    """How a source line contributes to the hierarchy."""

    HEADING = "heading"
    LIST_ITEM = "list_item"


@dataclass(frozen=True)
class ResolvedLine:
    """A recognised line with its resolved depth and extracted label.

    ``label`` may be empty (e.g. a heading holding only an outline
    number); such lines are skipped by the compiler.
    """

    kind: LineKind
    depth: int
    label: str
    line_number: int = 0


def strip_outline_number(text: str) -> str:
    """
    Remove a leading numeric outline prefix from heading text.

    Examples:
    "1. DAU" -> "DAU"
    "1.1.1 Platform-ET" -> "Platform-ET"
    "2.1.3." -> ""
    """
    return _OUTLINE_PREFIX_RE.sub("", text.strip(), count=1)


def leading_indent(raw_line: str) -> int:
    """Count leading whitespace columns (tabs expanded)."""
    expanded = raw_line.expandtabs(TAB_SIZE)
    return len(expanded) - len(expanded.lstrip())


class LineResolver:
    """
    Resolves depth for the lines of one document, in order.

    Holds two pieces of state: the depth of the most recent heading and
    the indentation of the first list item seen since then. List
    indentation is measured from that first item, two spaces per level.
    Create one resolver per document.
    """

    def __init__(self) -> None:
        self.last_heading_depth: int | None = None
        self._list_base_indent: int | None = None

    def resolve(self, raw_line: str, line_number: int = 0) -> ResolvedLine | None:
        """Classify a line, or return None if it is not a heading or list item.

        Ignored lines do not touch resolver state.
        """
        text = raw_line.strip()
        if not text:
            return None

        match = _HEADING_RE.match(text)
        if match:
            depth = len(match.group(1)) - 1
            self.last_heading_depth = depth
            self._list_base_indent = None
            return ResolvedLine(
                kind=LineKind.HEADING,
                depth=depth,
                label=strip_outline_number(match.group(2)),
                line_number=line_number,
            )

        match = _LIST_ITEM_RE.match(text)
        if match:
            return ResolvedLine(
                kind=LineKind.LIST_ITEM,
                depth=self._list_depth(leading_indent(raw_line)),
                label=match.group(1).strip(),
                line_number=line_number,
            )

        return None

    def _list_depth(self, indent: int) -> int:
        if self._list_base_indent is None or indent < self._list_base_indent:
            self._list_base_indent = indent
        nesting = (indent - self._list_base_indent) // INDENT_WIDTH

        if self.last_heading_depth is None:
            return nesting + 1
        return self.last_heading_depth + 1 + nesting
