"""Tests for line classification and depth resolution."""

from __future__ import annotations

import pytest

from metricgraph.hierarchy.lines import (
    LineKind,
    LineResolver,
    leading_indent,
    strip_outline_number,
)


def _depths(lines: list[str]) -> list[int | None]:
    """Resolve a sequence of lines with one resolver."""
    resolver = LineResolver()
    results = []
    for line in lines:
        resolved = resolver.resolve(line)
        results.append(resolved.depth if resolved else None)
    return results


# ===================================================================
# strip_outline_number
# ===================================================================


class TestStripOutlineNumber:
    """Tests for outline number removal from heading text."""

    def test_single_number_with_dot(self):
        assert strip_outline_number("1. DAU") == "DAU"

    def test_dotted_number(self):
        assert strip_outline_number("1.1.1 分端-ET") == "分端-ET"

    def test_trailing_dot(self):
        assert strip_outline_number("2.1.3. Coupons") == "Coupons"

    def test_number_without_space(self):
        assert strip_outline_number("3Revenue") == "Revenue"

    def test_only_number(self):
        assert strip_outline_number("2.1.3.") == ""

    def test_unnumbered(self):
        assert strip_outline_number("Introduction") == "Introduction"

    def test_only_leading_prefix_removed(self):
        assert strip_outline_number("1. Top 10 items") == "Top 10 items"


class TestLeadingIndent:
    def test_spaces(self):
        assert leading_indent("    - x") == 4

    def test_no_indent(self):
        assert leading_indent("- x") == 0

    def test_tab_expands(self):
        assert leading_indent("\t- x") == 4


# ===================================================================
# Headings
# ===================================================================


class TestHeadings:
    """Tests for heading depth and labels."""

    @pytest.mark.parametrize("markers,depth", [(1, 0), (2, 1), (4, 3), (7, 6)])
    def test_depth_is_marker_count_minus_one(self, markers, depth):
        resolved = LineResolver().resolve("#" * markers + " Title")
        assert resolved is not None
        assert resolved.kind == LineKind.HEADING
        assert resolved.depth == depth

    def test_eight_markers_ignored(self):
        assert LineResolver().resolve("######## Too deep") is None

    def test_marker_without_space_ignored(self):
        assert LineResolver().resolve("#NoSpace") is None

    def test_bare_marker_ignored(self):
        assert LineResolver().resolve("#") is None

    def test_label_strips_outline_number(self):
        resolved = LineResolver().resolve("## 1.2 访购率")
        assert resolved.label == "访购率"

    def test_numbered_only_heading_has_empty_label(self):
        resolver = LineResolver()
        resolved = resolver.resolve("## 2.1.")
        assert resolved is not None
        assert resolved.label == ""
        # Still counts as the most recent heading
        assert resolver.last_heading_depth == 1

    def test_leading_whitespace_tolerated(self):
        resolved = LineResolver().resolve("   ## Indented heading")
        assert resolved.depth == 1
        assert resolved.label == "Indented heading"


# ===================================================================
# List items
# ===================================================================


class TestListItems:
    """Tests for list item depth resolution."""

    def test_without_heading_starts_at_one(self):
        assert _depths(["- Top", "  - Nested", "    - Deeper"]) == [1, 2, 3]

    def test_relative_to_last_heading(self):
        assert _depths(["# Root", "## Child", "- Item", "  - Sub"]) == [0, 1, 2, 3]

    def test_uniformly_indented_list_starts_at_base(self):
        assert _depths(["## Child A", "  - Item 1", "  - Item 2"]) == [1, 2, 2]

    def test_odd_indent_floors(self):
        assert _depths(["# H", "- a", "   - b"]) == [0, 1, 2]

    def test_shallower_item_rebases(self):
        assert _depths(["# H", "    - a", "  - b", "    - c"]) == [0, 1, 1, 2]

    def test_heading_resets_list_base(self):
        lines = ["# A", "  - a1", "# B", "- b1", "  - b2"]
        assert _depths(lines) == [0, 1, 0, 1, 2]

    def test_list_items_do_not_change_heading_depth(self):
        resolver = LineResolver()
        resolver.resolve("### Heading")
        resolver.resolve("- item")
        resolver.resolve("  - nested")
        assert resolver.last_heading_depth == 2

    def test_never_shallower_than_heading_plus_one(self):
        depths = _depths(["#### Deep heading", "      - a", "- b"])
        assert all(d >= 4 for d in depths[1:])

    def test_label_trimmed(self):
        resolved = LineResolver().resolve("-   spaced label   ")
        assert resolved.kind == LineKind.LIST_ITEM
        assert resolved.label == "spaced label"

    def test_dash_without_space_ignored(self):
        assert LineResolver().resolve("-nope") is None

    def test_bare_dash_ignored(self):
        assert LineResolver().resolve("  -  ") is None


# ===================================================================
# Ignored lines
# ===================================================================


class TestIgnoredLines:
    """Unrecognised lines return None and leave state alone."""

    @pytest.mark.parametrize("line", ["", "   ", "plain prose", "* star item", "1. ordered"])
    def test_ignored(self, line):
        assert LineResolver().resolve(line) is None

    def test_ignored_line_keeps_state(self):
        resolver = LineResolver()
        resolver.resolve("## Heading")
        resolver.resolve("some paragraph")
        assert resolver.last_heading_depth == 1
        assert resolver.resolve("- item").depth == 2
