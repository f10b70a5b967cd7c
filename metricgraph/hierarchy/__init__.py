"""
Hierarchy module - core of metricgraph.

Resolves heading/list nesting and compiles it into a typed graph.
"""

from metricgraph.hierarchy.compiler import HierarchyCompiler, transform
from metricgraph.hierarchy.lines import LineKind, LineResolver, ResolvedLine
from metricgraph.hierarchy.stack import AncestryStack, Slot, SlotState

__all__ = [
    "AncestryStack",
    "HierarchyCompiler",
    "LineKind",
    "LineResolver",
    "ResolvedLine",
    "Slot",
    "SlotState",
    "transform",
]
