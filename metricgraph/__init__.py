"""
metricgraph - compile markdown metric outlines into typed graphs.

Headings and nested bullet lists become nodes; nesting becomes
rollup / depends / influences edges.
"""

__version__ = "0.1.0"

from metricgraph.core.graph import (  # noqa: E402
    EdgeType,
    GraphData,
    GraphEdge,
    GraphNode,
    NodeType,
)
from metricgraph.hierarchy import HierarchyCompiler, transform  # noqa: E402

__all__ = [
    "EdgeType",
    "GraphData",
    "GraphEdge",
    "GraphNode",
    "HierarchyCompiler",
    "NodeType",
    "__version__",
    "transform",
]
