"""Core data models for metricgraph."""

from metricgraph.core.graph import (
    EdgeType,
    GraphData,
    GraphEdge,
    GraphNode,
    NodeType,
)

__all__ = [
    "EdgeType",
    "GraphData",
    "GraphEdge",
    "GraphNode",
    "NodeType",
]
