"""
Graph data model for metricgraph.

This module defines the node, edge and graph structures produced by the
hierarchy compiler and served by the graph service.
"""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NodeType(Enum):
    """Semantic kind of a node in the metric graph."""

    METRIC = "metric"
    TOOL = "tool"
    FACTOR = "factor"


class EdgeType(Enum):
    """Relationship between a parent node and its child.

    Chosen solely from the child's depth.
    """

    ROLLUP = "rollup"
    DEPENDS = "depends"
    INFLUENCES = "influences"


@dataclass(frozen=True)
class GraphNode:
    """
    A single node of the compiled graph.

    Nodes are created exactly once, when their source line is compiled,
    and are never modified afterwards.
    """

    id: str
    type: NodeType
    domain: str
    level: int
    category: str
    weight: float
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "domain": self.domain,
            "level": self.level,
            "category": self.category,
            "weight": self.weight,
            "description": self.description,
        }


@dataclass(frozen=True)
class GraphEdge:
    """A directed edge from an ancestor node to its child.

    ``source`` and ``target`` serialize as ``from`` and ``to``.
    """

    source: str
    target: str
    type: EdgeType
    impact: float
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.source,
            "to": self.target,
            "type": self.type.value,
            "impact": self.impact,
            "description": self.description,
        }


@dataclass
class GraphData:
    """
    Compiled graph: ordered nodes and edges.

    Order follows the source document, so two compiles of the same text
    produce identical output.
    """

    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)

    @property
    def node_ids(self) -> list[str]:
        return [node.id for node in self.nodes]

    def get_node(self, node_id: str) -> GraphNode | None:
        """Get a node by ID."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def incoming(self, node_id: str) -> list[GraphEdge]:
        """Get edges pointing at a node."""
        return [edge for edge in self.edges if edge.target == node_id]

    def outgoing(self, node_id: str) -> list[GraphEdge]:
        """Get edges leaving a node."""
        return [edge for edge in self.edges if edge.source == node_id]

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def stats(self) -> dict[str, Any]:
        """Summary counts for status reporting."""
        type_counts = Counter(node.type.value for node in self.nodes)
        edge_counts = Counter(edge.type.value for edge in self.edges)
        return {
            "nodes_count": len(self.nodes),
            "edges_count": len(self.edges),
            "max_level": max((node.level for node in self.nodes), default=0),
            "node_types": {t.value: type_counts.get(t.value, 0) for t in NodeType},
            "edge_types": {t.value: edge_counts.get(t.value, 0) for t in EdgeType},
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to a JSON string (non-ASCII labels kept as-is)."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
