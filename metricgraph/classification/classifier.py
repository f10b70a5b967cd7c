"""
Node and edge classification.

Pure functions of (label, depth, ancestry). Every input yields a value;
there is no failure path.
"""

from __future__ import annotations

from metricgraph.classification.rules import (
    CATEGORY_RULES,
    DOMAIN_RULES,
    FALLBACK_DOMAIN,
    NODE_TYPE_RULES,
    first_match,
)
from metricgraph.core.graph import EdgeType, GraphNode, NodeType

# Indexed by depth
NODE_WEIGHTS: tuple[float, ...] = (1.0, 0.9, 0.7, 0.6, 0.4, 0.3, 0.2)
DEFAULT_WEIGHT = 0.1

# Indexed by the child's depth
EDGE_IMPACTS: tuple[float, ...] = (0.25, 0.4, 0.35, 0.3, 0.25, 0.2)
DEFAULT_IMPACT = 0.1

LEVEL_DESCRIPTIONS: tuple[str, ...] = (
    "Core business target",
    "Core business metric",
    "Business segment metric",
    "Platform / channel metric",
    "User group metric",
    "Concrete factor or tool",
    "Underlying operational element",
)
DEFAULT_DESCRIPTION = "Business element"

DEFAULT_CATEGORY = "user_type"

ROLLUP_MAX_LEVEL = 2
INFLUENCES_MIN_LEVEL = 5


def _lookup(table: tuple, level: int, default):
    if 0 <= level < len(table):
        return table[level]
    return default


def classify_node_type(label: str, level: int) -> NodeType:
    result = first_match(NODE_TYPE_RULES, label, level)
    return NodeType(result) if result else NodeType.METRIC


def classify_category(label: str, level: int) -> str:
    """Depth decides the category for levels 0-4, keywords below that."""
    return first_match(CATEGORY_RULES, label, level) or DEFAULT_CATEGORY


def classify_domain(label: str, level: int, parent: GraphNode | None = None) -> str:
    """
    Assign a business domain to a label.

    Keyword groups are tried in priority order. A label matching none of
    them inherits the domain of ``parent`` (the node in the deepest
    surviving ancestry slot), or falls back to "other".
    """
    domain = first_match(DOMAIN_RULES, label, level)
    if domain:
        return domain
    if parent is not None:
        return parent.domain
    return FALLBACK_DOMAIN


def node_weight(level: int) -> float:
    return _lookup(NODE_WEIGHTS, level, DEFAULT_WEIGHT)


def edge_impact(level: int) -> float:
    return _lookup(EDGE_IMPACTS, level, DEFAULT_IMPACT)


def classify_edge_type(level: int) -> EdgeType:
    """Edge type from the child's depth."""
    if level <= ROLLUP_MAX_LEVEL:
        return EdgeType.ROLLUP
    if level >= INFLUENCES_MIN_LEVEL:
        return EdgeType.INFLUENCES
    return EdgeType.DEPENDS


def describe_level(level: int) -> str:
    return _lookup(LEVEL_DESCRIPTIONS, level, DEFAULT_DESCRIPTION)


def describe_edge(source_id: str, target_id: str, edge_type: EdgeType) -> str:
    relation = "aggregation" if edge_type is EdgeType.ROLLUP else "influence"
    return f"{relation} relationship of {source_id} on {target_id}"
