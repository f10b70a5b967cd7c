"""
Classification module - assigns semantic labels and scores.

Node type, category and domain come from ordered keyword rule tables;
weight, impact and descriptions come from depth-indexed lookup tables.
"""

from metricgraph.classification.classifier import (
    classify_category,
    classify_domain,
    classify_edge_type,
    classify_node_type,
    describe_edge,
    describe_level,
    edge_impact,
    node_weight,
)
from metricgraph.classification.rules import KeywordRule, first_match

__all__ = [
    "KeywordRule",
    "classify_category",
    "classify_domain",
    "classify_edge_type",
    "classify_node_type",
    "describe_edge",
    "describe_level",
    "edge_impact",
    "first_match",
    "node_weight",
]
