"""
Hierarchy compiler.

Compiles an indented markdown outline into a graph of typed nodes and
edges in a single pass over the document.
"""

from __future__ import annotations

import logging

from metricgraph.classification import (
    classify_category,
    classify_domain,
    classify_edge_type,
    classify_node_type,
    describe_edge,
    describe_level,
    edge_impact,
    node_weight,
)
from metricgraph.core.graph import GraphData, GraphEdge, GraphNode
from metricgraph.hierarchy.lines import LineResolver, ResolvedLine
from metricgraph.hierarchy.stack import AncestryStack

logger = logging.getLogger(__name__)


class _CompileState:
    """Everything one compile needs; discarded when the compile ends."""

    def __init__(self) -> None:
        self.resolver = LineResolver()
        self.stack = AncestryStack()
        self.seen_ids: set[str] = set()
        self.graph = GraphData()


class HierarchyCompiler:
    """
    Builds a GraphData from document text.

    Strategy, per recognised line in document order:
    1. Drop stack slots at or below the line's depth
    2. Pick a unique node id (label, else ancestor-prefixed, else counted)
    3. Classify and append the node
    4. Link it from its nearest live ancestor, if any
    5. Record it in the stack at its depth

    The compiler keeps no state between calls.
    """

    def compile(self, text: str) -> GraphData:
        state = _CompileState()

        for line_number, raw_line in enumerate(text.split("\n"), start=1):
            resolved = state.resolver.resolve(raw_line, line_number)
            if resolved is None or not resolved.label:
                continue
            self._emit(state, resolved)

        logger.debug(
            "Compiled %d nodes and %d edges",
            len(state.graph.nodes),
            len(state.graph.edges),
        )
        return state.graph

    def _emit(self, state: _CompileState, line: ResolvedLine) -> None:
        depth = line.depth
        stack = state.stack
        stack.truncate(depth)

        node_id = self.unique_id(line.label, depth, stack, state.seen_ids)
        node = GraphNode(
            id=node_id,
            type=classify_node_type(line.label, depth),
            domain=classify_domain(line.label, depth, stack.deepest()),
            level=depth,
            category=classify_category(line.label, depth),
            weight=node_weight(depth),
            description=describe_level(depth),
        )
        state.graph.nodes.append(node)
        state.seen_ids.add(node_id)

        if depth > 0:
            parent = stack.nearest_ancestor(depth)
            if parent is not None:
                edge_type = classify_edge_type(depth)
                state.graph.edges.append(
                    GraphEdge(
                        source=parent.id,
                        target=node_id,
                        type=edge_type,
                        impact=edge_impact(depth),
                        description=describe_edge(parent.id, node_id, edge_type),
                    )
                )

        stack.place(node, depth)

    @staticmethod
    def unique_id(
        label: str, depth: int, stack: AncestryStack, seen_ids: set[str]
    ) -> str:
        """
        Pick an id for a new node that no earlier node uses.

        Examples (with "A" already taken):
        parent "Root" -> "Root-A"
        no live ancestor at depth 2 -> "L2-A"
        "Root-A" also taken -> "Root-A-1", then "Root-A-2", ...
        """
        if label not in seen_ids:
            return label

        ancestor = stack.nearest_ancestor(depth)
        prefix = ancestor.id if ancestor is not None else f"L{depth}"
        base = f"{prefix}-{label}"

        candidate = base
        counter = 1
        while candidate in seen_ids:
            candidate = f"{base}-{counter}"
            counter += 1
        return candidate


def transform(text: str) -> GraphData:
    """Compile document text into a graph."""
    return HierarchyCompiler().compile(text)
