"""
Ancestry stack used while compiling a document.

Slot ``d`` holds the most recently emitted node at depth ``d``, or is
explicitly empty when no node at that depth is live (for example after
an outline jumps from depth 0 straight to depth 3).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from metricgraph.core.graph import GraphNode


class SlotState(Enum):
    EMPTY = "empty"
    OCCUPIED = "occupied"


@dataclass(frozen=True)
class Slot:
    """One depth slot of the ancestry stack."""

    state: SlotState
    node: GraphNode | None = None

    @classmethod
    def empty(cls) -> Slot:
        return cls(state=SlotState.EMPTY)

    @classmethod
    def holding(cls, node: GraphNode) -> Slot:
        return cls(state=SlotState.OCCUPIED, node=node)

    @property
    def is_empty(self) -> bool:
        return self.state is SlotState.EMPTY


class AncestryStack:
    """
    Depth-indexed stack of live ancestors.

    After ``place(node, depth)`` the stack has exactly ``depth + 1``
    slots: the ancestors at ``0..depth-1`` and the node itself at
    ``depth``.
    """

    def __init__(self) -> None:
        self._slots: list[Slot] = []

    def __len__(self) -> int:
        return len(self._slots)

    def slot(self, depth: int) -> Slot:
        return self._slots[depth]

    @property
    def slots(self) -> tuple[Slot, ...]:
        return tuple(self._slots)

    def truncate(self, length: int) -> None:
        """Discard every slot at index ``length`` and deeper."""
        del self._slots[length:]

    def nearest_ancestor(self, depth: int) -> GraphNode | None:
        """Find the closest occupied slot strictly shallower than ``depth``."""
        for index in range(min(depth, len(self._slots)) - 1, -1, -1):
            slot = self._slots[index]
            if not slot.is_empty:
                return slot.node
        return None

    def deepest(self) -> GraphNode | None:
        """Node held by the last slot, or None if that slot is empty."""
        if not self._slots:
            return None
        return self._slots[-1].node

    def place(self, node: GraphNode, depth: int) -> None:
        """Put ``node`` at ``depth``, padding new intermediate slots as empty."""
        self.truncate(depth + 1)
        while len(self._slots) <= depth:
            self._slots.append(Slot.empty())
        self._slots[depth] = Slot.holding(node)
