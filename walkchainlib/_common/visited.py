"""Visited-node bookkeeping for cycle detection."""

from typing import Any, Dict, Iterator, List


class VisitedNodes:
    """Ordered set of nodes keyed by identity.

    Two nodes with equal fields are still different nodes here; only the
    same object counts as a repeat. Membership is O(1) via id(), and the
    nodes themselves are kept alive in a list so their ids cannot be
    reused by the allocator while the walk is running.
    """

    def __init__(self):
        self._nodes: List[Any] = []
        self._ids: Dict[int, int] = {}

    def add(self, node: Any) -> None:
        """Record a node as visited (no-op if already recorded)."""
        key = id(node)
        if key in self._ids:
            return
        self._ids[key] = len(self._nodes)
        self._nodes.append(node)

    def __contains__(self, node: Any) -> bool:
        return id(node) in self._ids

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._nodes)

    def as_list(self) -> List[Any]:
        """Return visited nodes in visit order."""
        return list(self._nodes)

    def __repr__(self) -> str:
        return f"VisitedNodes(count={len(self._nodes)})"
