"""Cycle-safe chain walker.

The ChainWalker is the one traversal loop shared by every operation.
It knows nothing about callbacks or merging; call and merge drivers
consume the nodes it yields.
"""

import logging
from typing import Any, Iterator, List

from .resolvers import LinkResolver
from .visited import VisitedNodes

logger = logging.getLogger(__name__)


class ChainWalker:
    """Walks a chain of linked nodes from a start node to its end.

    The walk ends after the first node whose next node is missing or has
    already been visited, so a walk over N distinct reachable nodes
    yields at most N nodes, even when the chain loops back on itself.
    """

    def __init__(self, resolver: LinkResolver):
        """Initialize walker with a resolution strategy.

        Args:
            resolver: LinkResolver used to find each next node
        """
        self.resolver = resolver

    def walk(self, start_node: Any) -> Iterator[Any]:
        """Yield nodes from start_node towards the end of the chain.

        The next node is resolved only when the consumer asks for it,
        so anything done with a yielded node happens before its link
        is followed.

        Args:
            start_node: Node to start walking from

        Yields:
            Nodes in chain order, start node first
        """
        visited = VisitedNodes()
        node = start_node

        while True:
            visited.add(node)
            yield node

            next_node = self.resolver.resolve(node)

            if next_node is None:
                logger.debug("Chain ended after %d node(s): no linked node", len(visited))
                return

            if next_node in visited:
                logger.debug("Chain ended after %d node(s): cycle back to visited node", len(visited))
                return

            node = next_node

    def chain(self, start_node: Any) -> List[Any]:
        """Return all nodes of the chain in walk order."""
        return list(self.walk(start_node))

    def depth(self, start_node: Any) -> int:
        """Count the links followed from start_node to the end of its chain."""
        return len(self.chain(start_node)) - 1

    def __repr__(self) -> str:
        return f"ChainWalker({self.resolver!r})"
