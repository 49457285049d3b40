"""Test fixtures for WalkChainLib consumers.

These helpers make it easy to build chains and to check that a walk
behaves as documented: it does not mutate nodes, and it does not search
the node list when a node has no link.
"""

import copy
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Sequence


class SearchCountingList(list):
    """A list that counts how many elements have been iterated over.

    Pass it as the node_list of an identifier walk to see how much
    searching each resolution step did.

    Example:
        nodes = SearchCountingList([a, b, c])
        walk_chain_id_call(a, nodes, "parent", "id", callback)
        assert nodes.comparisons == 3
    """

    def __init__(self, *args):
        super().__init__(*args)
        self.comparisons = 0
        self.searches = 0

    def __iter__(self) -> Iterator[Any]:
        self.searches += 1
        for item in super().__iter__():
            self.comparisons += 1
            yield item

    def reset_counts(self) -> None:
        """Zero both counters."""
        self.comparisons = 0
        self.searches = 0


def build_chain(ids: Sequence[str],
                link_name: str = "parent",
                id_name: str = "id",
                by_id: bool = False,
                properties: Optional[Dict[str, Dict[str, Any]]] = None) -> List[Dict[str, Any]]:
    """Build a chain of dict nodes, first id linking to the second and so on.

    Args:
        ids: Node identifiers in chain order (start node first)
        link_name: Field that links each node to the next
        id_name: Field holding each node's identifier
        by_id: If True the link holds the next node's id, else the node itself
        properties: Extra fields per node id, e.g. {"a": {"config": {...}}}

    Returns:
        List of nodes in chain order; the last node has no link
    """
    properties = properties or {}
    nodes = [dict({id_name: node_id}, **properties.get(node_id, {})) for node_id in ids]

    for node, next_node in zip(nodes, nodes[1:]):
        node[link_name] = next_node[id_name] if by_id else next_node

    return nodes


def snapshot_nodes(nodes: Sequence[Any]) -> List[Dict[str, Any]]:
    """Capture the fields of each node so they can be compared after a walk.

    Field values are deep-copied, except references to other nodes in
    `nodes`, which are kept as-is so cyclic chains compare without
    recursing. Compare two snapshots with ==.

    Args:
        nodes: Mapping or object nodes

    Returns:
        One dict of fields per node
    """
    snapshots = []
    for node in nodes:
        fields = node if isinstance(node, Mapping) else vars(node)
        snapshots.append({
            name: value if any(value is other for other in nodes) else copy.deepcopy(value)
            for name, value in fields.items()
        })
    return snapshots
