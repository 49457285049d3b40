"""High-level API for WalkChainLib.

This module provides simple, functional interfaces for walking chains.
These functions wrap ChainConfig and ChainPlan for the common case where
a chain is walked once with field names given inline.
"""

from typing import Any, Iterable, Iterator

from .config import ChainConfig, IdMatch
from .core.operations import ChainCallback, MergeFunction
from .planning import ChainPlan


def walk_chain_call(
    start_node: Any,
    link_name: Any,
    callback: ChainCallback,
    data: Any = None,
) -> Any:
    """Walk a chain of directly linked nodes, calling callback on each.

    Stops at the node that has no linked node, or whose linked node was
    already visited.

    Args:
        start_node: Node to start walking from
        link_name: Field holding the next node
        callback: Called as callback(node, last_value, data) for each node;
            last_value is None for the start node
        data: Passed unchanged to every callback invocation

    Returns:
        Return value of the last callback

    Example:
        >>> c = {"id": "c"}
        >>> b = {"id": "b", "parent": c}
        >>> a = {"id": "a", "parent": b}
        >>> walk_chain_call(a, "parent", lambda n, acc, _: (acc or "") + n["id"])
        'abc'
    """
    plan = ChainPlan(ChainConfig.direct(link_name))
    return plan.call(start_node, callback, data)


def walk_chain_merge(
    start_node: Any,
    link_name: Any,
    merge_property: Any,
    merge_function: MergeFunction,
) -> Any:
    """Merge a property over a chain of directly linked nodes.

    Values nearer the start node override values further along the chain.
    Absent values are not merged in. Nodes are not mutated.

    Args:
        start_node: Node to start walking from
        link_name: Field holding the next node
        merge_property: Field merged across the chain
        merge_function: Called as merge_function(farther, nearer),
            e.g. a shallow or deep dict merge

    Returns:
        Merged property value (None if no node has one)

    Example:
        >>> base = {"settings": {"color": "red", "size": 1}}
        >>> child = {"settings": {"size": 2}, "parent": base}
        >>> walk_chain_merge(child, "parent", "settings", lambda a, b: {**a, **b})
        {'color': 'red', 'size': 2}
    """
    plan = ChainPlan(ChainConfig.direct(link_name, merge_property=merge_property))
    return plan.merge(start_node, merge_function)


def walk_chain_id_call(
    start_node: Any,
    node_list: Iterable[Any],
    link_name: Any,
    id_name: Any,
    callback: ChainCallback,
    data: Any = None,
    id_match: IdMatch = IdMatch.STRICT,
) -> Any:
    """Walk a chain of nodes linked by identifier, calling callback on each.

    Stops at the node that has no link, whose linked node is not in
    node_list, or whose linked node was already visited. The value of
    id_name is assumed to be unique within node_list; the first match
    is used.

    Args:
        start_node: Node to start walking from
        node_list: Nodes searched for each linked node
        link_name: Field holding the identifier of the next node
        id_name: Field holding a node's own identifier
        callback: Called as callback(node, last_value, data) for each node
        data: Passed unchanged to every callback invocation
        id_match: Identifier comparison mode

    Returns:
        Return value of the last callback
    """
    plan = ChainPlan(ChainConfig.by_id(link_name, id_name, id_match=id_match), node_list)
    return plan.call(start_node, callback, data)


def walk_chain_id_merge(
    start_node: Any,
    node_list: Iterable[Any],
    link_name: Any,
    id_name: Any,
    merge_property: Any,
    merge_function: MergeFunction,
    id_match: IdMatch = IdMatch.STRICT,
) -> Any:
    """Merge a property over a chain of nodes linked by identifier.

    Args:
        start_node: Node to start walking from
        node_list: Nodes searched for each linked node
        link_name: Field holding the identifier of the next node
        id_name: Field holding a node's own identifier
        merge_property: Field merged across the chain
        merge_function: Called as merge_function(farther, nearer)
        id_match: Identifier comparison mode

    Returns:
        Merged property value (None if no node has one)
    """
    config = ChainConfig.by_id(link_name, id_name, merge_property=merge_property, id_match=id_match)
    plan = ChainPlan(config, node_list)
    return plan.merge(start_node, merge_function)


def iter_chain(start_node: Any, link_name: Any) -> Iterator[Any]:
    """Yield the nodes of a directly linked chain in walk order."""
    return ChainPlan(ChainConfig.direct(link_name)).walk(start_node)


def iter_chain_by_id(
    start_node: Any,
    node_list: Iterable[Any],
    link_name: Any,
    id_name: Any,
    id_match: IdMatch = IdMatch.STRICT,
) -> Iterator[Any]:
    """Yield the nodes of an identifier-linked chain in walk order."""
    plan = ChainPlan(ChainConfig.by_id(link_name, id_name, id_match=id_match), node_list)
    return plan.walk(start_node)
