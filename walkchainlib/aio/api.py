"""High-level async API for WalkChainLib.

Async counterparts of the call-mode functions in walkchainlib.sync.
Merging has no async form since merge functions are plain computations.
"""

from typing import Any, Iterable

from .config import ChainConfig, IdMatch
from .core.operations import AsyncChainCallback
from .planning import AsyncChainPlan


async def walk_chain_call_async(
    start_node: Any,
    link_name: Any,
    callback: AsyncChainCallback,
    data: Any = None,
) -> Any:
    """Walk a chain of directly linked nodes, awaiting callback on each.

    Callbacks run strictly one after another in chain order. If a
    callback raises, the walk stops and the exception propagates.

    Args:
        start_node: Node to start walking from
        link_name: Field holding the next node
        callback: Async callable, called as callback(node, last_value, data)
        data: Passed unchanged to every callback invocation

    Returns:
        Result of the last callback

    Example:
        >>> async def collect(node, acc, data):
        ...     return (acc or []) + [node["id"]]
        >>> await walk_chain_call_async(leaf, "parent", collect)
        ['leaf', 'middle', 'root']
    """
    plan = AsyncChainPlan(ChainConfig.direct(link_name))
    return await plan.call(start_node, callback, data)


async def walk_chain_id_call_async(
    start_node: Any,
    node_list: Iterable[Any],
    link_name: Any,
    id_name: Any,
    callback: AsyncChainCallback,
    data: Any = None,
    id_match: IdMatch = IdMatch.STRICT,
) -> Any:
    """Walk a chain of nodes linked by identifier, awaiting callback on each.

    Args:
        start_node: Node to start walking from
        node_list: Nodes searched for each linked node
        link_name: Field holding the identifier of the next node
        id_name: Field holding a node's own identifier
        callback: Async callable, called as callback(node, last_value, data)
        data: Passed unchanged to every callback invocation
        id_match: Identifier comparison mode

    Returns:
        Result of the last callback
    """
    plan = AsyncChainPlan(ChainConfig.by_id(link_name, id_name, id_match=id_match), node_list)
    return await plan.call(start_node, callback, data)
