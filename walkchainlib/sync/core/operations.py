"""Per-node processing strategies for synchronous walks.

Operations decide what happens at each node the ChainWalker yields:
either a callback threads a value along the chain, or a property is
merged from the end of the chain back to the start.
"""

from typing import Any, Callable, List

from ..._common.fields import is_absent, read_field
from ..._common.walker import ChainWalker

ChainCallback = Callable[[Any, Any, Any], Any]
MergeFunction = Callable[[Any, Any], Any]


def call_chain(walker: ChainWalker,
               start_node: Any,
               callback: ChainCallback,
               data: Any = None) -> Any:
    """Run a callback on every node of the chain, threading its result.

    Args:
        walker: ChainWalker for the chain
        start_node: Node to start walking from
        callback: Called as callback(node, last_value, data); last_value is
            None for the start node and the previous return value after that
        data: Passed unchanged to every callback invocation

    Returns:
        Return value of the callback for the last node visited
    """
    value = None
    for node in walker.walk(start_node):
        value = callback(node, value, data)
    return value


def merge_chain(walker: ChainWalker,
                start_node: Any,
                merge_property: str,
                merge_function: MergeFunction) -> Any:
    """Merge a property over the chain, nearer nodes taking precedence.

    Values are folded from the end of the chain towards the start as
    merge_function(farther_value, nearer_value). Nodes with an absent
    value are skipped without a merge call, and merge_function is never
    called with an absent value on either side: the first present value
    from the end of the chain is used as-is.

    Nodes are never mutated; whether the result shares structure with
    node values is up to merge_function.

    Args:
        walker: ChainWalker for the chain
        start_node: Node to start walking from
        merge_property: Field merged across the chain
        merge_function: Combines (farther, nearer) into one value

    Returns:
        Merged value, or None if no node has the property
    """
    local_values: List[Any] = [
        read_field(node, merge_property) for node in walker.walk(start_node)
    ]

    result = local_values.pop()
    for local_value in reversed(local_values):
        if is_absent(local_value):
            continue
        if is_absent(result):
            result = local_value
        else:
            result = merge_function(result, local_value)
    return result
