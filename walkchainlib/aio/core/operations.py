"""Per-node processing for asynchronous walks.

Callbacks may be coroutines. Each one is awaited before the next link is
resolved, so callbacks along a chain never overlap even when their
completion times differ.
"""

import inspect
from typing import Any, Awaitable, Callable, Union

from ..._common.walker import ChainWalker

AsyncChainCallback = Callable[[Any, Any, Any], Union[Awaitable[Any], Any]]


async def call_chain_async(walker: ChainWalker,
                           start_node: Any,
                           callback: AsyncChainCallback,
                           data: Any = None) -> Any:
    """Run an async callback on every node of the chain, threading its result.

    Args:
        walker: ChainWalker for the chain
        start_node: Node to start walking from
        callback: Called as callback(node, last_value, data); may return an
            awaitable, which is awaited before the walk continues
        data: Passed unchanged to every callback invocation

    Returns:
        Result of the callback for the last node visited
    """
    value = None
    for node in walker.walk(start_node):
        result = callback(node, value, data)
        if inspect.isawaitable(result):
            result = await result
        value = result
    return value
