"""Async chain planning.

AsyncChainPlan reuses the synchronous plan for validation, resolution and
merging, and replaces the call operation with one that awaits callbacks.
"""

from typing import Any

from ..sync.planning import ChainPlan
from .core.operations import AsyncChainCallback, call_chain_async


class AsyncChainPlan(ChainPlan):
    """Validated plan for walking chains with async callbacks.

    Link resolution stays synchronous: nodes are already in memory, so
    the only suspension points are the callbacks themselves.
    """

    async def call(self, start_node: Any, callback: AsyncChainCallback, data: Any = None) -> Any:
        """Run callback on each node, awaiting each result before moving on.

        Returns:
            Result of the callback for the last node visited
        """
        return await call_chain_async(self.walker, start_node, callback, data)

    def __repr__(self) -> str:
        return f"AsyncChainPlan({self.resolver!r})"
