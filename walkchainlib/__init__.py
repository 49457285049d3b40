"""WalkChainLib - Cycle-safe walks over chains of linked nodes.

WalkChainLib walks "parent" chains such as configuration inheritance,
organizational hierarchies or theme cascades. A chain is followed from a
start node through a link field, either holding the next node directly
or holding an identifier looked up in a node list. At each node it can
thread a value through a callback, or merge a property so that nodes
nearer the start override those further away.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from walkchainlib.sync import walk_chain_call, walk_chain_merge

Asynchronous:
    from walkchainlib.aio import walk_chain_call_async
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from . import sync
from . import aio

__all__ = [
    "__version__",
    "sync",
    "aio",
]
