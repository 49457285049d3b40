"""Asynchronous implementation of WalkChainLib.

This package contains async/await chain walks. Each per-node callback is
awaited to completion before the walk moves on, so a chain is always
processed sequentially.
"""

# Core
from .core import (
    ChainWalker,
    AsyncChainCallback,
    call_chain_async,
)

# Planning
from .planning import AsyncChainPlan

# High-level API
from .api import (
    walk_chain_call_async,
    walk_chain_id_call_async,
)

# Configuration (re-exported from _common)
from .config import (
    ChainConfig,
    LinkStrategy,
    IdMatch,
)

__all__ = [
    # Core
    'ChainWalker',
    'AsyncChainCallback',
    'call_chain_async',
    # Planning
    'AsyncChainPlan',
    # Configuration
    'ChainConfig',
    'LinkStrategy',
    'IdMatch',
    # High-level API
    'walk_chain_call_async',
    'walk_chain_id_call_async',
]
