"""Synchronous implementation of WalkChainLib.

This package contains the blocking chain walks: callbacks run inline and
merging happens in the calling thread.
"""

# Core components
from .core import (
    ChainWalker,
    LinkResolver,
    DirectLinkResolver,
    IdLinkResolver,
    create_resolver,
    call_chain,
    merge_chain,
)

# Configuration and planning
from .config import ChainConfig, LinkStrategy, IdMatch
from .planning import ChainPlan, ChainConfigError

# High-level API
from .api import (
    walk_chain_call,
    walk_chain_merge,
    walk_chain_id_call,
    walk_chain_id_merge,
    iter_chain,
    iter_chain_by_id,
)

__all__ = [
    # Core
    'ChainWalker',
    'LinkResolver',
    'DirectLinkResolver',
    'IdLinkResolver',
    'create_resolver',
    'call_chain',
    'merge_chain',
    # Config
    'ChainConfig',
    'LinkStrategy',
    'IdMatch',
    'ChainPlan',
    'ChainConfigError',
    # API
    'walk_chain_call',
    'walk_chain_merge',
    'walk_chain_id_call',
    'walk_chain_id_merge',
    'iter_chain',
    'iter_chain_by_id',
]
