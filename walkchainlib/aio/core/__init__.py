"""Core components for asynchronous chain walks."""

from ..._common.walker import ChainWalker
from .operations import AsyncChainCallback, call_chain_async

__all__ = [
    'ChainWalker',
    'AsyncChainCallback',
    'call_chain_async',
]
