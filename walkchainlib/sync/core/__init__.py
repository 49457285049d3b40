"""Core components for synchronous chain walks."""

from ..._common.walker import ChainWalker
from ..._common.resolvers import (
    LinkResolver,
    DirectLinkResolver,
    IdLinkResolver,
    create_resolver,
)
from .operations import call_chain, merge_chain

__all__ = [
    "ChainWalker",
    "LinkResolver",
    "DirectLinkResolver",
    "IdLinkResolver",
    "create_resolver",
    "call_chain",
    "merge_chain",
]
