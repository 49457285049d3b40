"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Configuration classes (ChainConfig)
- Node field access and the visited-node set
- Link resolvers and the chain walker (pure computation, no I/O)

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import (
    ChainConfig,
    LinkStrategy,
    IdMatch,
)
from .fields import read_field, is_absent
from .visited import VisitedNodes
from .resolvers import (
    LinkResolver,
    DirectLinkResolver,
    IdLinkResolver,
    ids_match,
    create_resolver,
)
from .walker import ChainWalker

__all__ = [
    'ChainConfig',
    'LinkStrategy',
    'IdMatch',
    'read_field',
    'is_absent',
    'VisitedNodes',
    'LinkResolver',
    'DirectLinkResolver',
    'IdLinkResolver',
    'ids_match',
    'create_resolver',
    'ChainWalker',
]
