"""Configuration re-export for the sync package.

Configuration lives in the _common package; this module makes it
importable as walkchainlib.sync.config.
"""

from .._common.config import (
    ChainConfig,
    LinkStrategy,
    IdMatch,
)

__all__ = [
    'ChainConfig',
    'LinkStrategy',
    'IdMatch',
]
