"""Configuration re-export for the aio package."""

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
