"""Testing utilities for WalkChainLib consumers."""

from .fixtures import SearchCountingList, build_chain, snapshot_nodes

__all__ = ['SearchCountingList', 'build_chain', 'snapshot_nodes']
