"""Chain planning for WalkChainLib.

The ChainPlan validates a ChainConfig once and assembles the resolver and
walker for it, so the same chain description can be walked many times.
"""

from typing import Any, Iterable, Iterator, List, Optional

from .._common.config import ChainConfig, LinkStrategy
from .._common.resolvers import LinkResolver, create_resolver
from .._common.walker import ChainWalker
from .core.operations import ChainCallback, MergeFunction, call_chain, merge_chain


class ChainConfigError(ValueError):
    """Raised when a chain configuration cannot be used."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Invalid chain configuration: " + "; ".join(self.errors))


class ChainPlan:
    """Validated plan for walking chains.

    The ChainPlan is the bridge between a ChainConfig and execution. It
    rejects malformed configuration up front; once built, walking never
    raises on its own. Only callbacks and merge functions can fail, and
    their exceptions propagate unchanged.
    """

    def __init__(self, config: ChainConfig, node_list: Optional[Iterable[Any]] = None):
        """Create and validate a chain plan.

        Args:
            config: Chain configuration
            node_list: Node collection, required when strategy is BY_ID

        Raises:
            ChainConfigError: If the configuration is invalid
        """
        errors = config.validate()
        if config.strategy == LinkStrategy.BY_ID and node_list is None:
            errors.append("node_list is required when strategy is BY_ID")
        if errors:
            raise ChainConfigError(errors)

        self.config = config
        self.node_list = node_list
        self.resolver: LinkResolver = create_resolver(config, node_list)
        self.walker = ChainWalker(self.resolver)

    def walk(self, start_node: Any) -> Iterator[Any]:
        """Yield the nodes of the chain starting at start_node."""
        return self.walker.walk(start_node)

    def chain(self, start_node: Any) -> List[Any]:
        """Return the nodes of the chain starting at start_node."""
        return self.walker.chain(start_node)

    def call(self, start_node: Any, callback: ChainCallback, data: Any = None) -> Any:
        """Run callback on each node, threading its return value.

        Returns:
            Return value of the callback for the last node visited
        """
        return call_chain(self.walker, start_node, callback, data)

    def merge(self, start_node: Any, merge_function: MergeFunction) -> Any:
        """Merge the configured property over the chain.

        Raises:
            ChainConfigError: If the config has no merge_property
        """
        if self.config.merge_property is None:
            raise ChainConfigError(["merge_property is required for merge"])
        return merge_chain(self.walker, start_node, self.config.merge_property, merge_function)

    def explain(self) -> str:
        """Return a human-readable description of the plan.

        Useful for debugging and logging.
        """
        lines = [
            "Chain Plan:",
            f"  Link field: {self.config.link_name}",
            f"  Strategy: {self.config.strategy.value}",
        ]
        if self.config.strategy == LinkStrategy.BY_ID:
            lines.append(f"  Id field: {self.config.id_name} ({self.config.id_match.value} match)")
        if self.config.merge_property is not None:
            lines.append(f"  Merge property: {self.config.merge_property}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"ChainPlan({self.resolver!r})"
