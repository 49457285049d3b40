"""Link resolution strategies for WalkChainLib.

A LinkResolver answers one question: given the current node, which node
comes next? It is the only part of a walk that knows how nodes are
linked, so the same walker works for direct references and for
identifier lookups.
"""

from abc import ABC, abstractmethod
from numbers import Number
from typing import Any, Iterable, Optional

from .config import ChainConfig, IdMatch, LinkStrategy
from .fields import is_absent, read_field


class LinkResolver(ABC):
    """Abstract strategy for finding the next node in a chain."""

    def __init__(self, link_name: Any):
        """Initialize resolver with the link field name.

        Args:
            link_name: Field that links a node to the next one
        """
        self.link_name = link_name

    @abstractmethod
    def resolve(self, node: Any) -> Optional[Any]:
        """Return the next node, or None if the chain ends here.

        Args:
            node: The current node

        Returns:
            Next node or None
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(link_name={self.link_name!r})"


class DirectLinkResolver(LinkResolver):
    """Link field holds the next node itself."""

    def resolve(self, node: Any) -> Optional[Any]:
        next_node = read_field(node, self.link_name)
        if is_absent(next_node):
            return None
        return next_node


class IdLinkResolver(LinkResolver):
    """Link field holds an identifier looked up in a node list.

    The node list is scanned front to back on every step and the first
    match wins. Identifiers are assumed unique; duplicates are not
    reported. Callers with large collections should index them first.
    """

    def __init__(self,
                 node_list: Iterable[Any],
                 link_name: Any,
                 id_name: Any,
                 id_match: IdMatch = IdMatch.STRICT):
        """Initialize resolver.

        Args:
            node_list: Collection searched for the linked node
            link_name: Field holding the identifier of the next node
            id_name: Field holding a node's own identifier
            id_match: Identifier comparison mode
        """
        super().__init__(link_name)
        self.node_list = node_list
        self.id_name = id_name
        self.id_match = id_match

    def resolve(self, node: Any) -> Optional[Any]:
        link_id = read_field(node, self.link_name)

        # Must stop before searching, or a node without an id would match
        if is_absent(link_id):
            return None

        for candidate in self.node_list:
            if ids_match(link_id, read_field(candidate, self.id_name), self.id_match):
                return candidate
        return None

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(link_name={self.link_name!r}, "
                f"id_name={self.id_name!r}, id_match={self.id_match.value})")


def _is_plain_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def ids_match(link_id: Any, node_id: Any, id_match: IdMatch = IdMatch.STRICT) -> bool:
    """Compare a link identifier to a node identifier.

    Args:
        link_id: Identifier stored in the link field
        node_id: Identifier of a candidate node
        id_match: STRICT for plain equality, LOOSE to also match numeric
            strings against numbers (a blank string counts as 0)

    Returns:
        True if the candidate is the linked node
    """
    if is_absent(node_id):
        return False
    if link_id == node_id:
        return True
    if id_match != IdMatch.LOOSE:
        return False

    if isinstance(link_id, str) and _is_plain_number(node_id):
        text, number = link_id, node_id
    elif isinstance(node_id, str) and _is_plain_number(link_id):
        text, number = node_id, link_id
    else:
        return False

    text = text.strip()
    if not text:
        return number == 0
    try:
        return float(text) == number
    except ValueError:
        return False


def create_resolver(config: ChainConfig, node_list: Optional[Iterable[Any]] = None) -> LinkResolver:
    """Create a resolver instance from a chain configuration.

    Args:
        config: Chain configuration
        node_list: Node collection, required for BY_ID

    Returns:
        LinkResolver instance

    Raises:
        ValueError: If the strategy is not recognized or BY_ID has no node list
    """
    if config.strategy == LinkStrategy.DIRECT:
        return DirectLinkResolver(config.link_name)

    if config.strategy == LinkStrategy.BY_ID:
        if node_list is None:
            raise ValueError("node_list is required for BY_ID resolution")
        return IdLinkResolver(node_list, config.link_name, config.id_name, config.id_match)

    raise ValueError(
        f"Unknown link strategy: {config.strategy}. "
        f"Choose from: {', '.join(s.value for s in LinkStrategy)}"
    )
