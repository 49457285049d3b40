"""Configuration system for WalkChainLib.

This module defines how users describe a chain: which field links a node
to the next one, how that link is resolved, and which property is merged.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List


class LinkStrategy(Enum):
    """How the link field leads to the next node."""
    DIRECT = "direct"   # Link field holds the next node itself
    BY_ID = "by_id"     # Link field holds an identifier looked up in a node list


class IdMatch(Enum):
    """How a link identifier is compared to a node identifier.

    STRICT is plain Python equality. LOOSE also lets a numeric string
    match the number it spells ("7" matches 7, a blank string matches 0),
    for data that mixes string and numeric keys.
    """
    STRICT = "strict"
    LOOSE = "loose"


@dataclass
class ChainConfig:
    """Complete description of a chain.

    This is the primary way users specify how nodes are linked. The
    ChainPlan validates it before any node is touched.
    """

    # Field on each node naming the next node (or its identifier)
    link_name: Any = None

    # Resolution
    strategy: LinkStrategy = LinkStrategy.DIRECT
    id_name: Any = None                # Identifier field, BY_ID only
    id_match: IdMatch = IdMatch.STRICT

    # Merge mode
    merge_property: Any = None

    @classmethod
    def direct(cls, link_name: Any, merge_property: Any = None) -> 'ChainConfig':
        """Create config for chains linked by direct reference.

        Args:
            link_name: Field holding the next node
            merge_property: Field merged across the chain (merge mode only)

        Returns:
            ChainConfig for direct links
        """
        return cls(
            link_name=link_name,
            strategy=LinkStrategy.DIRECT,
            merge_property=merge_property,
        )

    @classmethod
    def by_id(cls,
              link_name: Any,
              id_name: Any,
              merge_property: Any = None,
              id_match: IdMatch = IdMatch.STRICT) -> 'ChainConfig':
        """Create config for chains linked by identifier.

        Args:
            link_name: Field holding the identifier of the next node
            id_name: Field holding a node's own identifier
            merge_property: Field merged across the chain (merge mode only)
            id_match: Identifier comparison mode

        Returns:
            ChainConfig for identifier links
        """
        return cls(
            link_name=link_name,
            strategy=LinkStrategy.BY_ID,
            id_name=id_name,
            id_match=id_match,
            merge_property=merge_property,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Field names may be any hashable value: strings for attributes and
        string keys, or other keys (ints, tuples) for mapping nodes.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not _is_field_name(self.link_name):
            errors.append("link_name must be a hashable field name")

        if not isinstance(self.strategy, LinkStrategy):
            errors.append(f"unknown link strategy: {self.strategy!r}")

        if not isinstance(self.id_match, IdMatch):
            errors.append(f"unknown id match mode: {self.id_match!r}")

        if self.strategy == LinkStrategy.BY_ID and not _is_field_name(self.id_name):
            errors.append("id_name is required when strategy is BY_ID")

        if self.merge_property is not None and not _is_field_name(self.merge_property):
            errors.append("merge_property must be a hashable field name")

        return errors


def _is_field_name(name: Any) -> bool:
    if name is None:
        return False
    try:
        hash(name)
    except TypeError:
        return False
    return True
