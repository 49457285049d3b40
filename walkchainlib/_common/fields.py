"""Field access for chain nodes.

Nodes are opaque to WalkChainLib. A field is read by key when the node is
a mapping (dicts, JSON-like config blobs) and by attribute otherwise
(dataclasses, plain objects, namedtuples).

A field is "absent" when it is missing or holds None.
"""

import inspect
from collections.abc import Mapping
from typing import Any


def read_field(node: Any, name: Any) -> Any:
    """Read a named field from a node.

    Mapping nodes accept any hashable key. Other nodes are read by
    attribute, so a non-string name simply finds nothing there.

    An AttributeError raised from inside a property or __getattr__ is
    a bug in the node, not a missing field, and propagates.

    Args:
        node: Mapping or object to read from
        name: Key or attribute name

    Returns:
        The field value, or None if the node has no such field
    """
    if isinstance(node, Mapping):
        return node.get(name)
    if not isinstance(name, str):
        return None
    try:
        return getattr(node, name)
    except AttributeError:
        try:
            inspect.getattr_static(node, name)
        except AttributeError:
            return None
        raise


def is_absent(value: Any) -> bool:
    """Check if a field value counts as absent."""
    return value is None
