"""Path resolution over nested catalogs.

Addressing is exact: a dotted path is split into segments and the catalog
is descended one segment at a time. No partial matching or prefix guessing
is performed.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from transtree.catalog.types import Catalog, CatalogNode, MessageId
from transtree.constants import PATH_SEPARATOR

__all__ = ["join_path", "lookup"]

logger = logging.getLogger(__name__)


def join_path(message_id: MessageId, prefix: str | None = None) -> str:
    """Compose the full catalog path for an id and an optional prefix.

    Example:
        >>> join_path("carrot", "vegetable.root")
        'vegetable.root.carrot'
        >>> join_path("pear")
        'pear'
    """
    if prefix:
        return f"{prefix}{PATH_SEPARATOR}{message_id}"
    return message_id


def lookup(catalog: Catalog, full_path: str) -> CatalogNode | None:
    """Return the node stored at ``full_path``, or None.

    Descends one segment at a time and stops at the first segment that is
    absent, or as soon as the current node is not a mapping (a leaf or a
    malformed value reached before the path is exhausted). Never raises
    for malformed catalogs.

    Args:
        catalog: Multi-language catalog
        full_path: Dotted path (prefix already applied)

    Returns:
        The node at the path (usually a Leaf), or None

    Example:
        >>> catalog = {"vegetable": {"root": {"carrot": {"it": "Carota"}}}}
        >>> lookup(catalog, "vegetable.root.carrot")
        {'it': 'Carota'}
        >>> lookup(catalog, "vegetable.leaf.carrot") is None
        True
    """
    node: object = catalog
    for segment in full_path.split(PATH_SEPARATOR):
        if not isinstance(node, Mapping):
            logger.debug("Path '%s' descends past a non-catalog node", full_path)
            return None
        node = node.get(segment)
        if node is None:
            return None
    return node  # type: ignore[return-value]
