"""Shape classification for catalog values.

Catalogs arrive as plain Python mappings (JSON, literals, merged trees),
so every node is classified structurally before it is used. Anything that
does not match an expected shape classifies as INVALID and is treated as
"not found" by the engine.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TypeIs

from transtree.constants import VARIANT_SIZE
from transtree.enums import NodeKind

__all__ = [
    "classify_node",
    "is_leaf",
    "is_plural_variant",
    "is_variant",
]


def is_plural_variant(value: object) -> TypeIs[Sequence[str]]:
    """Check for a [singular, plural, zero] sequence of strings.

    Strings and bytes are sequences too, but never plural variants.
    """
    match value:
        case str() | bytes() | bytearray():
            return False
        case Sequence() if len(value) == VARIANT_SIZE:
            return all(isinstance(item, str) for item in value)
        case _:
            return False


def is_variant(value: object) -> TypeIs[str | Sequence[str]]:
    """Check for a single string or a plural variant."""
    return isinstance(value, str) or is_plural_variant(value)


def is_leaf(value: object) -> bool:
    """Check for a non-empty mapping whose values are all variants."""
    if not isinstance(value, Mapping) or not value:
        return False
    return all(isinstance(key, str) and is_variant(item) for key, item in value.items())


def classify_node(value: object) -> NodeKind:
    """Classify a catalog value.

    Empty mappings classify as CATALOG: they can still receive children
    during a merge, and hold no languages to look up.

    Example:
        >>> classify_node({"it": "Pera", "en": "Pear"})
        <NodeKind.LEAF: 'leaf'>
        >>> classify_node({"root": {"carrot": {"it": "Carota"}}})
        <NodeKind.CATALOG: 'catalog'>
        >>> classify_node(["1 mela", "%n mele", "0 mele"])
        <NodeKind.VARIANT: 'variant'>
        >>> classify_node(42)
        <NodeKind.INVALID: 'invalid'>
    """
    if is_variant(value):
        return NodeKind.VARIANT
    if is_leaf(value):
        return NodeKind.LEAF
    if isinstance(value, Mapping):
        return NodeKind.CATALOG
    return NodeKind.INVALID
