"""Type aliases for the catalog domain.

Provides semantic type aliases used throughout the package and by user
code when annotating catalogs and translate call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping, Sequence
from decimal import Decimal

__all__ = [
    "Catalog",
    "CatalogNode",
    "Count",
    "LanguageCode",
    "Leaf",
    "MessageId",
    "PartialCatalog",
    "PluralVariant",
    "Variant",
]

type MessageId = str
"""Dotted path to a leaf (e.g., 'pear', 'vegetable.root.carrot')."""

type LanguageCode = str
"""Language code as authored in the catalog (e.g., 'it', 'en', 'en-GB')."""

type Count = int | float | Decimal
"""Quantity selecting the plural branch of a variant."""

type PluralVariant = Sequence[str]
"""Exactly three strings: [singular, plural, zero]."""

type Variant = str | PluralVariant
"""A single message, or a plural variant."""

type Leaf = Mapping[LanguageCode, Variant]
"""Language-keyed variants for one message (e.g., {'it': 'Pera', 'en': 'Pear'})."""

type CatalogNode = Catalog | Leaf
"""Any value stored under a catalog key."""

type Catalog = Mapping[str, CatalogNode]
"""Multi-language translation tree keyed by path segment."""

type PartialCatalog = Mapping[str, PartialCatalog | Variant]
"""Single-language tree whose leaves are bare variants."""
