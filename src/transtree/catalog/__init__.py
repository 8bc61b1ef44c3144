"""Catalog package: data model, path resolution, merging and loading.

Submodules:
    types    - PEP 695 type aliases (Catalog, Leaf, Variant, MessageId, ...)
    nodes    - Structural classification of catalog values
    lookup   - Dotted-path resolution (join_path, lookup)
    merge    - Per-language tree composition (CatalogEntry, merge)
    loading  - CatalogLoader protocol, PathCatalogLoader, load_catalog

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from transtree.catalog.loading import (
    CatalogLoader,
    CatalogLoadResult,
    LoadSummary,
    PathCatalogLoader,
    load_catalog,
)
from transtree.catalog.lookup import join_path, lookup
from transtree.catalog.merge import CatalogEntry, merge, wrap_language
from transtree.catalog.nodes import classify_node, is_leaf, is_plural_variant, is_variant
from transtree.catalog.types import (
    Catalog,
    CatalogNode,
    Count,
    LanguageCode,
    Leaf,
    MessageId,
    PartialCatalog,
    PluralVariant,
    Variant,
)

__all__ = [
    # Path resolution
    "join_path",
    "lookup",
    # Merging
    "CatalogEntry",
    "merge",
    "wrap_language",
    # Loading
    "CatalogLoader",
    "CatalogLoadResult",
    "LoadSummary",
    "PathCatalogLoader",
    "load_catalog",
    # Shape checks
    "classify_node",
    "is_leaf",
    "is_plural_variant",
    "is_variant",
    # Type aliases for user code type annotations
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
