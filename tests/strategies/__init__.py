"""Hypothesis strategies for transtree property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules. Strategies are organized by domain:

- catalog: Path segments, variants, partial trees and counts

Usage:
    from tests.strategies import partial_trees, plural_variants
    from tests.strategies.catalog import walk_variants

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - plural_variants, partial_trees
"""

from .catalog import (
    counts,
    language_codes,
    message_texts,
    partial_trees,
    path_segments,
    plural_variants,
    variants,
    walk_variants,
)

__all__ = [
    "counts",
    "language_codes",
    "message_texts",
    "partial_trees",
    "path_segments",
    "plural_variants",
    "variants",
    "walk_variants",
]
