"""Hypothesis strategies for catalog property-based testing.

Provides reusable strategies for generating catalog test data:
- Path segments (dot-free catalog keys)
- Single-string and [singular, plural, zero] variants
- Single-language partial trees, as authored before merging
- Counts across the accepted numeric types

Event-Emitting Strategies (HypoFuzz-Optimized):
- plural_variants: Emits catalog_plural_placeholder=yes|no
- partial_trees: Emits catalog_tree_width=N

Python 3.13+.
"""

from __future__ import annotations

import string
from collections.abc import Iterator, Mapping
from decimal import Decimal
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

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

_LANGUAGE_POOL = ["it", "en", "de", "fr", "es", "pt", "lv", "ja"]

_SEGMENT_CHARS = string.ascii_lowercase + string.digits + "_-"

language_codes = st.sampled_from(_LANGUAGE_POOL)

path_segments = st.text(alphabet=_SEGMENT_CHARS, min_size=1, max_size=10)

message_texts = st.text(
    alphabet=st.characters(exclude_categories=("Cs",)),
    max_size=30,
)

counts = st.one_of(
    st.integers(min_value=-1000, max_value=10**9),
    st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False),
    st.decimals(
        min_value=Decimal(-1000),
        max_value=Decimal(1000),
        allow_nan=False,
        allow_infinity=False,
        places=2,
    ),
)


@st.composite
def plural_variants(draw: DrawFn) -> list[str]:
    """Generate [singular, plural, zero] variants.

    Events emitted:
    - catalog_plural_placeholder=yes|no
    """
    singular = draw(message_texts)
    plural = draw(message_texts)
    zero = draw(message_texts)
    if draw(st.booleans()):
        plural = f"%n {plural}"
        event("catalog_plural_placeholder=yes")
    else:
        event("catalog_plural_placeholder=no")
    return [singular, plural, zero]


variants = st.one_of(message_texts, plural_variants())


@st.composite
def partial_trees(draw: DrawFn, max_depth: int = 3) -> dict[str, object]:
    """Generate a single-language tree with bare variants as leaves.

    Args:
        max_depth: Maximum nesting of sub-catalogs

    Events emitted:
    - catalog_tree_width=N (top level only)
    """
    keys = draw(st.lists(path_segments, min_size=1, max_size=4, unique=True))
    tree: dict[str, object] = {}
    for key in keys:
        if max_depth > 1 and draw(st.booleans()):
            tree[key] = draw(partial_trees(max_depth=max_depth - 1))
        else:
            tree[key] = draw(variants)
    if max_depth == 3:
        event(f"catalog_tree_width={len(keys)}")
    return tree


def walk_variants(
    tree: Mapping[str, object], path: tuple[str, ...] = ()
) -> Iterator[tuple[str, object]]:
    """Yield (dotted path, variant) for every leaf of a partial tree."""
    for key, value in tree.items():
        if isinstance(value, Mapping):
            yield from walk_variants(value, (*path, key))
        else:
            yield ".".join((*path, key)), value
