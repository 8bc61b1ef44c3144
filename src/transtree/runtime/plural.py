"""Three-slot plural selection.

Plural variants are [singular, plural, zero]. This covers the three
cardinalities that matter for UI text (one, many, none) without a CLDR
plural-rule engine. The plural form may contain "%n", replaced with the
count so a single string serves arbitrary quantities.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from decimal import Decimal

from transtree.catalog.nodes import is_plural_variant
from transtree.catalog.types import Count
from transtree.constants import COUNT_PLACEHOLDER, PLURAL_INDEX, SINGULAR_INDEX, ZERO_INDEX

__all__ = ["format_count", "is_count", "select_variant"]


def is_count(value: object) -> bool:
    """Check that a value is usable as a count (bool and Decimal NaN excluded).

    Decimal NaN raises InvalidOperation on comparison, so it is treated as
    no count at all.
    """
    match value:
        case bool():
            return False
        case Decimal():
            return not value.is_nan()
        case int() | float():
            return True
        case _:
            return False


def format_count(count: Count) -> str:
    """Render a count as a decimal string.

    Integral floats render without a fractional part, so 10.0 and 10 both
    render as "10".

    Example:
        >>> format_count(10)
        '10'
        >>> format_count(10.0)
        '10'
        >>> format_count(2.5)
        '2.5'
    """
    if isinstance(count, float) and count.is_integer():
        return str(int(count))
    return str(count)


def select_variant(variant: object, count: Count | None = None) -> str | None:
    """Pick the string for ``count`` from one language's variant.

    Selection order:
    - single string: returned as is, count ignored
    - plural variant with count > 1: plural form, "%n" replaced by the count
    - plural variant with count == 0: zero form, no substitution
    - plural variant otherwise (count 1, negative, fractional <= 1, absent):
      singular form

    Args:
        variant: Value stored for one language in a leaf
        count: Optional quantity

    Returns:
        Selected string, or None when the variant is malformed

    Example:
        >>> strawberries = ["1 strawberry", "%n strawberries", "0 strawberries"]
        >>> select_variant(strawberries, 10)
        '10 strawberries'
        >>> select_variant(strawberries, 0)
        '0 strawberries'
        >>> select_variant(strawberries)
        '1 strawberry'
    """
    if isinstance(variant, str):
        return variant
    if not is_plural_variant(variant):
        return None

    if count is None or not is_count(count):
        return variant[SINGULAR_INDEX]

    if count > 1:
        plural = variant[PLURAL_INDEX]
        if COUNT_PLACEHOLDER in plural:
            return plural.replace(COUNT_PLACEHOLDER, format_count(count))
        return plural
    if count == 0:
        return variant[ZERO_INDEX]
    return variant[SINGULAR_INDEX]
