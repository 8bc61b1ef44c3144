"""Shared constants for transtree.

This module provides centralized constants used across the catalog,
runtime, and diagnostics packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Paths: Catalog addressing
- Variants: Plural variant layout and count substitution
- Fallback strings: Debug and missing-id rendering
- Language detection: Environment and default language
- Cache limits: Memory bounds for language-code parsing

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Paths
    "PATH_SEPARATOR",
    # Variants
    "VARIANT_SIZE",
    "SINGULAR_INDEX",
    "PLURAL_INDEX",
    "ZERO_INDEX",
    "COUNT_PLACEHOLDER",
    # Fallback strings
    "COUNT_SUFFIX",
    "LOG_PREFIX",
    # Language detection
    "LANGUAGE_ENV_VAR",
    "DEFAULT_LANGUAGE",
    # Diagnostics
    "DIAGNOSTICS_THREAD_NAME",
    # Cache limits
    "MAX_LANGUAGE_CACHE_SIZE",
]

# ============================================================================
# PATHS
# ============================================================================

# Segment separator for dotted message ids and prefixes.
# "vegetable.root.carrot" addresses catalog["vegetable"]["root"]["carrot"].
PATH_SEPARATOR: str = "."

# ============================================================================
# VARIANTS
# ============================================================================

# Plural variants are exactly [singular, plural, zero].
VARIANT_SIZE: int = 3
SINGULAR_INDEX: int = 0
PLURAL_INDEX: int = 1
ZERO_INDEX: int = 2

# Token replaced with the decimal count in the plural form only.
COUNT_PLACEHOLDER: str = "%n"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Appended to ids rendered in debug mode or as a missing-id fallback.
# Format string - use .format(count=...)
COUNT_SUFFIX: str = " (n. {count})"  # e.g., apple (n. 5)

# Leading tag of every diagnostic line.
LOG_PREFIX: str = "[Translate]"

# ============================================================================
# LANGUAGE DETECTION
# ============================================================================

# Explicit override consulted before the process locale.
LANGUAGE_ENV_VAR: str = "TRANSTREE_LANGUAGE"

# Used when neither the override nor the process locale yields a language.
DEFAULT_LANGUAGE: str = "en"

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Name prefix of the single worker thread that emits diagnostics.
DIAGNOSTICS_THREAD_NAME: str = "transtree-diagnostics"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale instances.
# 128 covers typical multi-region applications (major languages + variants).
MAX_LANGUAGE_CACHE_SIZE: int = 128
