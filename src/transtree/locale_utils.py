"""Language-code utilities backed by Babel.

Centralizes language-code normalization and default language detection.
Catalog keys are never rewritten by these helpers: catalogs are addressed
with the codes they were authored with, these functions only derive codes
(e.g., the process default) that callers then use for lookup.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError, default_locale

from transtree.constants import DEFAULT_LANGUAGE, LANGUAGE_ENV_VAR, MAX_LANGUAGE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "detect_language",
    "get_babel_locale",
    "normalize_language",
    "primary_language",
]


def normalize_language(language_code: str) -> str:
    """Convert BCP-47 language code to POSIX format for Babel.

    BCP-47 uses hyphens (en-GB), while Babel/POSIX uses underscores (en_GB).

    Args:
        language_code: BCP-47 code (e.g., "en-GB", "pt-BR")

    Returns:
        POSIX-formatted code (e.g., "en_GB", "pt_BR")

    Example:
        >>> normalize_language("en-GB")
        'en_GB'
        >>> normalize_language("it")
        'it'
    """
    return language_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LANGUAGE_CACHE_SIZE)
def get_babel_locale(language_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        language_code: Language code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If the language is not recognized
        ValueError: If the code format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_language(language_code))


def primary_language(language_code: str) -> str:
    """Reduce a language code to its primary language subtag.

    Uses Babel's CLDR data when the code is known, and otherwise keeps
    everything before the first "-" or "_".

    Example:
        >>> primary_language("en-GB")
        'en'
        >>> primary_language("it_IT.UTF-8")
        'it'
    """
    code = language_code.split(".")[0].split("@")[0]
    try:
        return get_babel_locale(code).language
    except (UnknownLocaleError, ValueError, TypeError):
        return normalize_language(code).split("_")[0].lower()


def detect_language() -> str:
    """Detect the default language for a new Translator.

    Detection order:
    1. TRANSTREE_LANGUAGE environment variable
    2. Babel default_locale() (LANGUAGE, LC_ALL, LC_CTYPE, LANG)
    3. "en"

    The result is reduced to the primary language subtag, so "it_IT.UTF-8"
    detects as "it".

    Returns:
        Primary language code
    """
    explicit = os.environ.get(LANGUAGE_ENV_VAR, "").strip()
    if explicit:
        return primary_language(explicit)

    detected = default_locale()
    if detected and detected not in ("C", "POSIX"):
        return primary_language(detected)

    return DEFAULT_LANGUAGE
