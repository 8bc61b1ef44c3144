"""Translation resolution.

translate() turns a ResolutionRequest into a string:

1. Compose the full path from prefix and id.
2. In debug mode (show_ids), return the path itself, with the count.
3. Look the path up; select from the primary language's variant.
4. When the primary language has no usable variant and a fallback
   language is configured, select from the fallback's variant.
5. Schedule a diagnostic (deferred, never inline).
6. Return the string, or the path (or None) when nothing was found.

The engine holds no state. Language and flags travel in a
TranslationConfig passed to every call, so a language switch made by the
caller is observed by the next call.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from transtree.catalog.lookup import join_path, lookup
from transtree.diagnostics.codes import format_count_suffix
from transtree.diagnostics.emitter import get_default_emitter
from transtree.runtime.plural import select_variant

if TYPE_CHECKING:
    from transtree.catalog.types import Catalog, Count, LanguageCode, MessageId
    from transtree.diagnostics.emitter import DiagnosticsEmitter

__all__ = [
    "ResolutionRequest",
    "TranslationConfig",
    "format_id",
    "translate",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TranslationConfig:
    """Engine-wide settings read by every translate() call.

    Attributes:
        language: Target language
        fallback_language: Language consulted when ``language`` lacks a path
        suppress_warnings: Disable missing-translation diagnostics
        show_ids: Debug mode, return ids instead of translations
    """

    language: LanguageCode
    fallback_language: LanguageCode | None = None
    suppress_warnings: bool = False
    show_ids: bool = False


@dataclass(frozen=True, slots=True)
class ResolutionRequest:
    """One translate() call.

    Attributes:
        id: Dotted message path (relative to prefix when one is given)
        prefix: Path prepended to id with a "." separator
        count: Quantity selecting the plural branch
        return_id_if_missing: Return the path (True) or None (False) on a miss
    """

    id: MessageId
    prefix: str | None = None
    count: Count | None = None
    return_id_if_missing: bool = True

    @property
    def full_path(self) -> str:
        """Path including the prefix."""
        return join_path(self.id, self.prefix)


def format_id(full_path: str, count: Count | None = None) -> str:
    """Render a path as shown in debug mode and for missing translations.

    Example:
        >>> format_id("apple", 5)
        'apple (n. 5)'
        >>> format_id("sub.apple")
        'sub.apple'
    """
    return f"{full_path}{format_count_suffix(count)}"


def _select(node: object, language: LanguageCode, count: Count | None) -> str | None:
    if not isinstance(node, Mapping):
        return None
    variant = node.get(language)
    if variant is None:
        return None
    return select_variant(variant, count)


def translate(
    catalog: Catalog,
    request: ResolutionRequest,
    config: TranslationConfig,
    *,
    emitter: DiagnosticsEmitter | None = None,
) -> str | None:
    """Resolve a request against a catalog.

    Never raises for malformed catalog data: anything of the wrong shape
    is a miss. A language the catalog does not know behaves exactly like a
    language with no translations.

    Args:
        catalog: Multi-language catalog
        request: Id, prefix, count and miss policy
        config: Language, fallback language and flags
        emitter: Diagnostics channel (defaults to the process-wide emitter)

    Returns:
        The translation; on a miss, the path with the count suffix, or
        None when ``request.return_id_if_missing`` is False

    Example:
        >>> catalog = {"pear": {"it": "Pera", "en": "Pear"}}
        >>> translate(catalog, ResolutionRequest("pear"), TranslationConfig("it"))
        'Pera'
        >>> translate(catalog, ResolutionRequest("apple", count=5),
        ...           TranslationConfig("it", show_ids=True))
        'apple (n. 5)'
    """
    full_path = request.full_path
    count = request.count

    if config.show_ids:
        return format_id(full_path, count)

    node = lookup(catalog, full_path)

    value = _select(node, config.language, count)
    using_fallback = False
    if value is None and config.fallback_language:
        using_fallback = True
        value = _select(node, config.fallback_language, count)
        logger.debug(
            "Path '%s' missing in '%s', tried fallback '%s'",
            full_path,
            config.language,
            config.fallback_language,
        )

    (emitter or get_default_emitter()).report(
        found=value is not None,
        using_fallback=using_fallback,
        message_id=full_path,
        language=config.language,
        fallback_language=config.fallback_language,
        count=count,
        suppress_warnings=config.suppress_warnings,
    )

    if value is not None:
        return value
    if request.return_id_if_missing:
        return format_id(full_path, count)
    return None
