"""Translator: catalog plus current language, bound together.

Translator is the binding-layer facade over the stateless engine. It owns
the mutable language cell and the diagnostics emitter, snapshots its
settings into a TranslationConfig on every call, and hands the call to
translate().

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Protocol

from transtree.diagnostics.emitter import DiagnosticsEmitter, get_default_emitter
from transtree.diagnostics.validation import ValidationResult, check_missing_translations
from transtree.locale_utils import detect_language
from transtree.localization.state import LanguageListener, LanguageState
from transtree.runtime.engine import ResolutionRequest, TranslationConfig, translate

if TYPE_CHECKING:
    from transtree.catalog.types import Catalog, Count, LanguageCode, MessageId

__all__ = ["PrefixedTranslate", "Translator"]

logger = logging.getLogger(__name__)


class PrefixedTranslate(Protocol):
    """Signature of the callable returned by Translator.with_prefix()."""

    def __call__(
        self,
        message_id: MessageId,
        *,
        count: Count | None = None,
        prefix: str | None = None,
        return_id_if_missing: bool = True,
    ) -> str | None: ...


class Translator:
    """Multi-language message lookup with a switchable current language.

    Example:
        >>> catalog = {
        ...     "pear": {"it": "Pera", "en": "Pear"},
        ...     "sub": {"strawberry": {"it": ["1 fragola", "%n fragole", "0 fragole"]}},
        ... }
        >>> translator = Translator(catalog, language="it")
        >>> translator.t("pear")
        'Pera'
        >>> translator.t("strawberry", prefix="sub", count=10)
        '10 fragole'
        >>> translator.set_language("en")
        >>> translator.t("pear")
        'Pear'

    Attributes:
        fallback_language: Language consulted when the current one lacks a path
        suppress_warnings: Disable missing-translation diagnostics
        show_ids: Debug mode, t() returns ids instead of translations
    """

    __slots__ = (
        "_catalog",
        "_emitter",
        "_state",
        "fallback_language",
        "show_ids",
        "suppress_warnings",
    )

    def __init__(
        self,
        catalog: Catalog,
        *,
        language: LanguageCode | None = None,
        fallback_language: LanguageCode | None = None,
        suppress_warnings: bool = False,
        show_ids: bool = False,
        emitter: DiagnosticsEmitter | None = None,
    ) -> None:
        """Initialize a translator.

        Args:
            catalog: Multi-language catalog (see merge() for building one)
            language: Initial language; detected from the environment if None
            fallback_language: Language consulted when ``language`` lacks a path
            suppress_warnings: Disable missing-translation diagnostics
            show_ids: Debug mode, return ids instead of translations
            emitter: Diagnostics channel (defaults to the process-wide emitter)

        Raises:
            ValueError: If language is empty
        """
        self._catalog = catalog
        self._state = LanguageState(language if language is not None else detect_language())
        self._emitter = emitter
        self.fallback_language = fallback_language
        self.suppress_warnings = suppress_warnings
        self.show_ids = show_ids

        logger.debug(
            "Translator initialized (language=%s, fallback=%s, show_ids=%s)",
            self._state.get(),
            fallback_language,
            show_ids,
        )

    def __repr__(self) -> str:
        return (
            f"Translator(language={self.language!r}, "
            f"fallback_language={self.fallback_language!r})"
        )

    @property
    def language(self) -> LanguageCode:
        """Current language (read at every t() call)."""
        return self._state.get()

    @property
    def catalog(self) -> Catalog:
        """Catalog translations are read from."""
        return self._catalog

    @property
    def emitter(self) -> DiagnosticsEmitter:
        """Diagnostics channel used by t()."""
        return self._emitter if self._emitter is not None else get_default_emitter()

    @property
    def config(self) -> TranslationConfig:
        """Snapshot of the current settings."""
        return TranslationConfig(
            language=self._state.get(),
            fallback_language=self.fallback_language,
            suppress_warnings=self.suppress_warnings,
            show_ids=self.show_ids,
        )

    def set_language(self, language: LanguageCode) -> None:
        """Switch the current language; later t() calls observe it.

        Raises:
            ValueError: If language is empty or not a string
        """
        self._state.set(language)

    def set_catalog(self, catalog: Catalog) -> None:
        """Replace the catalog (e.g., to switch datasets)."""
        self._catalog = catalog

    def subscribe(self, listener: LanguageListener) -> Callable[[], None]:
        """Be notified with (old, new) on language changes.

        Returns:
            Callable that removes the listener
        """
        return self._state.subscribe(listener)

    def t(
        self,
        message_id: MessageId,
        *,
        count: Count | None = None,
        prefix: str | None = None,
        return_id_if_missing: bool = True,
    ) -> str | None:
        """Translate a message id in the current language.

        Args:
            message_id: Dotted path (relative to prefix when one is given)
            count: Quantity selecting the plural branch
            prefix: Path prepended to the id
            return_id_if_missing: Return the id (True) or None (False) on a miss

        Returns:
            Translation, the id on a miss, or None
        """
        request = ResolutionRequest(
            id=message_id,
            prefix=prefix,
            count=count,
            return_id_if_missing=return_id_if_missing,
        )
        return translate(self._catalog, request, self.config, emitter=self.emitter)

    def with_prefix(self, prefix: str) -> PrefixedTranslate:
        """Return a t() bound to a prefix.

        A prefix passed to the returned callable replaces the bound one.

        Example:
            >>> t = translator.with_prefix("sub")
            >>> t("orange")  # same as translator.t("sub.orange")
        """
        bound_prefix = prefix

        def prefixed(
            message_id: MessageId,
            *,
            count: Count | None = None,
            prefix: str | None = None,
            return_id_if_missing: bool = True,
        ) -> str | None:
            return self.t(
                message_id,
                count=count,
                prefix=prefix or bound_prefix,
                return_id_if_missing=return_id_if_missing,
            )

        return prefixed

    def check_missing_translations(
        self, languages: Iterable[LanguageCode] | None = None
    ) -> ValidationResult:
        """Check the catalog for missing and inconsistent translations.

        See check_missing_translations() for the reported conditions.
        """
        return check_missing_translations(self._catalog, languages)
