"""Scoped access to the current Translator.

Code deep in a call stack (request handlers, renderers) reaches the
translator of the enclosing scope through get_translator() instead of
threading it through every signature. Scopes are opened with
translator_context() and are per thread / per asyncio task.

Calling an accessor outside any scope is a programmer error and raises
TranslatorContextError immediately.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

from transtree.diagnostics.codes import Diagnostic, DiagnosticCode
from transtree.diagnostics.errors import TranslatorContextError

if TYPE_CHECKING:
    from transtree.catalog.types import Count, LanguageCode, MessageId
    from transtree.localization.translator import Translator

__all__ = [
    "get_translator",
    "set_language",
    "t",
    "translator_context",
]

_current_translator: ContextVar[Translator | None] = ContextVar(
    "transtree_current_translator", default=None
)


@contextmanager
def translator_context(translator: Translator) -> Generator[Translator]:
    """Make ``translator`` current for the enclosed block.

    Scopes nest; leaving a scope restores the enclosing translator.

    Example:
        >>> with translator_context(Translator(catalog, language="it")):
        ...     t("pear")
        'Pera'
    """
    token = _current_translator.set(translator)
    try:
        yield translator
    finally:
        _current_translator.reset(token)


def get_translator() -> Translator:
    """Return the translator of the enclosing translator_context().

    Raises:
        TranslatorContextError: If called outside translator_context()
    """
    translator = _current_translator.get()
    if translator is None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.NO_TRANSLATOR,
            message="get_translator must be used within a translator_context",
            hint="Wrap the call in 'with translator_context(translator):'",
        )
        raise TranslatorContextError(diagnostic)
    return translator


def t(
    message_id: MessageId,
    *,
    count: Count | None = None,
    prefix: str | None = None,
    return_id_if_missing: bool = True,
) -> str | None:
    """Translate with the current translator (see Translator.t)."""
    return get_translator().t(
        message_id,
        count=count,
        prefix=prefix,
        return_id_if_missing=return_id_if_missing,
    )


def set_language(language: LanguageCode) -> None:
    """Switch the current translator's language (see Translator.set_language)."""
    get_translator().set_language(language)
