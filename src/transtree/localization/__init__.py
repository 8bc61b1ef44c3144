"""Binding layer over the resolution engine.

Provides the stateful pieces the engine deliberately lacks: a current
language with change notification, the Translator facade, and scoped
access to the current translator.

Submodules:
    state       - LanguageState (observable language cell)
    translator  - Translator (t, with_prefix, set_language)
    context     - translator_context, get_translator, t, set_language

Python 3.13+.
"""

from transtree.localization.context import get_translator, set_language, t, translator_context
from transtree.localization.state import LanguageListener, LanguageState
from transtree.localization.translator import PrefixedTranslate, Translator

__all__ = [
    "LanguageListener",
    "LanguageState",
    "PrefixedTranslate",
    "Translator",
    "get_translator",
    "set_language",
    "t",
    "translator_context",
]
