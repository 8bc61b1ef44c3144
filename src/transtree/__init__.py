"""transtree - nested multi-language message catalogs.

Resolves dotted message ids against a hierarchical catalog in a target
language, with three-slot pluralization, prefix scoping, a fallback
language, a debug mode that shows ids, and deferred diagnostics for
missing translations.

Public API:
    Translator - Catalog plus switchable current language (t, with_prefix)
    translate - Stateless resolution of one ResolutionRequest
    ResolutionRequest - Id, prefix, count and miss policy of one call
    TranslationConfig - Language, fallback language and flags of one call
    merge - Combine per-language trees into one catalog
    load_catalog - Load per-language JSON resources and merge them
    check_missing_translations - Report incomplete leaves

Exceptions:
    TranslateError - Base exception class
    TranslatorContextError - Accessor used outside translator_context()
    CatalogMergeError - Conflicting per-language trees
    CatalogLoadError - Resource that does not hold a catalog

Submodules:
    transtree.catalog - Catalog types, lookup, merge, loading
    transtree.runtime - Plural selection and the engine
    transtree.diagnostics - Codes, errors, emitter, validation
    transtree.localization - LanguageState, Translator, context accessors
"""

# Essential Public API - Minimal exports for clean namespace
from .catalog import CatalogEntry, PathCatalogLoader, load_catalog, merge
from .diagnostics import (
    CatalogLoadError,
    CatalogMergeError,
    DiagnosticsEmitter,
    TranslateError,
    TranslatorContextError,
    check_missing_translations,
)
from .localization import Translator, get_translator, translator_context
from .runtime import ResolutionRequest, TranslationConfig, translate

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("transtree")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogEntry",
    "CatalogLoadError",
    "CatalogMergeError",
    "DiagnosticsEmitter",
    "PathCatalogLoader",
    "ResolutionRequest",
    "TranslateError",
    "TranslationConfig",
    "Translator",
    "TranslatorContextError",
    "__version__",
    "check_missing_translations",
    "get_translator",
    "load_catalog",
    "merge",
    "translate",
    "translator_context",
]
