"""Diagnostic system for transtree.

Provides diagnostic codes, the exception hierarchy, the deferred emitter
for missing-translation warnings, and catalog completeness validation.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode, DiagnosticEvent
from .emitter import DiagnosticsEmitter, classify, get_default_emitter
from .errors import (
    CatalogLoadError,
    CatalogMergeError,
    TranslateError,
    TranslatorContextError,
)
from .validation import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_missing_translations,
)

__all__ = [
    "CatalogLoadError",
    "CatalogMergeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticEvent",
    "DiagnosticsEmitter",
    "TranslateError",
    "TranslatorContextError",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_missing_translations",
    "classify",
    "get_default_emitter",
]
