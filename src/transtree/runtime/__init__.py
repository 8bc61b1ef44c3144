"""Resolution runtime.

Provides plural selection and the translate() engine.
Depends on the catalog package for lookup and on diagnostics for reporting.

Python 3.13+.
"""

from .engine import ResolutionRequest, TranslationConfig, format_id, translate
from .plural import format_count, is_count, select_variant

__all__ = [
    "ResolutionRequest",
    "TranslationConfig",
    "format_count",
    "format_id",
    "is_count",
    "select_variant",
    "translate",
]
